"""
DTOs de autenticacion del administrador.
"""
from pydantic import BaseModel, Field


class AuthLoginRequestDTO(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class AuthTokenResponseDTO(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Segundos de validez del token")
