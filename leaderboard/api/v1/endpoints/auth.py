"""
Endpoints de autenticacion del administrador.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from leaderboard.api.v1.dependencies.use_case_deps import get_auth_use_cases
from leaderboard.application.dto.auth_dto import AuthLoginRequestDTO, AuthTokenResponseDTO
from leaderboard.application.use_cases.auth_use_cases import AuthUseCases


router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/login",
    response_model=AuthTokenResponseDTO,
    status_code=status.HTTP_200_OK,
    summary="Login del administrador (emite JWT)",
)
def login(
    dto: AuthLoginRequestDTO,
    use_cases: AuthUseCases = Depends(get_auth_use_cases),
) -> AuthTokenResponseDTO:
    return use_cases.login(dto.username, dto.password)
