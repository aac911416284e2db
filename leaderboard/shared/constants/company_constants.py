"""
Alias de nombres de compañias.

El proveedor a veces reporta subsidiarias o variantes del nombre comercial.
Se normalizan al nombre canonico para que el leaderboard agrupe bien por
compañia. Para agregar un alias nuevo basta con editar COMPANY_ALIASES.
"""
from typing import Dict, List


# nombre canonico -> alias conocidos
COMPANY_ALIASES: Dict[str, List[str]] = {
    "Google": ["Google DeepMind", "DeepMind", "Google AI"],
    "Meta": ["Meta AI", "Facebook", "Facebook AI Research", "FAIR"],
    "Mistral": ["Mistral AI", "MistralAI"],
    "Alibaba": ["Alibaba Cloud", "Qwen", "Alibaba Qwen"],
    "Amazon": ["AWS", "Amazon Web Services"],
    "Microsoft": ["Microsoft Azure", "Microsoft Research"],
    "xAI": ["X.AI", "xAI Corp"],
    "DeepSeek": ["DeepSeek AI", "DeepSeek-AI"],
}


def _build_lookup(aliases: Dict[str, List[str]]) -> Dict[str, str]:
    lookup: Dict[str, str] = {}
    for canonical, names in aliases.items():
        lookup[canonical.casefold()] = canonical
        for alias in names:
            lookup[alias.casefold()] = canonical
    return lookup


_ALIAS_LOOKUP = _build_lookup(COMPANY_ALIASES)


def canonical_company_name(name: str) -> str:
    """
    Retorna el nombre canonico de la compañia (comparacion case-insensitive).
    Si no hay alias registrado se retorna el nombre tal cual.
    """
    return _ALIAS_LOOKUP.get(name.casefold(), name)
