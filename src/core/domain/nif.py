"""Validación local del NIF portugués (dígito de control módulo 11).

Función pura: no hace I/O y nunca lanza excepciones ante entradas mal
formadas, simplemente devuelve `False`.
"""

from __future__ import annotations

NIF_LENGTH = 9

_ALLOWED_FIRST_DIGITS = frozenset("12356789")
_ALLOWED_PREFIXES = ("45",)
_DIGITS = frozenset("0123456789")


def compute_check_digit(first_eight: str) -> int:
    """Calcula el dígito de control esperado para los 8 primeros dígitos.

    Pesos 9..2; resto 0 o 1 produce 0, el resto `11 - resto`.
    """

    if len(first_eight) != NIF_LENGTH - 1 or not set(first_eight) <= _DIGITS:
        raise ValueError(f"expected 8 ASCII digits, got {first_eight!r}")

    total = sum(int(d) * (NIF_LENGTH - i) for i, d in enumerate(first_eight))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def has_allowed_prefix(nif: str) -> bool:
    return nif[:1] in _ALLOWED_FIRST_DIGITS or nif.startswith(_ALLOWED_PREFIXES)


def is_nif_valid_local(nif: str) -> bool:
    """Valida un NIF solo con el algoritmo (sin consulta externa)."""

    # str.isdigit() acepta dígitos no ASCII; aquí solo valen 0-9.
    if len(nif) != NIF_LENGTH or not set(nif) <= _DIGITS:
        return False
    if not has_allowed_prefix(nif):
        return False
    return compute_check_digit(nif[:-1]) == int(nif[-1])
