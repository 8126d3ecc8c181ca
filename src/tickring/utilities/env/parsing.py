import os
from enum import StrEnum
from typing import TypeVar

EnumT = TypeVar("EnumT", bound=StrEnum)


def _env_int(env_var: str, *, default: int, minimum: int | None = None) -> int:
    """Return the integer value of ``env_var`` with optional bounds checking."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError as exc:
        raise ValueError(f"{env_var} must be an integer") from exc
    if minimum is not None and parsed < minimum:
        raise ValueError(f"{env_var} must be at least {minimum}")
    return parsed


def _env_str(env_var: str, *, default: str) -> str:
    """Return ``env_var`` stripped, falling back to ``default`` when unset or blank."""

    value = os.environ.get(env_var)
    if value is None or not value.strip():
        return default
    return value.strip()


def _env_enum(env_var: str, enum_type: type[EnumT], *, default: EnumT) -> EnumT:
    """Return ``env_var`` as a member of ``enum_type``, matched case-insensitively."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    normalized = value.strip().lower()
    try:
        return enum_type(normalized)
    except ValueError as exc:
        choices = ", ".join(repr(member.value) for member in enum_type)
        raise ValueError(f"{env_var} must be one of {choices}") from exc
