"""Resolution of named attributes into a closed set of value kinds."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from rtf_renderer.model.elements import Color, DocumentObject, Unit
from rtf_renderer.model.errors import TranslationContractError


@dataclass(frozen=True, slots=True)
class LengthValue:
    unit: Unit


@dataclass(frozen=True, slots=True)
class BooleanValue:
    value: bool


@dataclass(frozen=True, slots=True)
class ColorValue:
    color: Color


@dataclass(frozen=True, slots=True)
class EnumValue:
    member: Enum


@dataclass(frozen=True, slots=True)
class IntegerValue:
    value: int


class _Absent:
    """Marker for an attribute that is not set."""

    _instance: Optional["_Absent"] = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()

AttributeValue = Union[LengthValue, BooleanValue, ColorValue, EnumValue, IntegerValue, _Absent]


def read_attribute(obj: DocumentObject, name: str, effective: bool = False) -> Optional[object]:
    """Return the raw value of ``name`` (direct or cascaded), or ``None``."""
    if effective:
        return obj.get_effective_value(name)
    return obj.get_value(name)


def classify_value(raw: Optional[object]) -> AttributeValue:
    """Wrap a raw model value into its value kind.

    ``bool`` is tested before ``int`` because it is a subclass of it.
    """
    if raw is None:
        return ABSENT
    if isinstance(raw, Unit):
        return LengthValue(raw)
    if isinstance(raw, bool):
        return BooleanValue(raw)
    if isinstance(raw, Color):
        return ColorValue(raw)
    if isinstance(raw, Enum):
        return EnumValue(raw)
    if isinstance(raw, int):
        return IntegerValue(raw)
    raise TranslationContractError(f"Unsupported attribute value kind: {type(raw).__name__}")


def resolve_attribute(obj: DocumentObject, name: str, effective: bool = False) -> AttributeValue:
    """Resolve ``name`` on ``obj`` without modifying it."""
    return classify_value(read_attribute(obj, name, effective))
