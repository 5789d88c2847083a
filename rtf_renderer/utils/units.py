"""Unit conversion helpers between document lengths and RTF measurements."""
from __future__ import annotations

from enum import Enum

from rtf_renderer.model.elements import Unit

TWIPS_PER_POINT = 20
HALF_POINTS_PER_POINT = 2
EMU_PER_POINT = 12700
POINTS_PER_LINE = 12


class RtfUnit(Enum):
    """Target scales understood by RTF control words."""

    POINTS = "pt"
    HALF_POINTS = "half-pt"
    TWIPS = "twips"
    LINES = "lines"
    EMU = "emu"
    CHAR_UNIT_100 = "char-unit-100"


def to_rtf_unit(unit: Unit, rtf_unit: RtfUnit) -> int:
    """Convert a length into an integer in the requested RTF scale.

    Every scale rounds to the nearest integer (half to even); plain points
    truncate toward zero.
    """
    if rtf_unit is RtfUnit.HALF_POINTS:
        return int(round(unit.point * HALF_POINTS_PER_POINT))
    if rtf_unit is RtfUnit.TWIPS:
        return int(round(unit.point * TWIPS_PER_POINT))
    if rtf_unit is RtfUnit.LINES:
        return int(round(unit.point * POINTS_PER_LINE * TWIPS_PER_POINT))
    if rtf_unit is RtfUnit.EMU:
        return int(round(unit.point * EMU_PER_POINT))
    if rtf_unit is RtfUnit.CHAR_UNIT_100:
        return int(round(unit.pica * 100))
    return int(unit.point)


def to_twips(unit: Unit) -> int:
    """Convert a length to twips (1/20th of a point)."""
    return to_rtf_unit(unit, RtfUnit.TWIPS)


def to_emu(unit: Unit) -> int:
    """Convert a length to English Metric Units."""
    return to_rtf_unit(unit, RtfUnit.EMU)
