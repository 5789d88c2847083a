"""In-memory document object model consumed by the RTF renderers."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

POINTS_PER_INCH = 72.0
POINTS_PER_PICA = 12.0
CM_PER_INCH = 2.54


@dataclass(frozen=True, slots=True)
class Unit:
    """A length stored canonically in points."""

    point: float = 0.0

    @classmethod
    def from_inch(cls, value: float) -> "Unit":
        return cls(value * POINTS_PER_INCH)

    @classmethod
    def from_cm(cls, value: float) -> "Unit":
        return cls(value * POINTS_PER_INCH / CM_PER_INCH)

    @classmethod
    def from_mm(cls, value: float) -> "Unit":
        return cls(value * POINTS_PER_INCH / (CM_PER_INCH * 10))

    @classmethod
    def from_pica(cls, value: float) -> "Unit":
        return cls(value * POINTS_PER_PICA)

    @property
    def pica(self) -> float:
        return self.point / POINTS_PER_PICA

    @property
    def inch(self) -> float:
        return self.point / POINTS_PER_INCH

    def __neg__(self) -> "Unit":
        return Unit(-self.point)


@dataclass(frozen=True, slots=True)
class Color:
    """Opaque RGB color value; renderers map it to a color table index."""

    red: int
    green: int
    blue: int

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse ``#RRGGBB`` (the leading hash is optional)."""
        digits = value.lstrip("#")
        if len(digits) != 6:
            raise ValueError(f"Invalid color literal: {value!r}")
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    @property
    def bgr(self) -> int:
        """Packed value used by shape properties (red in the low byte)."""
        return self.red | (self.green << 8) | (self.blue << 16)


@dataclass(slots=True, eq=False)
class DocumentObject:
    """Base node carrying named attribute values.

    ``base`` is the object values cascade from when the effective value is
    requested, e.g. the paragraph format of a parent style.
    """

    values: Dict[str, object] = field(default_factory=dict)
    base: Optional["DocumentObject"] = None

    def get_value(self, name: str) -> Optional[object]:
        """Return the value set directly on this object, or ``None``."""
        return self.values.get(name)

    def get_effective_value(self, name: str) -> Optional[object]:
        """Return the value after cascading through ``base``, or ``None``."""
        current: Optional[DocumentObject] = self
        while current is not None:
            value = current.values.get(name)
            if value is not None:
                return value
            current = current.base
        return None

    def has_value(self, name: str) -> bool:
        return self.values.get(name) is not None


@dataclass(slots=True, eq=False)
class TabStop(DocumentObject):
    """Tab stop with ``position``, ``alignment`` and ``leader`` values."""


@dataclass(slots=True, eq=False)
class Border(DocumentObject):
    """Single border edge with ``style``, ``width`` and ``color`` values."""


@dataclass(slots=True, eq=False)
class ParagraphFormat(DocumentObject):
    """Paragraph-level formatting values plus an ordered list of tab stops."""

    tab_stops: List[TabStop] = field(default_factory=list)


@dataclass(slots=True, eq=False)
class Font(DocumentObject):
    """Character formatting values."""


@dataclass(slots=True, eq=False)
class DocumentElement(DocumentObject):
    """Node in the content hierarchy with an ordered child sequence."""

    children: List["DocumentElement"] = field(default_factory=list)

    @property
    def kind(self) -> str:
        return type(self).__name__


@dataclass(slots=True, eq=False)
class Text(DocumentElement):
    """Literal run of text inside a paragraph."""

    content: str = ""


@dataclass(slots=True, eq=False)
class Paragraph(DocumentElement):
    """Block of inline content rendered with a named style."""

    style: str = "Normal"
    format: ParagraphFormat = field(default_factory=ParagraphFormat)
    font: Font = field(default_factory=Font)


@dataclass(slots=True, eq=False)
class Shape(DocumentElement):
    """Drawing object positioned relative to the page, margin or text."""


@dataclass(slots=True, eq=False)
class Image(Shape):
    """Picture shape; ``data`` holds the encoded image bytes when they are embedded."""

    path: str = ""
    data: Optional[bytes] = None


@dataclass(slots=True, eq=False)
class TextFrame(Shape):
    """Shape holding its own sequence of block elements."""


@dataclass(slots=True, eq=False)
class Cell(DocumentElement):
    """Table cell; ``borders`` maps ``top``/``left``/``bottom``/``right`` to edges."""

    borders: Dict[str, Border] = field(default_factory=dict)


@dataclass(slots=True, eq=False)
class Row(DocumentElement):
    """Table row whose children are cells."""


@dataclass(slots=True, eq=False)
class Table(DocumentElement):
    """Tabular structure whose children are rows."""


@dataclass(slots=True, eq=False)
class Section(DocumentObject):
    """Page setup values plus the block elements of one section."""

    elements: List[DocumentElement] = field(default_factory=list)
