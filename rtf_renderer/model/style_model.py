"""Style model captures named paragraph styles in document order."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from rtf_renderer.model.elements import Font, ParagraphFormat


class StyleNames:
    """Well-known style names."""

    NORMAL = "Normal"


@dataclass(slots=True, eq=False)
class Style:
    """Named style with its own paragraph format and font."""

    name: str
    base_style: Optional[str] = None
    paragraph_format: ParagraphFormat = field(default_factory=ParagraphFormat)
    font: Font = field(default_factory=Font)


class StylesCatalog:
    """Ordered collection of styles; the position of a style is its RTF index."""

    def __init__(self, styles: Optional[List[Style]] = None) -> None:
        self._styles: List[Style] = []
        self._by_name: Dict[str, Style] = {}
        self.add(Style(StyleNames.NORMAL))
        for style in styles or []:
            self.add(style)

    def add(self, style: Style) -> Style:
        """Register a style, replacing an existing one with the same name.

        The style's formats cascade from its base style, which must already be
        registered. Styles based on a replaced style cascade from the
        replacement afterwards.
        """
        if style.base_style is not None:
            parent = self._by_name.get(style.base_style)
            if parent is None:
                raise KeyError(f"Unknown base style: {style.base_style}")
            style.paragraph_format.base = parent.paragraph_format
            style.font.base = parent.font
        existing = self._by_name.get(style.name)
        if existing is not None:
            self._styles[self._styles.index(existing)] = style
            for derived in self._styles:
                if derived.base_style == style.name and derived is not style:
                    derived.paragraph_format.base = style.paragraph_format
                    derived.font.base = style.font
        else:
            self._styles.append(style)
        self._by_name[style.name] = style
        return style

    def get(self, name: Optional[str]) -> Optional[Style]:
        if name is None:
            return None
        return self._by_name.get(name)

    def index_of(self, name: str) -> int:
        """Return the RTF style index of the named style."""
        style = self._by_name.get(name)
        if style is None:
            raise KeyError(f"Unknown style: {name}")
        return self._styles.index(style)

    def __getitem__(self, name: str) -> Style:
        return self._by_name[name]

    def __iter__(self) -> Iterator[Style]:
        return iter(list(self._styles))

    def __len__(self) -> int:
        return len(self._styles)
