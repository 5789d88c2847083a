"""Aggregate model combining styles and content sections."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from rtf_renderer.model.elements import Section
from rtf_renderer.model.style_model import StylesCatalog


@dataclass(slots=True)
class Document:
    """Document representation that renderers consume."""

    styles: StylesCatalog = field(default_factory=StylesCatalog)
    sections: List[Section] = field(default_factory=list)
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_section(self, section: Section) -> Section:
        self.sections.append(section)
        return section
