"""Entry points for rendering a document model into RTF."""
from __future__ import annotations

from pathlib import Path

from rtf_renderer.model.document_model import Document
from rtf_renderer.renderer.document_renderer import RtfDocumentRenderer
from rtf_renderer.utils.logger import get_logger

LOGGER = get_logger(__name__)


def render_to_string(document: Document, **options) -> str:
    """Render ``document`` and return the RTF text.

    ``options`` are passed to :class:`RtfDocumentRenderer`.
    """
    return RtfDocumentRenderer(document, **options).render()


def render_to_file(document: Document, output_path: Path, **options) -> Path:
    """Render ``document`` into ``output_path``, creating parent directories."""
    output_path = Path(output_path).resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    rtf = render_to_string(document, **options)
    # All non-ASCII text is escaped by the writer.
    output_path.write_text(rtf, encoding="ascii")
    LOGGER.info("Wrote %s (%d characters)", output_path.name, len(rtf))
    return output_path
