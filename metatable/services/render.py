from __future__ import annotations
import logging
from typing import Any, Optional

from .nodes import Mapping
from .parser import parse_front_matter
from .sanitizer import Sanitizer
from .splitter import encode, extract_body, has_front_matter, split_document
from .table import Layout, render_table

logger = logging.getLogger(__name__)


def parse_metadata(raw: bytes) -> Optional[Mapping]:
    doc = split_document(raw)
    if doc is None:
        return None
    return parse_front_matter(doc.header)


def render_metadata_table(raw: bytes, layout: Any = Layout.VERTICAL) -> bytes:
    """
    Devuelve la tabla HTML (sin sanear) del front matter de `raw`.
    Si no hay front matter, no se puede parsear o el layout no existe,
    devuelve `raw` tal cual.
    """
    if not has_front_matter(raw):
        return raw
    selected = Layout.parse(layout)
    if selected is None:
        logger.debug("layout desconocido %r; passthrough", layout)
        return raw
    tree = parse_metadata(raw)
    if tree is None:
        return raw
    return encode(render_table(tree, selected))


def strip_metadata_from_text(raw: bytes) -> bytes:
    return extract_body(raw)


def render_sanitized(raw: bytes, sanitizer: Sanitizer) -> bytes:
    """Tabla vertical + saneado. El passthrough también se sanea."""
    return sanitizer.sanitize(render_metadata_table(raw, Layout.VERTICAL))
