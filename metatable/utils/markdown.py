from __future__ import annotations
from typing import Optional, Tuple

from markdown_it import MarkdownIt

from ..config import settings
from ..services.nodes import Mapping
from ..services.render import parse_metadata, strip_metadata_from_text
from ..services.splitter import decode

# html=False: el HTML del autor se muestra como texto; el saneado va después igualmente
_MD = MarkdownIt(
    "commonmark",
    {"html": False, "linkify": False, "typographer": False, "breaks": settings.markdown_breaks},
).enable("table")


def render_markdown(text: str) -> str:
    if not text:
        return ""
    return _MD.render(text)


def parse_markdown_with_frontmatter(raw: bytes) -> Tuple[Optional[Mapping], str]:
    """
    Devuelve (front_matter, body_md).
    front_matter es None si no hay bloque `---` o no es YAML válido;
    en ese caso body_md es el texto completo.
    """
    fm = parse_metadata(raw)
    if fm is None:
        return None, decode(raw)
    return fm, decode(strip_metadata_from_text(raw))
