from __future__ import annotations
from functools import lru_cache
from typing import Dict, FrozenSet, List, Tuple

import bleach

# Política para contenido generado por usuarios: etiquetas de texto, listas,
# tablas y enlaces/imágenes. Todo lo demás (scripts, estilos, on*) se elimina.
UGC_TAGS: Tuple[str, ...] = (
    "a", "abbr", "b", "blockquote", "br", "caption", "cite", "code", "dd",
    "del", "details", "dfn", "div", "dl", "dt", "em", "h1", "h2", "h3", "h4",
    "h5", "h6", "hr", "i", "img", "ins", "kbd", "li", "mark", "ol", "p", "pre",
    "q", "s", "samp", "small", "span", "strike", "strong", "sub", "summary",
    "sup", "table", "tbody", "td", "tfoot", "th", "thead", "tr", "tt", "u",
    "ul", "var",
)

UGC_ATTRIBUTES: Dict[str, List[str]] = {
    "a": ["href", "title"],
    "abbr": ["title"],
    "img": ["src", "alt", "title", "width", "height"],
    "table": ["data"],
    "td": ["align", "colspan", "rowspan"],
    "th": ["align", "colspan", "rowspan", "scope"],
    "ol": ["start"],
}

UGC_PROTOCOLS: Tuple[str, ...] = ("http", "https", "mailto")


class Sanitizer:
    """
    Filtro allow-list sobre HTML. Inmutable tras construirse; se crea una vez
    por proceso y se comparte entre peticiones.
    """
    def __init__(self, tags, attributes, protocols):
        self.tags: FrozenSet[str] = frozenset(tags)
        self.attributes: Dict[str, List[str]] = {k: list(v) for k, v in attributes.items()}
        self.protocols: FrozenSet[str] = frozenset(protocols)

    @classmethod
    def ugc(cls) -> "Sanitizer":
        return cls(UGC_TAGS, UGC_ATTRIBUTES, UGC_PROTOCOLS)

    def sanitize_text(self, html: str) -> str:
        if not html:
            return ""
        # bleach.Cleaner guarda estado del parser: uno por llamada
        return bleach.clean(
            html,
            tags=self.tags,
            attributes=self.attributes,
            protocols=self.protocols,
            strip=True,
            strip_comments=True,
        )

    def sanitize(self, data: bytes) -> bytes:
        if not data:
            return b""
        return self.sanitize_text(data.decode("utf-8", "replace")).encode("utf-8")


@lru_cache(maxsize=1)
def get_sanitizer() -> Sanitizer:
    return Sanitizer.ugc()
