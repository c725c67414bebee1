from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Optional

from .parser import parse_front_matter

logger = logging.getLogger(__name__)

DELIMITER = "---"
ENCODING = "utf-8"


@dataclass(frozen=True)
class FrontMatter:
    header: str
    body: str
    closed: bool = True


def decode(raw: bytes) -> str:
    # surrogateescape: cualquier byte sobrevive al viaje de ida y vuelta
    return raw.decode(ENCODING, "surrogateescape")


def encode(text: str) -> bytes:
    return text.encode(ENCODING, "surrogateescape")


def split_lines(text: str) -> List[str]:
    """
    Parte primero por \\r\\n; si no hay ningún salto así, por \\n.
    """
    lines = text.split("\r\n")
    if len(lines) == 1:
        lines = text.split("\n")
    return lines


def has_front_matter(raw: bytes) -> bool:
    if len(raw) < 1:
        return False
    return split_lines(decode(raw))[0] == DELIMITER


def split_document(raw: bytes) -> Optional[FrontMatter]:
    """
    Devuelve (cabecera, cuerpo) si el documento empieza por la línea `---`.
    La cabecera son las líneas entre los dos delimitadores; el cuerpo, todo lo
    que sigue al delimitador de cierre, con un \\n tras cada línea y sin
    ninguna línea `---`.
    Sin delimitador de cierre, todo es cabecera y el cuerpo queda vacío.
    """
    if len(raw) < 1:
        return None
    lines = split_lines(decode(raw))
    if lines[0] != DELIMITER:
        return None

    rest = lines[1:]
    # el terminador final no abre una línea más
    if rest and rest[-1] == "":
        rest = rest[:-1]

    try:
        end = rest.index(DELIMITER)
    except ValueError:
        return FrontMatter(header="\n".join(rest), body="", closed=False)

    header = "\n".join(rest[:end])
    body = "".join(line + "\n" for line in rest[end + 1:] if line != DELIMITER)
    return FrontMatter(header=header, body=body)


def extract_body(raw: bytes) -> bytes:
    if len(raw) < 1:
        return raw
    doc = split_document(raw)
    if doc is None:
        return raw
    if parse_front_matter(doc.header) is None:
        logger.debug("front matter no parseable; se devuelve el documento intacto")
        return raw
    return encode(doc.body)
