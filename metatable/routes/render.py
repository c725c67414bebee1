from __future__ import annotations
import logging
from fastapi import APIRouter, Body, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse

from ..config import settings
from ..errors import ErrorResponse
from ..schemas import MetadataRequest, MetadataResponse, YamlOption
from ..services.nodes import to_plain
from ..services.render import parse_metadata, render_metadata_table, strip_metadata_from_text
from ..services.sanitizer import Sanitizer, get_sanitizer
from ..services.splitter import decode, encode
from ..services.table import Layout
from ..utils.markdown import parse_markdown_with_frontmatter, render_markdown

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/yaml", tags=["yaml"])

def to_request_bytes(text: str) -> bytes:
    # JSON admite surrogates sueltos (\ud800); no son UTF-8 válido
    return text.encode("utf-8", "replace")

def get_app_sanitizer(request: Request) -> Sanitizer:
    # construido en el startup; fallback al singleton si la app no lo tiene
    return getattr(request.app.state, "sanitizer", None) or get_sanitizer()

@router.post(
    "",
    response_class=HTMLResponse,
    summary="Renderizar documento con front matter YAML como tabla + cuerpo",
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
def render_yaml(
    form: YamlOption = Body(...),
    sanitizer: Sanitizer = Depends(get_app_sanitizer),
):
    if len(form.text) == 0:
        return HTMLResponse("")

    layout = Layout.parse(form.layout or settings.default_layout)
    if layout is None:
        raise HTTPException(400, f"layout desconocido: {form.layout}")

    raw = to_request_bytes(form.text)

    # sólo hay tabla si el front matter existe y es YAML válido
    table = b""
    if parse_metadata(raw) is not None:
        table = render_metadata_table(raw, layout)

    if form.mode == "gfm":
        body = render_markdown(decode(strip_metadata_from_text(raw)))
    else:
        body = render_markdown(decode(raw))

    logger.debug("yaml render: mode=%s layout=%s table=%d bytes", form.mode, layout.value, len(table))
    return HTMLResponse(sanitizer.sanitize(table + encode(body)))

@router.post(
    "/raw",
    response_class=HTMLResponse,
    summary="Renderizar texto plano en modo raw (markdown completo)",
)
async def render_yaml_raw(request: Request, sanitizer: Sanitizer = Depends(get_app_sanitizer)):
    body = await request.body()
    if not body:
        return HTMLResponse("")
    return HTMLResponse(sanitizer.sanitize_text(render_markdown(body.decode("utf-8", "replace"))))

@router.post(
    "/metadata",
    response_model=MetadataResponse,
    summary="Extraer front matter (JSON) y cuerpo sin metadatos",
)
def yaml_metadata(req: MetadataRequest = Body(...)):
    fm, body = parse_markdown_with_frontmatter(to_request_bytes(req.text))
    if fm is None:
        return MetadataResponse(found=False, metadata=None, body=body)
    return MetadataResponse(found=True, metadata=to_plain(fm), body=body)
