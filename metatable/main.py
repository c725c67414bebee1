import logging

from fastapi import FastAPI
from fastapi.responses import ORJSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi

from .config import settings
from .routes.render import router as render_router
from .middleware.size_limit import SizeLimitMiddleware
from .errors import install_exception_handlers
from .services.sanitizer import get_sanitizer
from prometheus_fastapi_instrumentator import Instrumentator

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("metatable")

TAGS_METADATA = [
    {"name": "yaml", "description": "Front matter YAML como tabla HTML saneada y extracción del cuerpo."},
    {"name": "admin", "description": "Salud del servicio."},
]

app = FastAPI(
    title="Metatable API",
    version="0.1.0",
    description="Renderiza el front matter YAML de documentos (p.ej. READMEs) como tabla HTML saneada.",
    default_response_class=ORJSONResponse,
    openapi_tags=TAGS_METADATA,
    license_info={"name": "MIT", "url": "https://opensource.org/licenses/MIT"},
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.parsed_cors(settings.cors_allow_origins),
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.parsed_cors(settings.cors_allow_methods),
    allow_headers=settings.parsed_cors(settings.cors_allow_headers),
)

# Middlewares
app.add_middleware(SizeLimitMiddleware)     # 413 si Content-Length excede

# Prometheus
instrumentator = Instrumentator().instrument(app)
instrumentator.expose(app, include_in_schema=False, endpoint="/metrics")

# Exception handlers
install_exception_handlers(app)

@app.on_event("startup")
async def startup():
    # política de saneado: una sola vez por proceso, sólo lectura
    app.state.sanitizer = get_sanitizer()
    logger.info("metatable listo (env=%s, layout=%s)", settings.service_env, settings.default_layout)

# Routers
app.include_router(render_router)


@app.get("/health", tags=["admin"], summary="Healthcheck simple")
async def health():
    return {"status": "ok", "env": settings.service_env, "layout": settings.default_layout}

# --- OpenAPI servers ---
def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema
    schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
        tags=TAGS_METADATA,
    )
    schema["servers"] = [{"url": settings.server_public_url, "description": f"{settings.service_env}"}]
    app.openapi_schema = schema
    return app.openapi_schema
app.openapi = custom_openapi  # type: ignore
