from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.openapi.utils import get_openapi
from starlette.middleware.trustedhost import TrustedHostMiddleware
import secrets
from api.roster import router as roster_router
from api.schedule import router as schedule_router
from api.plans import router as plans_router
from api.healthcheck import router as healthcheck_router
from config.settings import Settings, get_settings
from utils.logger import logger

HEALTH_PATH = "/api/health/check"

# Paths served without an API key
PUBLIC_EXACT = {"/openapi.json", "/redoc", "/docs", HEALTH_PATH}
PUBLIC_PREFIXES = ("/docs/", HEALTH_PATH)


def is_public(path: str) -> bool:
    return path in PUBLIC_EXACT or any(path.startswith(p) for p in PUBLIC_PREFIXES)


def create_app(settings: Settings = None) -> FastAPI:
    """Build the Court Plan API with its middlewares and routers."""
    settings = settings or get_settings()
    app = FastAPI(title="Court Plan API")

    if settings.enable_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_allow_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.allowed_hosts)

    @app.middleware("http")
    async def limit_body_size(request: Request, call_next):
        length = request.headers.get("content-length")
        if (
            settings.max_body_bytes > 0
            and length
            and length.isdigit()
            and int(length) > settings.max_body_bytes
        ):
            return JSONResponse(status_code=413, content={"detail": "Payload too large"})
        return await call_next(request)

    @app.middleware("http")
    async def api_key_guard(request: Request, call_next):
        if request.method == "OPTIONS" or is_public(request.url.path):
            return await call_next(request)
        if not settings.api_key:
            logger.warning("API_KEY not set; API key auth is DISABLED (dev mode).")
            return await call_next(request)

        client_key = request.headers.get("x-api-key")
        if not client_key or not secrets.compare_digest(str(client_key), str(settings.api_key)):
            return JSONResponse(status_code=401, content={"detail": "Unauthorized"})
        return await call_next(request)

    def custom_openapi():
        if app.openapi_schema:
            return app.openapi_schema
        schema = get_openapi(
            title=app.title,
            version=app.version,
            description="Court plan roster, schedule and game plan API",
            routes=app.routes,
        )
        schema.setdefault("components", {}).setdefault("securitySchemes", {})["ApiKeyAuth"] = {
            "type": "apiKey",
            "in": "header",
            "name": "x-api-key",
            "description": "Enter your API key",
        }
        # every operation needs the key except the health check
        for path, methods in schema.get("paths", {}).items():
            for op in methods.values():
                op["security"] = [] if path == HEALTH_PATH else [{"ApiKeyAuth": []}]
        app.openapi_schema = schema
        return app.openapi_schema

    app.openapi = custom_openapi

    app.include_router(roster_router, prefix="/api")
    app.include_router(schedule_router, prefix="/api")
    app.include_router(plans_router, prefix="/api")
    app.include_router(healthcheck_router, prefix="/api")
    return app

app = create_app()
