from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Core
from core.config import settings
from core.config_validator import validate_config_on_startup
from core.errors import AppError
from core.logging_config import logger

# -------------------------------------------------
# Routers
# -------------------------------------------------
from routers.properties import router as properties_router
from routers.rooms import router as rooms_router
from routers.tenants import router as tenants_router
from routers.maintenance import router as maintenance_router
from routers.occupancy import router as occupancy_router
from routers.dashboard import router as dashboard_router
from routers.oversight import router as oversight_router
from routers.health import router as health_router


# -------------------------------------------------
# Create the Application
# -------------------------------------------------
def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="1.0.0",
        description="PropDesk API: Supabase-backed property, tenancy and maintenance management",
    )

    # -------------------------------------------------
    # CORS
    # -------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------
    # Startup
    # -------------------------------------------------
    @app.on_event("startup")
    async def on_startup():
        logger.info("🚀 Starting PropDesk API")
        validate_config_on_startup()

    # -------------------------------------------------
    # Error handling
    # -------------------------------------------------
    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error(f"{type(exc).__name__} at {request.url}: {exc.message}")
        elif exc.status_code == 403:
            logger.warning(f"Denied at {request.url}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(StarletteHTTPException)
    async def handle_http(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (401, 403, 500):
            logger.warning(
                f"HTTP {exc.status_code} at {request.url}: {exc.detail}"
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unhandled(request: Request, exc: Exception):
        logger.error("Unhandled error at %s", request.url, exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )

    # -------------------------------------------------
    # Register Routers
    # -------------------------------------------------
    app.include_router(properties_router)
    app.include_router(rooms_router)
    app.include_router(tenants_router)
    app.include_router(maintenance_router)
    app.include_router(occupancy_router)

    # Role-scoped views
    app.include_router(dashboard_router)
    app.include_router(oversight_router)

    # Health
    app.include_router(health_router)

    # -------------------------------------------------
    # Root Redirect (sign-in flow)
    # -------------------------------------------------
    @app.get("/", include_in_schema=False)
    async def root():
        return RedirectResponse(settings.SIGN_IN_URL)

    return app


# Create the global FastAPI instance
app = create_app()
