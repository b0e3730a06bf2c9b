# shopapp/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from shopapp import __version__
from shopapp.config import settings
from shopapp.database.session import engine, init_db
from shopapp.exceptions import ShopAppError
from shopapp.gateway.gateway_router import gateway_router
from shopapp.logger import setup_logging, log_startup
from shopapp.security.auth_gate import auth_gate

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    log_startup("ShopApp API", __version__, settings.API_PREFIX)

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("Database connected")
        init_db()
    except Exception:
        logger.exception("Database initialisation failed")
        raise

    yield
    logger.info("Shutting down")


async def handle_shopapp_error(request: Request, exc: ShopAppError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def handle_validation_error(request: Request, exc: RequestValidationError):
    messages = []
    for err in exc.errors():
        field = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        messages.append(f"{field}: {err.get('msg')}" if field else err.get("msg"))
    return JSONResponse(status_code=400, content={"message": "; ".join(messages)})


def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="ShopApp API",
        description="Users, catalog and orders for the shop",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_exception_handler(ShopAppError, handle_shopapp_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)

    # the gate runs inside CORS so rejected requests still carry CORS headers
    app.middleware("http")(auth_gate)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=settings.CORS_ALLOWED_METHODS,
        allow_headers=settings.CORS_ALLOWED_HEADERS,
        expose_headers=settings.CORS_EXPOSED_HEADERS,
    )

    @app.get("/health")
    async def health():
        status = {"status": "healthy", "service": "shopapp-api", "version": __version__}
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            status["database"] = "connected"
        except Exception as e:
            status["database"] = f"error: {e.__class__.__name__}"
            status["status"] = "degraded"
        return status

    @app.get("/")
    async def root():
        return {
            "message": "ShopApp API",
            "version": __version__,
            "api_base": settings.API_PREFIX,
            "docs": "/docs",
        }

    app.include_router(gateway_router, prefix=settings.API_PREFIX)

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "shopapp.main:app",
        host="0.0.0.0",
        port=8088,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
    )
