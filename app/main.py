import sentry_sdk
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings, get_settings
from app.errors import register_exception_handlers
from app.logging_config import setup_logging
from app.middleware import RequestLoggingMiddleware
from app.ratelimit import configure_limiter, limiter
from app.routes import receipts
from app.store import InMemoryReceiptStore


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    # Sentry
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            traces_sample_rate=0.1,
            send_default_pii=False,
        )

    logger = setup_logging(settings.log_level)

    app = FastAPI(title="Receipt Processor", version="1.0.0")
    configure_limiter(settings)
    app.state.limiter = limiter
    app.state.settings = settings
    # One store per application, alive until the process exits
    app.state.store = InMemoryReceiptStore()

    register_exception_handlers(app)

    app.add_middleware(RequestLoggingMiddleware)
    # CORS last, i.e. outermost: error-boundary responses need its headers
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )

    # Routes
    app.include_router(receipts.router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    logger.debug("Application created", extra={"extra_data": {"port": settings.port}})
    return app


app = create_app()


def run() -> None:
    """Serve the API, by default on port 3000 of all interfaces."""
    settings = get_settings()
    setup_logging(settings.log_level).info(
        f"JSON API server running on {settings.host}:{settings.port}",
        extra={"extra_data": {"host": settings.host, "port": settings.port}},
    )
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
