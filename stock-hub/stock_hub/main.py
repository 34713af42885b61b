from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stock_hub.api.v1.routes_alerts import router as alerts_router
from stock_hub.api.v1.routes_dashboard import router as dashboard_router
from stock_hub.api.v1.routes_transfers import router as transfers_router
from stock_hub.core.config import settings
from stock_hub.core.exception_handler import setup_exception_handlers
from stock_hub.core.logging_config import configure_logging


def create_app() -> FastAPI:
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.APP_NAME)

    if settings.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.CORS_ORIGINS,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    setup_exception_handlers(app)

    app.include_router(transfers_router)
    app.include_router(alerts_router)
    app.include_router(dashboard_router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
