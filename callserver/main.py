import logging
from typing import Optional

import httpx
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from callserver.config import Settings
from callserver.errors import CallServerError, call_server_error_handler
from callserver.routes.calls import router as calls_router
from callserver.routes.health import router as health_router
from callserver.routes.manager import router as manager_router
from callserver.utils.daily import DailyRoomProvisioner

logger = logging.getLogger("callserver")


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )


def warn_missing_config(settings: Settings) -> None:
    for name in settings.missing():
        logger.warning("%s is not set. /api/create-call will fail.", name)


def create_app(settings: Optional[Settings] = None, transport: Optional[httpx.AsyncBaseTransport] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    warn_missing_config(settings)

    app = FastAPI(
        title="Callserver",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.provisioner = DailyRoomProvisioner(settings, transport=transport)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(CallServerError, call_server_error_handler)

    app.include_router(health_router)
    app.include_router(manager_router)
    app.include_router(calls_router)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "OK - use /manager?pass=YOUR_PASS or POST /api/create-call"

    return app


def run() -> None:
    settings = app.state.settings
    logger.info("Callserver running on %s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


settings = Settings.from_env()
setup_logging(settings.log_level)
app = create_app(settings)


if __name__ == "__main__":
    run()
