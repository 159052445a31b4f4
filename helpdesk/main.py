from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from helpdesk.api.router import api_router
from helpdesk.core.config import Settings, get_settings
from helpdesk.core.errors import register_exception_handlers
from helpdesk.core.logger import configure_logging, logger
from helpdesk.repositories.storage import KeyValueStorage
from helpdesk.services.container import build_services


def create_app(
    settings: Settings | None = None,
    storage: KeyValueStorage | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.log_file)

    application = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        debug=settings.app_debug,
    )
    application.state.services = build_services(settings, storage)
    logger.info(
        "Helpdesk started with %s storage",
        application.state.services.storage.name,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)
    application.include_router(api_router, prefix=settings.api_prefix)

    @application.get("/")
    def root() -> dict[str, str]:
        return {"message": "Helpdesk backend is running"}

    return application


app = create_app()
