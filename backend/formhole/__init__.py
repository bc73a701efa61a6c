import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from formhole import config
from formhole.infra.factory import Factory
from formhole.routes.submissions import method_not_allowed, router as submissions_router

logger = logging.getLogger(__name__)


def configure_logging(level: str = config.LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="Form Hole",
        description="Guestbook endpoint: post a name and a message, read them back as HTML",
        version="1.0.0"
    )

    # Any site may post to or read from the form
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(submissions_router)
    app.add_exception_handler(405, method_not_allowed)

    @app.on_event("startup")
    def startup_event():
        logger.info("Starting up application")
        try:
            Factory.get_store().init_db()
            logger.info("Application startup complete")
        except Exception as e:
            logger.error(f"STARTUP ERROR: {str(e)}", exc_info=True)

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    return app
