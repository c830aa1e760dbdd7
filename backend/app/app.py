"""FastAPI application."""

import argparse
import logging
from typing import Dict

from dotenv import load_dotenv

# Variables already present in the environment (docker) take precedence.
load_dotenv("../../.env")

from fastapi import FastAPI  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from configs import get_settings  # noqa: E402
from startup import seed_demo_data  # noqa: E402
from vuelatour.controllers.admin.admin_controllers import admin_router  # noqa: E402
from vuelatour.controllers.catalog_controllers import catalog_router  # noqa: E402
from vuelatour.controllers.lead_controllers import lead_router  # noqa: E402
from vuelatour.controllers.notification_controllers import notification_router  # noqa: E402
from vuelatour.repositories.site import models  # noqa: E402,F401
from vuelatour.repositories.site.database import Base, engine  # noqa: E402

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build the API with its middleware and routers."""
    settings = get_settings()
    app = FastAPI(
        title="Vuelatour API",
        root_path=settings.ROOT_PATH_BACKEND,
        description="Catalog, quote requests and back-office endpoints for vuelatour.com",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(catalog_router)
    app.include_router(lead_router)
    app.include_router(notification_router)
    app.include_router(admin_router)

    @app.get("/", response_description="Api healthcheck")  # type: ignore[misc]
    async def index() -> Dict[str, str]:
        """Define a route for handling HTTP GET requests to the root URL ("/")."""
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    parser = argparse.ArgumentParser()
    parser.add_argument("--host", required=True, help="Application host.")
    parser.add_argument("--port", required=True, help="Application port.")
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development purposes.",
    )
    args = parser.parse_args()

    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created successfully!")

    if get_settings().SEED_DEMO_DATA:
        logger.info("Populating demo catalog data!")
        seed_demo_data()

    logger.info("Starting FastAPI application...")
    uvicorn.run("app:app", host=args.host, port=int(args.port), reload=args.reload)
