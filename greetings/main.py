"""
Greetings -- Application entry point.

Run with:
    uvicorn greetings.main:app --reload

Then open http://localhost:8000/sister?name=Priya for a greeting page,
or http://localhost:8000/docs for the interactive Swagger UI.

This file:
  1. Configures logging
  2. Creates the FastAPI application around one record store
  3. Mounts the route modules (sisters, images, pages)
  4. Serves the bundled data file and the health check
"""

import logging

from fastapi import FastAPI
from fastapi.responses import FileResponse

from greetings.config import DATA_FILE, DATA_URL, LOAD_TIMEOUT, LOG_LEVEL, VERSION
from greetings.lookup import LookupService
from greetings.routes import images, pages, sisters
from greetings.store import RecordStore

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(store: RecordStore | None = None) -> FastAPI:
    """
    Build the app around a record store.

    The store lives on app.state for the lifetime of the process; tests
    pass their own store backed by a mock transport.
    """
    app = FastAPI(
        title="Sister Greetings",
        version=VERSION,
        description=(
            "Personalized greeting pages looked up by name from a JSON data source.\n\n"
            "| Endpoint | Purpose |\n"
            "|----------|--------|\n"
            "| `GET /sister?name=` | Render a greeting page |\n"
            "| `GET /v1/sisters/{name}` | Look up one record |\n"
            "| `POST /v1/sisters/validate` | Check a record before saving it |\n"
            "| `POST /v1/sisters/reload` | Reload the data source |\n"
            "| `GET /v1/images/probe` | Check that an image URL is usable |\n"
        ),
    )

    if store is None:
        store = RecordStore(DATA_URL, timeout=LOAD_TIMEOUT)
    app.state.store = store
    app.state.lookup = LookupService(app.state.store)
    logger.info("Record store will load from %s", app.state.store.source_url)

    app.include_router(sisters.router)
    app.include_router(images.router)
    app.include_router(pages.router)

    @app.get("/data.json", include_in_schema=False)
    async def data_file():
        """The bundled data source. The default DATA_URL points here."""
        return FileResponse(DATA_FILE, media_type="application/json")

    @app.get(
        "/v1/health",
        summary="Health check",
        description="Returns service status and how many records are in memory.",
        tags=["System"],
    )
    async def health():
        return {
            "status": "healthy",
            "version": VERSION,
            "data_source": app.state.store.source_url,
            "records_loaded": len(app.state.store),
        }

    return app


app = create_app()
