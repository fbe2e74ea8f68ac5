import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings, get_settings
from app.db.mongo import MongoStore
from app.routes import contacts
from app.utils.error_handler import register_error_handlers
from app.utils.errors import StoreError

log = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(level)


def create_app(settings: Optional[Settings] = None, store: Optional[MongoStore] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if app.state.store is None:
            app.state.store = MongoStore(settings.connection_string, settings.database_name)
        try:
            await app.state.store.connect()
        except StoreError as e:
            log.error("Error: %s", e.message)
            raise
        yield
        app.state.store.close()

    app = FastAPI(
        title="Contacts API",
        description="REST API for managing contacts (name, email, phone) stored in MongoDB.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", include_in_schema=False)
    def root():
        return {"message": "Contacts API running"}

    @app.get("/test", include_in_schema=False)
    def test_endpoint(request: Request):
        query = dict(request.query_params)
        log.info("Test endpoint hit, request query is: %s", query)
        return {"message": "Response from test endpoint", "query": query}

    app.include_router(contacts.router)
    register_error_handlers(app)
    return app


app = create_app()

# Dev entry point
if __name__ == "__main__":
    settings = app.state.settings
    log.info("Server is running on %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
