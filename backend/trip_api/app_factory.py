# backend/trip_api/app_factory.py

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from trip_api.api.errors import register_exception_handlers
from trip_api.api.routes_auth import router as auth_router
from trip_api.api.routes_itinerary import router as itinerary_router
from trip_api.api.routes_trips import router as trips_router
from trip_api.core.config_loader import Settings, settings as default_settings
from trip_api.core.cors import CorsPolicy, OriginPolicyMiddleware
from trip_api.core.llm import build_completion_client
from trip_api.core.logger import logger
from trip_api.db.mongo import TRIPS_COLLECTION, USERS_COLLECTION, build_mongo_client
from trip_api.db.trip_store import TripStore
from trip_api.db.user_store import UserStore
from trip_api.services.itinerary_generator import ItineraryGenerator


def create_app(
    settings: Optional[Settings] = None,
    mongo_client=None,
    completion_client=None,
) -> FastAPI:
    """
    Build the API. Clients passed in are used as-is and left open on
    shutdown; clients built here are owned by the app.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # fails fast on a missing GROQ_API_KEY before anything needs closing
        llm_client = completion_client
        if llm_client is None:
            llm_client = build_completion_client(settings)

        owns_mongo = mongo_client is None
        client = build_mongo_client(settings) if owns_mongo else mongo_client

        try:
            database = client[settings.MONGODB_DB_NAME]
            app.state.trip_store = TripStore(database[TRIPS_COLLECTION])
            app.state.user_store = UserStore(database[USERS_COLLECTION])
            app.state.itinerary_generator = ItineraryGenerator(
                llm_client,
                model=settings.groq_model,
                temperature=settings.llm_temperature,
            )

            app.state.trip_store.ensure_indexes()
            app.state.user_store.ensure_indexes()
            logger.info(f"Backend started ({settings.environment}), db={settings.MONGODB_DB_NAME}")

            yield
        finally:
            if owns_mongo:
                client.close()

    app = FastAPI(
        title="Trip Planner API",
        description="AI itinerary generation and saved trips",
        version="1.0.0",
        lifespan=lifespan,
    )

    # -------------------------------------------------------------
    # CORS
    # -------------------------------------------------------------
    app.add_middleware(
        OriginPolicyMiddleware,
        policy=CorsPolicy(settings.trusted_suffixes),
    )

    register_exception_handlers(app)

    # -------------------------------------------------------------
    # ROUTES
    # -------------------------------------------------------------
    app.include_router(auth_router)
    app.include_router(itinerary_router)
    app.include_router(trips_router)

    @app.get("/", response_class=PlainTextResponse)
    def root():
        return "Backend running"

    return app
