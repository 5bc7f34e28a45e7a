import uvicorn

from trip_api.app_factory import create_app
from trip_api.core.config_loader import settings


app = create_app()


# -------------------------------------------------------------
# RUN LOCAL
# -------------------------------------------------------------
if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.environment == "development"
    )
