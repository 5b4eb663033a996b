import logging
import time

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import OperationalError

from app.api.routes import router
from app.config import get_settings
from app.db.models import Base
from app.db.session import engine

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="[%(asctime)s] %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger("component_generator")

app = FastAPI(
    title="UI Component Generator",
    version="1.0.0",
)

# ✅ Middleware FIRST
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ✅ Routes AFTER middleware
app.include_router(router)


@app.on_event("startup")
def startup():
    retries = 5
    delay = 2

    for attempt in range(retries):
        try:
            Base.metadata.create_all(bind=engine)
            logger.info("Database connected")
            break
        except OperationalError:
            logger.warning("Waiting for database... (%s/%s)", attempt + 1, retries)
            time.sleep(delay)
    else:
        logger.error("Database not ready after %s attempts", retries)

    configured = [p.name for p in settings.provider_configs() if p.is_configured]
    if configured:
        logger.info("Remote providers configured: %s", ", ".join(configured))
    else:
        logger.info("No remote provider credentials, using template fallback only")
