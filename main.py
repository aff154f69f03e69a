import os
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv
import uvicorn

from database import check_connection, get_session_context, init_db
from exception_handlers import setup_exception_handlers
from logging_config import configure_logging
from routers import (
    auth_router,
    owners_router,
    companies_router,
    properties_router,
    property_types_router,
)
from seed import seed_all

# Load .env
load_dotenv()
configure_logging()

logger = logging.getLogger(__name__)

# Create tables on startup (dev / sqlite); production uses alembic
AUTO_CREATE_TABLES = os.getenv("AUTO_CREATE_TABLES", "false").lower() == "true"
SEED_ON_STARTUP = os.getenv("SEED_ON_STARTUP", "true").lower() == "true"


@asynccontextmanager
async def lifespan(app: FastAPI):
    if AUTO_CREATE_TABLES:
        init_db()
    if SEED_ON_STARTUP:
        try:
            with get_session_context() as db:
                seed_all(db)
        except Exception:
            logger.exception("An error occurred while seeding the database")
    yield


# App instance
app = FastAPI(title="Property Registry API", lifespan=lifespan)

# CORS
origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_exception_handlers(app)

app.include_router(auth_router)
app.include_router(owners_router)
app.include_router(companies_router)
app.include_router(properties_router)
app.include_router(property_types_router)


@app.get("/health")
def health_check():
    healthy = check_connection()
    return {"status": "healthy" if healthy else "degraded", "database": healthy}


if __name__ == "__main__":
    port = int(os.getenv("PORT", 10000))
    uvicorn.run("main:app", host="0.0.0.0", port=port, reload=True)
