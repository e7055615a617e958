# phraipets/main.py
from fastapi import FastAPI
from phraipets.api.v1.endpoints import pet_interactions
from phraipets.core.settings import settings
from phraipets.core.logging_config import setup_logging
from phraipets.core.database import connect_to_mongo, close_mongo_connection
import structlog

setup_logging(log_level_str=settings.LOG_LEVEL)
log = structlog.get_logger(__name__)

app = FastAPI(title=settings.PROJECT_NAME)


# Needs are caught up on every read, so there is no background tick task.
@app.on_event("startup")
async def startup_event():
    log.info("Application startup: Connecting to database.")
    await connect_to_mongo()


@app.on_event("shutdown")
async def shutdown_event():
    await close_mongo_connection()
    log.info("Application shutdown complete.")


app.include_router(pet_interactions.router, prefix=settings.API_V1_STR, tags=["pet"])


@app.get("/")
async def root():
    log.info("Root endpoint accessed.")
    return {"message": f"Welcome to the {settings.PROJECT_NAME} API!", "shared_pet_id": settings.SHARED_PET_ID}


log.info(f"{settings.PROJECT_NAME} API starting up...")
