import structlog
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

load_dotenv()

from talentflow.config import settings
from talentflow.core.dependencies import get_backend
from talentflow.core.exceptions import StorageBackendException
from talentflow.logging_config import configure_logging
from talentflow.seed import seed_store

# IMPORT ROUTERS
from talentflow.routers.activity import router as activity_router
from talentflow.routers.analytics import router as analytics_router
from talentflow.routers.criteria import router as criteria_router
from talentflow.routers.errors import storage_exception_handler, validation_exception_handler
from talentflow.routers.evaluations import router as evaluations_router
from talentflow.routers.health import router as health_router
from talentflow.routers.people import router as people_router
from talentflow.routers.scoring import router as scoring_router
from talentflow.routers.settings import router as settings_router


logger = structlog.get_logger(__name__)


# SWAGGER UI TAG ORDER
_OPENAPI_TAGS = [
    {"name": "Root"},
    {"name": "Health"},
    {"name": "Scoring"},
    {"name": "Settings"},
    {"name": "Criteria Templates"},
    {"name": "People"},
    {"name": "Evaluations"},
    {"name": "Analytics"},
    {"name": "Activity Log"},
]

# FASTAPI APPLICATION CONFIGURATION
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=_OPENAPI_TAGS,
)

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

# REGISTER EXCEPTION HANDLERS
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StorageBackendException, storage_exception_handler)

# REGISTER ROUTERS (order matches _OPENAPI_TAGS / Swagger UI display order)
app.include_router(health_router)       # Health
app.include_router(scoring_router)      # Scoring
app.include_router(settings_router)     # Settings
app.include_router(criteria_router)     # Criteria Templates
app.include_router(people_router)       # People
app.include_router(evaluations_router)  # Evaluations
app.include_router(analytics_router)    # Analytics
app.include_router(activity_router)     # Activity Log


# ROOT ENDPOINT
@app.get("/", tags=["Root"], summary="Root endpoint")
async def root():
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc"
        },
        "status": "running"
    }


# STARTUP EVENT
@app.on_event("startup")
async def startup_event():
    configure_logging(settings)
    backend = get_backend()
    seeded = False
    if settings.SEED_ON_STARTUP:
        seeded = seed_store(backend)
    logger.info(
        "application_started",
        app=settings.APP_NAME,
        env=settings.APP_ENV,
        storage=backend.name,
        seeded=seeded,
    )


# SHUTDOWN EVENT
@app.on_event("shutdown")
async def shutdown_event():
    logger.info("application_stopped", app=settings.APP_NAME)


# RUN WITH UVICORN
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "talentflow.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
