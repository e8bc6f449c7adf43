"""
PlacementPro - Main Application

FastAPI backend for the campus placement portal:
- TPO: drives, eligibility preview, applicants, interview scheduling
- Students: profile, eligible drives, applications, mentorship booking
- Alumni: referrals and mentorship sessions
- Record store: in-memory by default, MongoDB when configured

Run: uvicorn placementpro.main:app --reload
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from placementpro import __version__
from placementpro.api.routes import api_router
from placementpro.core.config import get_settings
from placementpro.core.exceptions import PlacementError
from placementpro.db.seed import seed_demo_data
from placementpro.db.store import get_record_store

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="PlacementPro",
    description="""
    Campus placement portal for the Training & Placement Office.

    ## Features
    - **Authentication**: JWT sessions for TPO, students and alumni
    - **Drives**: Criteria-based eligibility, live preview, notify-all
    - **Applications**: applied -> shortlisted -> interview_scheduled -> selected / rejected
    - **Interviews**: One-day slot grid per drive
    - **Alumni**: Referrals and mentorship sessions
    - **Analytics**: Placement dashboard
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware (allow all for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.exception_handler(PlacementError)
async def placement_error_handler(request: Request, exc: PlacementError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


# Startup event
@app.on_event("startup")
async def startup_event():
    """Seed the demo data on first start."""
    if not settings.seed_demo_data:
        return
    try:
        if seed_demo_data(get_record_store()):
            logger.info("Demo data loaded into %s store", settings.store_backend)
    except Exception as e:
        logger.warning("Demo data seeding failed: %s", e)


@app.get("/", tags=["Health"])
async def root():
    return {"status": "healthy", "app": "PlacementPro", "version": __version__}


@app.get("/health", tags=["Health"])
async def health_check():
    """Detailed health check."""
    status = {"status": "healthy", "store": settings.store_backend}
    if settings.store_backend == "mongo":
        from placementpro.db.mongodb import test_mongo_connection
        status["mongodb"] = "connected" if test_mongo_connection() else "disconnected"
    return status


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("placementpro.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
