"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from placementpro.api.routes.auth_routes import router as auth_router
from placementpro.api.routes.drive_routes import router as drive_router
from placementpro.api.routes.student_routes import router as student_router
from placementpro.api.routes.application_routes import router as application_router
from placementpro.api.routes.interview_routes import router as interview_router
from placementpro.api.routes.alumni_routes import router as alumni_router
from placementpro.api.routes.analytics_routes import router as analytics_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(auth_router)
api_router.include_router(drive_router)
api_router.include_router(student_router)
api_router.include_router(application_router)
api_router.include_router(interview_router)
api_router.include_router(alumni_router)
api_router.include_router(analytics_router)
