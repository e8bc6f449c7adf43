"""
Analytics Routes

GET /analytics/placements - Placement dashboard numbers (TPO)
GET /analytics/alumni - Contribution summary for the logged-in alumni
"""

from fastapi import APIRouter, Depends

from placementpro.core.auth import get_current_alumni, get_current_tpo
from placementpro.db.store import RecordStore, get_record_store
from placementpro.schemas.schemas import AlumniOverview, AlumniUser, PlacementAnalytics
from placementpro.services.analytics_service import AnalyticsService

router = APIRouter(prefix="/analytics", tags=["Analytics"])


@router.get("/placements", response_model=PlacementAnalytics)
async def get_placement_analytics(
    tpo=Depends(get_current_tpo),
    store: RecordStore = Depends(get_record_store)
):
    return AnalyticsService(store).placement_analytics()


@router.get("/alumni", response_model=AlumniOverview)
async def get_alumni_overview(
    alumni: AlumniUser = Depends(get_current_alumni),
    store: RecordStore = Depends(get_record_store)
):
    return AnalyticsService(store).alumni_overview(alumni.id)
