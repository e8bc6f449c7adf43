"""
API module - FastAPI routers, one per dashboard area.

Usage:
    from placementpro.api.routes import api_router
    app.include_router(api_router, prefix="/api")
"""
