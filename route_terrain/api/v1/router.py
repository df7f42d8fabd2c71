"""
API Router v1

Combines all route modules.
"""

from fastapi import APIRouter

from route_terrain.api.v1.routes import terrain

api_router = APIRouter()

api_router.include_router(terrain.router, prefix="/terrain", tags=["Terrain"])
