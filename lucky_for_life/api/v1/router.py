"""Aggregate API v1 router."""

from fastapi import APIRouter

from lucky_for_life.api.v1.endpoints import (
    cosmic,
    exports,
    recommendations,
    statistics,
)

api_router = APIRouter()

api_router.include_router(statistics.router, prefix="/stats", tags=["Statistics"])
api_router.include_router(recommendations.router, prefix="/recommendations", tags=["Recommendations"])
api_router.include_router(cosmic.router, prefix="/cosmic", tags=["Cosmic"])
api_router.include_router(exports.router, prefix="/exports", tags=["Export"])
