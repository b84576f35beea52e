"""
Main API router for Interview Guide

Aggregates all API routes and provides the main application router.
"""

from fastapi import APIRouter

from interview_guide.api.endpoints import interview

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(
    interview.router,
    prefix="/interview",
    tags=["Interview"]
)
