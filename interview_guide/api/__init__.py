"""
API layer for Interview Guide

Contains FastAPI routers for interview session management.
"""

from interview_guide.api.router import api_router

__all__ = ["api_router"]
