"""
API endpoint modules for Interview Guide
"""

from interview_guide.api.endpoints import interview

__all__ = ["interview"]
