"""
Configuration for Interview Guide
"""

from interview_guide.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
