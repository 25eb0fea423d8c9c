"""
API routes for proxy service
"""

from . import codes, health, hira, naver

__all__ = ["codes", "health", "hira", "naver"]
