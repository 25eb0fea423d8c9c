"""
Utility modules for proxy service
"""

from .hira_client import HiraClient
from .naver_client import NaverMapClient
from .result import Result

__all__ = ["HiraClient", "NaverMapClient", "Result"]
