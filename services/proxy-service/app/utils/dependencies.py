"""
FastAPI Dependencies
Settings and upstream clients taken from application state
"""

from fastapi import Depends, Request

from app.config import Settings
from app.utils.hira_client import HiraClient
from app.utils.naver_client import NaverMapClient


def get_app_settings(request: Request) -> Settings:
    """Settings resolved at startup"""
    return request.app.state.settings


def get_naver_client(
    request: Request, settings: Settings = Depends(get_app_settings)
) -> NaverMapClient:
    return NaverMapClient(request.app.state.http_client, settings)


def get_hira_client(
    request: Request, settings: Settings = Depends(get_app_settings)
) -> HiraClient:
    return HiraClient(request.app.state.http_client, settings)
