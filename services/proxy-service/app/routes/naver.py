"""
NAVER map routes
"""

from fastapi import APIRouter, Depends, Query

from app.utils.dependencies import get_naver_client
from app.utils.naver_client import NaverMapClient

router = APIRouter()


@router.get("/geocode")
async def geocode(
    query: str = Query(default=""),
    client: NaverMapClient = Depends(get_naver_client),
):
    """Forward a free-text address query to the NAVER geocoder"""
    return await client.geocode(query)


@router.get("/revgeocode")
async def reverse_geocode(
    lat: str = Query(default=""),
    lng: str = Query(default=""),
    client: NaverMapClient = Depends(get_naver_client),
):
    """Forward a coordinate pair to the NAVER reverse geocoder"""
    return await client.reverse_geocode(lat, lng)
