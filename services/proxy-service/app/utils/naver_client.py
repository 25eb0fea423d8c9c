"""
NAVER Cloud Maps Client
Geocoding and reverse geocoding through the NCP API gateway
"""

from typing import Any, Dict
from urllib.parse import quote

import httpx

from app.config import Settings
from app.utils.upstream_client import UpstreamClient

GEOCODE_PATH = "/map-geocode/v2/geocode"
REVERSE_GEOCODE_PATH = "/map-reversegeocode/v2/gc"
REVERSE_GEOCODE_FIXED_QUERY = "output=json&orders=admcode,addr"

# Same unreserved set as JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"


def escape_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def build_coords(lat: str, lng: str) -> str:
    """NAVER expects longitude first"""
    return f"{escape_component(lng)},{escape_component(lat)}"


class NaverMapClient(UpstreamClient):
    """Client for the NAVER geocode and reverse geocode APIs"""

    name = "NAVER"
    invalid_body_message = "Invalid JSON from NAVER"

    def __init__(self, http_client: httpx.AsyncClient, settings: Settings):
        super().__init__(http_client, settings.naver_base_url)
        self.settings = settings

    def _auth_headers(self) -> Dict[str, str]:
        key_id = self.require(self.settings.ncp_id, "NCP_ID")
        key = self.require(self.settings.ncp_key, "NCP_KEY")
        return {
            "X-NCP-APIGW-API-KEY-ID": key_id,
            "X-NCP-APIGW-API-KEY": key,
            "Accept": "application/json",
        }

    async def geocode(self, query: str = "") -> Any:
        """Address or place name to coordinates"""
        headers = self._auth_headers()
        url = f"{self.base_url}{GEOCODE_PATH}?query={escape_component(query)}"
        upstream = await self._get(url, "json", headers=headers)
        return self.to_canonical(upstream)

    async def reverse_geocode(self, lat: str = "", lng: str = "") -> Any:
        """Coordinates to administrative code and address"""
        headers = self._auth_headers()
        url = (
            f"{self.base_url}{REVERSE_GEOCODE_PATH}"
            f"?coords={build_coords(lat, lng)}&{REVERSE_GEOCODE_FIXED_QUERY}"
        )
        upstream = await self._get(url, "json", headers=headers)
        return self.to_canonical(upstream)
