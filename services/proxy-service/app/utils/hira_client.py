"""
HIRA Non-Payment Item Client
Hospital list and detail lookups on the data.go.kr nonPaymentDamtInfoService
"""

from typing import Any

import httpx

from app.config import Settings
from app.models.params import AllowListedParams, HospitalDetailParams, HospitalListParams
from app.utils.upstream_client import UpstreamClient

HOSPITAL_LIST_PATH = "/getNonPaymentItemHospList2"
HOSPITAL_DETAIL_PATH = "/getNonPaymentItemHospDtlList"


class HiraClient(UpstreamClient):
    """Client for the HIRA non-payment item APIs (XML responses)"""

    name = "HIRA"
    invalid_body_message = "Invalid XML from HIRA"

    def __init__(self, http_client: httpx.AsyncClient, settings: Settings):
        super().__init__(http_client, settings.hira_base_url)
        self.settings = settings

    async def _lookup(self, path: str, params: AllowListedParams) -> Any:
        service_key = self.require(self.settings.hira_service_key, "HIRA_SERVICE_KEY")
        query = {"ServiceKey": service_key, **params.to_upstream()}
        upstream = await self._get(f"{self.base_url}{path}", "xml", params=query)
        return self.to_canonical(upstream)

    async def hospital_list(self, params: HospitalListParams) -> Any:
        """Hospitals charging a given non-payment item"""
        return await self._lookup(HOSPITAL_LIST_PATH, params)

    async def hospital_detail(self, params: HospitalDetailParams) -> Any:
        """Non-payment item prices for one or more hospitals"""
        return await self._lookup(HOSPITAL_DETAIL_PATH, params)
