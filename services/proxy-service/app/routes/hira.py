"""
HIRA non-payment item routes

Each lookup answers on several path spellings; all of them share one handler.
"""

from fastapi import APIRouter, Depends, Request

from app.models.params import HospitalDetailParams, HospitalListParams
from app.utils.dependencies import get_hira_client
from app.utils.hira_client import HiraClient

router = APIRouter()

HOSPITAL_LIST_PATHS = ("/hosp-list2", "/hospList2", "/list2")
HOSPITAL_DETAIL_PATHS = ("/hosp-dtl", "/hospDtl", "/detail")


async def hospital_list(request: Request, client: HiraClient = Depends(get_hira_client)):
    """Hospitals charging a non-payment item, converted from XML"""
    params = HospitalListParams.from_query(request.query_params)
    return await client.hospital_list(params)


async def hospital_detail(request: Request, client: HiraClient = Depends(get_hira_client)):
    """Non-payment item details for hospitals, converted from XML"""
    params = HospitalDetailParams.from_query(request.query_params)
    return await client.hospital_detail(params)


for path in HOSPITAL_LIST_PATHS:
    router.add_api_route(path, hospital_list, methods=["GET"])

for path in HOSPITAL_DETAIL_PATHS:
    router.add_api_route(path, hospital_detail, methods=["GET"])
