"""
Unit tests for the upstream clients
"""

from collections.abc import AsyncIterator

import httpx
import pytest
from respx import MockRouter

from app.exceptions import BadUpstreamResponse, ConfigurationError, UpstreamHttpError
from app.models.params import HospitalListParams
from app.utils.hira_client import HiraClient
from app.utils.naver_client import NaverMapClient, build_coords, escape_component
from upstream_samples import HIRA_BASE_PATH, HIRA_HOST, HOSPITAL_LIST_XML, NAVER_HOST


@pytest.fixture
async def http_client() -> AsyncIterator[httpx.AsyncClient]:
    """Real httpx client for respx mocking"""
    async with httpx.AsyncClient() as client:
        yield client


def test_escape_component_matches_uri_component_rules():
    assert escape_component("서울 중구") == "%EC%84%9C%EC%9A%B8%20%EC%A4%91%EA%B5%AC"
    assert escape_component("a&b=c/d") == "a%26b%3Dc%2Fd"
    assert escape_component("-_.!~*'()") == "-_.!~*'()"


def test_build_coords_puts_longitude_first():
    assert build_coords(lat="37.5", lng="127.0") == "127.0,37.5"


@pytest.mark.asyncio
async def test_geocode_without_credentials_makes_no_call(
    http_client: httpx.AsyncClient, make_settings, respx_mock: MockRouter
) -> None:
    client = NaverMapClient(http_client, make_settings(ncp_id=None))

    with pytest.raises(ConfigurationError) as exc_info:
        await client.geocode("seoul")

    assert exc_info.value.credential_name == "NCP_ID"
    assert len(respx_mock.calls) == 0


@pytest.mark.asyncio
async def test_reverse_geocode_upstream_error_keeps_body(
    http_client: httpx.AsyncClient, settings, respx_mock: MockRouter
) -> None:
    respx_mock.get(host=NAVER_HOST, path="/map-reversegeocode/v2/gc").mock(
        return_value=httpx.Response(429, text="quota exceeded")
    )
    client = NaverMapClient(http_client, settings)

    with pytest.raises(UpstreamHttpError) as exc_info:
        await client.reverse_geocode("37.5", "127.0")

    assert exc_info.value.status_code == 429
    assert exc_info.value.body == b"quota exceeded"


@pytest.mark.asyncio
async def test_geocode_bad_json(
    http_client: httpx.AsyncClient, settings, respx_mock: MockRouter
) -> None:
    respx_mock.get(host=NAVER_HOST, path="/map-geocode/v2/geocode").mock(
        return_value=httpx.Response(200, text="{truncated")
    )
    client = NaverMapClient(http_client, settings)

    with pytest.raises(BadUpstreamResponse) as exc_info:
        await client.geocode("seoul")

    assert exc_info.value.status_code == 502
    assert exc_info.value.message == "Invalid JSON from NAVER"


@pytest.mark.asyncio
async def test_hospital_list_sends_service_key(
    http_client: httpx.AsyncClient, settings, respx_mock: MockRouter
) -> None:
    route = respx_mock.get(
        host=HIRA_HOST, path=f"{HIRA_BASE_PATH}/getNonPaymentItemHospList2"
    ).mock(return_value=httpx.Response(200, text=HOSPITAL_LIST_XML))
    client = HiraClient(http_client, settings)

    result = await client.hospital_list(HospitalListParams(pageNo="1"))

    assert len(result["response"]["body"]["items"]["item"]) == 2
    assert dict(route.calls.last.request.url.params) == {
        "ServiceKey": "test-hira-key",
        "pageNo": "1",
    }


@pytest.mark.asyncio
async def test_hospital_list_without_key_makes_no_call(
    http_client: httpx.AsyncClient, make_settings, respx_mock: MockRouter
) -> None:
    client = HiraClient(http_client, make_settings(hira_service_key=None))

    with pytest.raises(ConfigurationError, match="HIRA_SERVICE_KEY"):
        await client.hospital_list(HospitalListParams())

    assert len(respx_mock.calls) == 0
