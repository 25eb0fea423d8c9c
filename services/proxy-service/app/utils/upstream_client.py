"""
Upstream HTTP Client
Shared request/response handling for the proxied public APIs

Uses the application-wide httpx.AsyncClient so every request shares one pool.
"""

from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional

import httpx
import structlog

from app.exceptions import (
    BadUpstreamResponse,
    ConfigurationError,
    InternalError,
    UpstreamHttpError,
    UpstreamTimeout,
)
from app.utils.parsers import parse_json, parse_xml

logger = structlog.get_logger(__name__)

BodyFormat = Literal["json", "xml"]


@dataclass(frozen=True)
class UpstreamResponse:
    """Raw upstream answer before parsing"""

    status_code: int
    content: bytes
    text: str
    content_type: Optional[str]
    body_format: BodyFormat

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class UpstreamClient:
    """Base client: credential checks, one GET, status and body handling"""

    name: str = "upstream"
    invalid_body_message: str = "Invalid response from upstream"

    def __init__(self, http_client: httpx.AsyncClient, base_url: str):
        self.http_client = http_client
        self.base_url = base_url.rstrip("/")

    @staticmethod
    def require(value: Optional[str], credential_name: str) -> str:
        """Fail before any network call if a credential is missing"""
        if not value:
            raise ConfigurationError(credential_name)
        return value

    async def _get(
        self,
        url: str,
        body_format: BodyFormat,
        params: Optional[Dict[str, str]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> UpstreamResponse:
        path = httpx.URL(url).path
        try:
            response = await self.http_client.get(url, params=params, headers=headers)
        except httpx.TimeoutException:
            logger.error("Upstream request timed out", upstream=self.name, path=path)
            raise UpstreamTimeout(f"Request to {self.name} timed out")
        except httpx.HTTPError as e:
            logger.error("Upstream request failed", upstream=self.name, path=path, error=str(e))
            raise InternalError(f"Error: request to {self.name} failed: {e}")

        logger.info(
            "Upstream responded",
            upstream=self.name,
            path=path,
            status_code=response.status_code,
        )
        return UpstreamResponse(
            status_code=response.status_code,
            content=response.content,
            text=response.text,
            content_type=response.headers.get("content-type"),
            body_format=body_format,
        )

    def to_canonical(self, upstream: UpstreamResponse) -> Any:
        """Relay failures unchanged, parse successes into plain structures"""
        if not upstream.is_success:
            raise UpstreamHttpError(upstream.status_code, upstream.content, upstream.content_type)

        parser = parse_json if upstream.body_format == "json" else parse_xml
        result = parser(upstream.text)
        if result.is_err:
            logger.warning("Unparseable upstream body", upstream=self.name, error=result.error)
            raise BadUpstreamResponse(self.invalid_body_message)
        return result.value
