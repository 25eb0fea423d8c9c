"""
Configuration Management
Environment-based settings for upstream credentials, endpoints and server options
"""

from typing import Optional, Dict, List
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import structlog

logger = structlog.get_logger(__name__)

DEFAULT_NAVER_BASE_URL = "https://naveropenapi.apigw.ntruss.com"
DEFAULT_HIRA_BASE_URL = "http://apis.data.go.kr/B551182/nonPaymentDamtInfoService"


class Settings(BaseSettings):
    """Proxy service settings, resolved once at startup"""

    # Credentials: the first defined, non-empty variable in each list wins
    ncp_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(
            "ncp_id", "naver_client_id", "ncp_client_id", "x_ncp_apigw_api_key_id"
        ),
    )
    ncp_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(
            "ncp_key", "naver_client_secret", "ncp_client_secret", "x_ncp_apigw_api_key"
        ),
    )
    hira_service_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("hira_service_key", "hira_key", "service_key"),
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 3001
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    # Upstreams
    naver_base_url: str = DEFAULT_NAVER_BASE_URL
    hira_base_url: str = DEFAULT_HIRA_BASE_URL
    upstream_timeout: float = 15.0

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_ignore_empty=True,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    @field_validator("port")
    @classmethod
    def validate_port(cls, v):
        if not 1 <= v <= 65535:
            raise ValueError("PORT must be between 1 and 65535")
        return v

    @field_validator("upstream_timeout")
    @classmethod
    def validate_upstream_timeout(cls, v):
        if v <= 0:
            raise ValueError("UPSTREAM_TIMEOUT must be positive")
        return v

    @field_validator("naver_base_url", "hira_base_url")
    @classmethod
    def strip_trailing_slash(cls, v):
        return v.rstrip("/")

    def credentials_present(self) -> Dict[str, bool]:
        """Presence flags for each credential, never the values themselves"""
        return {
            "ncp_id_present": bool(self.ncp_id),
            "ncp_key_present": bool(self.ncp_key),
            "hira_key_present": bool(self.hira_service_key),
        }

    def log_config(self):
        """Log configuration (without sensitive data)"""
        logger.info(
            "Proxy configuration loaded",
            naver_base_url=self.naver_base_url,
            hira_base_url=self.hira_base_url,
            upstream_timeout=self.upstream_timeout,
            **self.credentials_present()
        )


def get_settings() -> Settings:
    """Build settings from the process environment"""
    return Settings()
