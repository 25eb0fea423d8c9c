"""
Gateway Errors
Failure kinds raised while forwarding a request, mapped to HTTP responses in app.main
"""

from typing import Optional


class GatewayError(Exception):
    """Base class for all proxy failures"""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(GatewayError):
    """A required credential is missing; raised before any network call"""

    def __init__(self, credential_name: str):
        super().__init__(f"Error: {credential_name} is required")
        self.credential_name = credential_name


class UpstreamHttpError(GatewayError):
    """Upstream answered with a non-2xx status; raw body bytes are relayed unchanged"""

    def __init__(self, status_code: int, body: bytes, content_type: Optional[str] = None):
        super().__init__(f"Upstream responded with status {status_code}")
        self.status_code = status_code
        self.body = body
        self.content_type = content_type


class BadUpstreamResponse(GatewayError):
    """Upstream answered 2xx but the body could not be parsed"""

    status_code = 502


class UpstreamTimeout(GatewayError):
    """Upstream did not answer within the configured timeout"""

    status_code = 504


class InternalError(GatewayError):
    """Any other failure, e.g. bundled data that failed to load"""

    status_code = 500
