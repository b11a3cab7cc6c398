"""
Data models for method calls, their results and server settings.
"""

from dataclasses import dataclass
from typing import Any, Optional, Tuple

SUCCESS = 'success'
ERROR = 'error'
NOT_IMPLEMENTED = 'notImplemented'


@dataclass(frozen=True)
class MethodCall:
    """A named request sent over a channel."""

    method: str
    arguments: Any = None


@dataclass(frozen=True)
class MethodResult:
    """
    Tagged outcome of a method call.

    A not-implemented result carries no value at all, so callers can tell
    an unrecognized method apart from a method that returned None or ''.
    """

    status: str
    value: Any = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None
    error_details: Any = None

    @classmethod
    def success(cls, value: Any) -> 'MethodResult':
        return cls(status=SUCCESS, value=value)

    @classmethod
    def error(cls, code: str, message: Optional[str] = None, details: Any = None) -> 'MethodResult':
        return cls(status=ERROR, error_code=code, error_message=message, error_details=details)

    @classmethod
    def not_implemented(cls) -> 'MethodResult':
        return cls(status=NOT_IMPLEMENTED)

    @property
    def is_success(self) -> bool:
        return self.status == SUCCESS

    @property
    def is_error(self) -> bool:
        return self.status == ERROR

    @property
    def is_not_implemented(self) -> bool:
        return self.status == NOT_IMPLEMENTED


@dataclass
class ServerConfig:
    """Where the bridge HTTP transport listens."""

    host: str = '127.0.0.1'
    port: int = 8487
    use_ssl: bool = False
    verify_ssl: bool = False
    cert_file: Optional[str] = None
    key_file: Optional[str] = None

    def get_ssl_context(self) -> Optional[Tuple[str, str]]:
        """
        Get the (certificate, key) pair the server should listen with.

        Returns:
            None when SSL is off, otherwise the certificate and key paths

        Raises:
            ValueError: If SSL is on but the certificate or key is missing
        """
        if not self.use_ssl:
            return None
        if not self.cert_file or not self.key_file:
            raise ValueError("use_ssl requires both cert_file and key_file to serve over HTTPS.")
        return self.cert_file, self.key_file

    @property
    def base_url(self) -> str:
        """Get the base URL for channel requests."""
        protocol = "https" if self.use_ssl else "http"
        return f"{protocol}://{self.host}:{self.port}"
