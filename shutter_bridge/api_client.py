"""
HTTP client for calling bridge channels.
"""

from typing import Any

import requests
import urllib3

from shutter_bridge.bridge import CHANNEL_NAME, GET_TIMEZONE
from shutter_bridge.codec import decode_envelope
from shutter_bridge.exceptions import BridgeError
from shutter_bridge.models import MethodResult, ServerConfig

# Suppress SSL warnings for self-signed certificates
urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)


class BridgeClient:
    """Client for invoking methods on a remote channel."""

    def __init__(self, server_config: ServerConfig, channel: str = CHANNEL_NAME, timeout: float = 5.0):
        """
        Initialize bridge client.

        Args:
            server_config: Where the bridge transport listens
            channel: Channel to send calls to
            timeout: Request timeout in seconds
        """
        self.config = server_config
        self.base_url = server_config.base_url
        self.channel = channel
        self.verify_ssl = server_config.verify_ssl
        self.timeout = timeout

    def invoke_method(self, method: str, arguments: Any = None) -> MethodResult:
        """
        Send a method call and decode the reply envelope.

        Raises:
            requests.RequestException: If the request fails
        """
        url = f"{self.base_url}/channels/{self.channel}"
        response = requests.post(
            url,
            json={'method': method, 'args': arguments},
            verify=self.verify_ssl,
            timeout=self.timeout,
        )
        response.raise_for_status()
        return decode_envelope(response.json())

    def get_timezone(self) -> str:
        """
        Get the remote host's timezone identifier.

        Raises:
            BridgeError: If the bridge did not answer with a value
        """
        result = self.invoke_method(GET_TIMEZONE)
        if result.is_not_implemented:
            raise BridgeError(f"{GET_TIMEZONE} is not implemented on {self.channel}", code='not_implemented')
        if result.is_error:
            raise BridgeError(result.error_message or result.error_code, code=result.error_code,
                              details=result.error_details)
        return result.value
