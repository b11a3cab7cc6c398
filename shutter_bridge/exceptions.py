"""
Exceptions raised by the bridge.
"""

from typing import Any


class BridgeError(Exception):
    """Base error carrying a code that is reported back over the channel."""

    code = 'error'

    def __init__(self, message: str, code: str | None = None, details: Any = None):
        super().__init__(message)
        if code is not None:
            self.code = code
        self.message = message
        self.details = details


class CodecError(BridgeError):
    """Raised for malformed method calls or reply envelopes."""

    code = 'bad_envelope'


class ChannelNotFoundError(BridgeError):
    """Raised when a request names a channel nobody registered."""

    code = 'channel_not_found'
