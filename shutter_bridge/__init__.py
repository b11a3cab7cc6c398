"""
Shutter Bridge

Exposes the host's timezone identifier over a named method channel.
"""

from shutter_bridge.api_client import BridgeClient
from shutter_bridge.bridge import CHANNEL_NAME, TimezoneBridge
from shutter_bridge.channel import ChannelRegistry, MethodChannel
from shutter_bridge.exceptions import BridgeError, ChannelNotFoundError, CodecError
from shutter_bridge.models import MethodCall, MethodResult, ServerConfig
from shutter_bridge.timezone_utils import get_host_timezone, get_host_timezone_name

__version__ = "0.1.0"
__all__ = [
    "BridgeClient",
    "CHANNEL_NAME",
    "TimezoneBridge",
    "ChannelRegistry",
    "MethodChannel",
    "BridgeError",
    "ChannelNotFoundError",
    "CodecError",
    "MethodCall",
    "MethodResult",
    "ServerConfig",
    "get_host_timezone",
    "get_host_timezone_name",
]
