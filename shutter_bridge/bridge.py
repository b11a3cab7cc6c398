"""
Timezone bridge exposed over the application's timezone channel.
"""

from shutter_bridge.channel import MethodChannel
from shutter_bridge.models import MethodCall, MethodResult
from shutter_bridge.timezone_utils import DEFAULT_FALLBACK_TIMEZONE, get_host_timezone_name

CHANNEL_NAME = 'com.example.shutter/timezone'
GET_TIMEZONE = 'getTimezone'


class TimezoneBridge:
    """Answers getTimezone with the host's current timezone identifier."""

    def __init__(self, channel_name: str = CHANNEL_NAME, fallback_timezone: str = DEFAULT_FALLBACK_TIMEZONE):
        self.fallback_timezone = fallback_timezone
        self.channel = MethodChannel(channel_name)
        self.channel.register(GET_TIMEZONE, lambda _arguments: self.get_timezone())

    def get_timezone(self) -> str:
        """Read the host timezone. Never cached, the host setting may change."""
        return get_host_timezone_name(self.fallback_timezone)

    def handle(self, call: MethodCall) -> MethodResult:
        """
        Answer one call on the timezone channel.

        Returns:
            success(<timezone id>) for getTimezone, not_implemented() for any
            other method name
        """
        return self.channel.handle(call)
