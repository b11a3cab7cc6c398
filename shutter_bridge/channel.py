"""
Named method channels.

A channel maps method names to handlers. Calls to names nobody registered
come back as a not-implemented result instead of raising.
"""

import logging
from typing import Any, Callable, Optional

from shutter_bridge.exceptions import BridgeError
from shutter_bridge.models import MethodCall, MethodResult

logger = logging.getLogger(__name__)

MethodHandler = Callable[[Any], Any]
CallHandler = Callable[[MethodCall], MethodResult]


class MethodChannel:
    """Dispatch table keyed by method name."""

    def __init__(self, name: str):
        """
        Initialize a channel.

        Args:
            name: Channel identifier, unique within the application

        Raises:
            ValueError: If the name is empty
        """
        if not name or not name.strip():
            raise ValueError("Channel name is required.")
        self.name = name
        self._handlers: dict[str, MethodHandler] = {}
        self._call_handler: Optional[CallHandler] = None

    def __repr__(self) -> str:
        return f"MethodChannel(name='{self.name}', methods={self.methods})"

    @property
    def methods(self) -> list[str]:
        return sorted(self._handlers)

    def register(self, method: str, handler: MethodHandler) -> None:
        """Bind a handler receiving the call arguments to a method name."""
        self._handlers[method] = handler

    def set_method_call_handler(self, handler: Optional[CallHandler]) -> None:
        """
        Install a catch-all handler that receives the whole call.

        When set, it takes over dispatch entirely and registered
        per-method handlers are ignored. Pass None to remove it.
        """
        self._call_handler = handler

    def invoke(self, method: str, arguments: Any = None) -> MethodResult:
        """
        Dispatch a call and wrap the outcome.

        Args:
            method: Method name
            arguments: Call arguments, passed through to the handler

        Returns:
            success(value), not_implemented() for unknown names, or
            error(...) if the handler raised
        """
        return self.handle(MethodCall(method=method, arguments=arguments))

    def handle(self, call: MethodCall) -> MethodResult:
        logger.debug("%s: dispatching %s", self.name, call.method)

        if self._call_handler is not None:
            return self._guard(call, lambda: self._call_handler(call))

        handler = self._handlers.get(call.method)
        if handler is None:
            logger.debug("%s: %s not implemented", self.name, call.method)
            return MethodResult.not_implemented()

        return self._guard(call, lambda: MethodResult.success(handler(call.arguments)))

    def _guard(self, call: MethodCall, func: Callable[[], MethodResult]) -> MethodResult:
        try:
            return func()
        except BridgeError as e:
            logger.warning("%s: %s failed: %s", self.name, call.method, e)
            return MethodResult.error(e.code, e.message, e.details)
        except Exception as e:
            logger.warning("%s: %s raised %s", self.name, call.method, e, exc_info=True)
            return MethodResult.error('error', str(e))


class ChannelRegistry:
    """Channels known to a transport, looked up by name."""

    def __init__(self):
        self._channels: dict[str, MethodChannel] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._channels

    def add(self, channel: MethodChannel) -> MethodChannel:
        if channel.name in self._channels:
            raise ValueError(f"Channel {channel.name!r} is already registered.")
        self._channels[channel.name] = channel
        return channel

    def get(self, name: str) -> Optional[MethodChannel]:
        return self._channels.get(name)

    def describe(self) -> dict[str, list[str]]:
        """Map every channel name to its method names."""
        return {name: channel.methods for name, channel in sorted(self._channels.items())}
