"""
Configuration loader for Shutter Bridge.

Supports loading configuration from:
1. config.ini file (recommended)
2. Environment variables (for automation/Docker)
"""

import configparser
import os
from dataclasses import dataclass
from typing import Optional, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from shutter_bridge.bridge import CHANNEL_NAME
from shutter_bridge.models import ServerConfig
from shutter_bridge.timezone_utils import DEFAULT_FALLBACK_TIMEZONE

_TRUE_VALUES = ('1', 'true', 'yes', 'on')


@dataclass
class BridgeSettings:
    """Settings for the timezone channel."""

    channel_name: str = CHANNEL_NAME
    fallback_timezone: str = DEFAULT_FALLBACK_TIMEZONE  # Used when the host reports no zone


def _env_flag(name: str) -> bool:
    return os.getenv(name, '').strip().lower() in _TRUE_VALUES


def _parse_port(value: str) -> int:
    try:
        port = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid port: {value!r}")
    if not 0 < port < 65536:
        raise ValueError(f"Port out of range: {port}")
    return port


class ConfigLoader:
    """Load configuration from various sources."""

    def __init__(self, config_file: str = "config.ini"):
        """
        Initialize config loader.

        Args:
            config_file: Path to config file (default: config.ini)
        """
        self.config_file = config_file
        self.config: Optional[configparser.ConfigParser] = None

    def load_from_file(self) -> bool:
        """
        Load configuration from INI file.

        Returns:
            True if file was loaded successfully, False otherwise
        """
        if not os.path.exists(self.config_file):
            return False

        self.config = configparser.ConfigParser()
        self.config.read(self.config_file)
        return True

    def get_server_config(self) -> ServerConfig:
        """
        Get the HTTP transport settings.

        Raises:
            ValueError: If the port is not a valid TCP port
        """
        defaults = ServerConfig()

        if self.config and self.config.has_section('Server'):
            return ServerConfig(
                host=self.config.get('Server', 'host', fallback=defaults.host),
                port=_parse_port(self.config.get('Server', 'port', fallback=str(defaults.port))),
                use_ssl=self.config.getboolean('Server', 'use_ssl', fallback=False),
                verify_ssl=self.config.getboolean('Server', 'verify_ssl', fallback=False),
                cert_file=self.config.get('Server', 'cert_file', fallback=None),
                key_file=self.config.get('Server', 'key_file', fallback=None),
            )

        return ServerConfig(
            host=os.getenv('SHUTTER_BRIDGE_HOST', defaults.host),
            port=_parse_port(os.getenv('SHUTTER_BRIDGE_PORT', str(defaults.port))),
            use_ssl=_env_flag('SHUTTER_BRIDGE_SSL'),
            verify_ssl=_env_flag('SHUTTER_BRIDGE_VERIFY_SSL'),
            cert_file=os.getenv('SHUTTER_BRIDGE_CERT_FILE'),
            key_file=os.getenv('SHUTTER_BRIDGE_KEY_FILE'),
        )

    def get_settings(self) -> BridgeSettings:
        """
        Get bridge settings.

        Raises:
            ValueError: If the channel name is empty or the fallback zone is unknown
        """
        settings = BridgeSettings()

        if self.config and self.config.has_section('Bridge'):
            settings.channel_name = self.config.get('Bridge', 'channel_name', fallback=CHANNEL_NAME)
            settings.fallback_timezone = self.config.get(
                'Bridge', 'fallback_timezone', fallback=DEFAULT_FALLBACK_TIMEZONE
            )
        else:
            settings.channel_name = os.getenv('SHUTTER_BRIDGE_CHANNEL', CHANNEL_NAME)
            settings.fallback_timezone = os.getenv('SHUTTER_BRIDGE_FALLBACK_TZ', DEFAULT_FALLBACK_TIMEZONE)

        settings.channel_name = settings.channel_name.strip()
        if not settings.channel_name:
            raise ValueError("Channel name must not be empty.")

        try:
            ZoneInfo(settings.fallback_timezone)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Unknown fallback timezone: {settings.fallback_timezone!r}")

        return settings


def load_config(config_file: str = "config.ini") -> Tuple[ServerConfig, BridgeSettings]:
    """
    Convenience function to load all configuration.

    Args:
        config_file: Path to config file

    Returns:
        Tuple of (server, settings)

    Raises:
        ValueError: If configuration is invalid
    """
    loader = ConfigLoader(config_file)
    loader.load_from_file()

    return loader.get_server_config(), loader.get_settings()
