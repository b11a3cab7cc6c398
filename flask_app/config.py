"""
Flask application configuration.
"""
import os


class Config:
    """Base configuration."""
    BRIDGE_CONFIG_FILE = os.environ.get('SHUTTER_BRIDGE_CONFIG') or 'config.ini'


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
