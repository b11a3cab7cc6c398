"""
Flask application factory.
"""
import logging

from flask import Flask

from shutter_bridge.bridge import TimezoneBridge
from shutter_bridge.channel import ChannelRegistry
from shutter_bridge.config_loader import BridgeSettings, ConfigLoader


def create_app(config_name='development', settings: BridgeSettings | None = None):
    """Create and configure the Flask application."""
    app = Flask(__name__)

    # Load configuration
    if config_name == 'production':
        app.config.from_object('flask_app.config.ProductionConfig')
    else:
        app.config.from_object('flask_app.config.DevelopmentConfig')

    if settings is None:
        loader = ConfigLoader(app.config['BRIDGE_CONFIG_FILE'])
        loader.load_from_file()
        settings = loader.get_settings()

    logging.getLogger('shutter_bridge').setLevel(logging.DEBUG if app.debug else logging.INFO)

    # Register channels
    bridge = TimezoneBridge(settings.channel_name, settings.fallback_timezone)
    registry = ChannelRegistry()
    registry.add(bridge.channel)
    app.extensions['channel_registry'] = registry
    app.extensions['timezone_bridge'] = bridge

    # Register blueprints
    from flask_app.routes.channels import channels_bp

    app.register_blueprint(channels_bp)

    return app
