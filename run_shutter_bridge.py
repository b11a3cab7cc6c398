#!/usr/bin/env python3
"""
Shutter Bridge - HTTP Channel Entry Point

Run this script to start the bridge:
    python3 run_shutter_bridge.py

Then call it with:
    curl -X POST -d '{"method": "getTimezone"}' http://127.0.0.1:8487/channels/com.example.shutter/timezone
"""

import logging
import os

from flask_app import create_app
from shutter_bridge.config_loader import load_config

logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(name)s: %(message)s')

config_file = os.getenv('SHUTTER_BRIDGE_CONFIG', 'config.ini')
server, settings = load_config(config_file)
app = create_app(os.getenv('SHUTTER_BRIDGE_ENV', 'development'), settings=settings)

if __name__ == '__main__':
    print("\n" + "="*60)
    print("Shutter Bridge")
    print("="*60)
    print(f"\nChannel: {settings.channel_name}")
    print(f"Listening on: {server.base_url}")
    print("\nPress CTRL+C to stop the server\n")

    app.run(debug=app.debug, host=server.host, port=server.port, ssl_context=server.get_ssl_context())
