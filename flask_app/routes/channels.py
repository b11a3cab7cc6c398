"""
Channel routes: receive JSON method calls and reply with codec envelopes.
"""
from flask import Blueprint, current_app, jsonify, request

from shutter_bridge.codec import decode_method_call, result_to_envelope
from shutter_bridge.exceptions import BridgeError, ChannelNotFoundError, CodecError
from shutter_bridge.models import MethodResult

channels_bp = Blueprint('channels', __name__)


def _registry():
    return current_app.extensions['channel_registry']


def _error_response(error: BridgeError, status: int):
    envelope = result_to_envelope(MethodResult.error(error.code, error.message, error.details))
    return jsonify(envelope), status


@channels_bp.route('/health')
def health():
    """Liveness check that also reports the current host timezone."""
    bridge = current_app.extensions['timezone_bridge']
    return jsonify({'status': 'ok', 'timezone': bridge.get_timezone()})


@channels_bp.route('/channels')
def list_channels():
    """List registered channels and their methods."""
    return jsonify(_registry().describe())


@channels_bp.route('/channels/<path:channel_name>', methods=['POST'])
def invoke(channel_name):
    """
    Dispatch one method call.

    Every dispatched call answers 200, including not-implemented (a null
    body). Only transport problems use other status codes.
    """
    channel = _registry().get(channel_name)
    if channel is None:
        return _error_response(ChannelNotFoundError(f"No channel named {channel_name!r}."), 404)

    try:
        call = decode_method_call(request.get_data())
    except CodecError as e:
        return _error_response(e, 400)

    result = channel.handle(call)
    return jsonify(result_to_envelope(result))
