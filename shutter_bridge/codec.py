"""
JSON method codec.

Calls are encoded as {"method": ..., "args": ...}. Replies are envelopes:
[value] on success, [code, message, details] on error, and null when the
method is not implemented.
"""

import json
from typing import Any

from shutter_bridge.exceptions import CodecError
from shutter_bridge.models import MethodCall, MethodResult


def encode_method_call(call: MethodCall) -> str:
    return json.dumps({'method': call.method, 'args': call.arguments})


def decode_method_call(payload: Any) -> MethodCall:
    """
    Decode a method call from JSON text or an already-parsed object.

    Raises:
        CodecError: If the payload is not a JSON object with a string method
    """
    if isinstance(payload, (str, bytes, bytearray)):
        try:
            payload = json.loads(payload)
        except ValueError as e:
            raise CodecError(f"Invalid JSON method call: {e}")

    if not isinstance(payload, dict):
        raise CodecError("Method call must be a JSON object.")

    method = payload.get('method')
    if not isinstance(method, str) or not method:
        raise CodecError("Method call is missing a 'method' name.")

    return MethodCall(method=method, arguments=payload.get('args'))


def result_to_envelope(result: MethodResult) -> Any:
    if result.is_success:
        return [result.value]
    if result.is_error:
        return [result.error_code, result.error_message, result.error_details]
    return None


def encode_result(result: MethodResult) -> str:
    return json.dumps(result_to_envelope(result))


def decode_envelope(payload: Any) -> MethodResult:
    """
    Turn a reply envelope back into a MethodResult.

    Raises:
        CodecError: If the envelope has an unexpected shape
    """
    if isinstance(payload, (str, bytes, bytearray)):
        if not payload:
            return MethodResult.not_implemented()
        try:
            payload = json.loads(payload)
        except ValueError as e:
            raise CodecError(f"Invalid JSON envelope: {e}")

    if payload is None:
        return MethodResult.not_implemented()
    if not isinstance(payload, list):
        raise CodecError("Envelope must be a JSON array or null.")
    if len(payload) == 1:
        return MethodResult.success(payload[0])
    if len(payload) == 3 and isinstance(payload[0], str):
        return MethodResult.error(payload[0], payload[1], payload[2])
    raise CodecError(f"Unexpected envelope of length {len(payload)}.")
