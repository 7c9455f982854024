"""
Request signing for the Carrot service.

The service recomputes the signature from the form fields it receives, so
the canonical form here must be reproduced exactly:

    POST\\n{hostname}\\n{endpoint}\\n{k1}={v1}&{k2}={v2}...

with keys in ascending order and the ``sig`` field excluded. The signature
is the base64-encoded HMAC-SHA256 of that string keyed with the application
secret.
"""

import base64
import hashlib
import hmac
from typing import Any, Dict, Mapping, Optional

from .constants import (
    FIELD_API_KEY,
    FIELD_GAME_ID,
    FIELD_REQUEST_DATE,
    FIELD_REQUEST_ID,
    FIELD_SIGNATURE,
    REQUEST_ID_START,
    REQUEST_ID_END
)


def render_value(value: Any) -> str:
    """Render a payload value the way it is signed and sent."""
    if value is None:
        return ""
    return str(value)


def request_id_for(timestamp: float) -> str:
    """
    Derive the request id for a timestamp.

    Args:
        timestamp: Unix time as returned by the client clock

    Returns:
        Characters [8, 16) of the SHA-1 hex digest of ``str(timestamp)``
    """
    digest = hashlib.sha1(str(timestamp).encode('utf-8')).hexdigest()
    return digest[REQUEST_ID_START:REQUEST_ID_END]


def string_to_sign(method: str, hostname: str, endpoint: str, params: Mapping[str, Any]) -> str:
    """
    Build the canonical string for a request.

    Args:
        method: HTTP method, upper case
        hostname: Host the request is sent to
        endpoint: Endpoint path, starting with '/'
        params: Form fields; any ``sig`` entry is ignored

    Returns:
        The string the signature is computed over
    """
    pairs = [
        f"{key}={render_value(params[key])}"
        for key in sorted(params)
        if key != FIELD_SIGNATURE
    ]
    return f"{method}\n{hostname}\n{endpoint}\n" + '&'.join(pairs)


def sign(secret: str, message: str) -> str:
    """Return base64(HMAC-SHA256(secret, message)) without trailing whitespace."""
    mac = hmac.new(
        secret.encode('utf-8'),
        message.encode('utf-8'),
        hashlib.sha256
    )
    return base64.b64encode(mac.digest()).decode('ascii').strip()


def signed_params(
    payload: Mapping[str, Any],
    *,
    app_id: str,
    app_secret: str,
    hostname: str,
    endpoint: str,
    user_id: Optional[str],
    timestamp: float
) -> Dict[str, str]:
    """
    Produce the complete form body for a signed POST.

    The caller's payload is copied, never mutated. A ``sig`` already present
    in the payload is dropped and replaced by the freshly computed one.

    Args:
        payload: Endpoint specific fields
        app_id: Application id, sent as ``game_id``
        app_secret: Key for the HMAC
        hostname: Host used in the string to sign
        endpoint: Endpoint path used in the string to sign
        user_id: Acting user, sent as ``api_key``
        timestamp: Unix time used for ``request_date`` and ``request_id``

    Returns:
        Form fields, all rendered as strings, including ``sig``
    """
    params = {
        key: render_value(value)
        for key, value in payload.items()
        if key != FIELD_SIGNATURE
    }
    params.update({
        FIELD_API_KEY: render_value(user_id),
        FIELD_GAME_ID: render_value(app_id),
        FIELD_REQUEST_DATE: str(int(timestamp)),
        FIELD_REQUEST_ID: request_id_for(timestamp)
    })

    message = string_to_sign("POST", hostname, endpoint, params)
    params[FIELD_SIGNATURE] = sign(app_secret, message)
    return params
