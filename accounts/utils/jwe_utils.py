"""Compact JWE sealing for the opaque session cookie (``dir`` + ``A256GCM``)."""
import base64
import json

from django.conf import settings
from jwcrypto import jwe, jwk
from jwcrypto.common import JWException

PROTECTED_HEADER = {"alg": "dir", "enc": "A256GCM"}


class TokenDecodeError(Exception):
    """Raised when a cookie value cannot be opened into a payload."""


def cookie_key():
    encoded = settings.JWE_SECRET_KEY
    key_bytes = base64.urlsafe_b64decode(encoded + "=" * (-len(encoded) % 4))
    if len(key_bytes) != 32:
        raise ValueError("JWE_SECRET_KEY must decode to 32 bytes.")
    return jwk.JWK(kty="oct", k=base64.urlsafe_b64encode(key_bytes).decode().rstrip("="))


def seal_payload(payload: dict) -> str:
    token = jwe.JWE(json.dumps(payload).encode(), protected=PROTECTED_HEADER)
    token.add_recipient(cookie_key())
    return token.serialize(compact=True)


def open_payload(token: str) -> dict:
    sealed = jwe.JWE()
    try:
        sealed.deserialize(token, key=cookie_key())
        payload = json.loads(sealed.payload)
    except (JWException, ValueError, TypeError) as e:
        raise TokenDecodeError(str(e)) from e
    if not isinstance(payload, dict):
        raise TokenDecodeError("Cookie payload is not an object")
    return payload
