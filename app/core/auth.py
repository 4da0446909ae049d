from __future__ import annotations

import re


_BEARER_RE = re.compile(r"^Bearer\s+(.+)$", re.IGNORECASE)
_BARE_TOKEN_RE = re.compile(r"^[A-Za-z0-9\-_]+\.[A-Za-z0-9\-_]+\.[A-Za-z0-9\-_]+$")


def extract_credential(authorization: str | None) -> str | None:
    """Pull the session token out of an Authorization header value.

    Accepts ``Bearer <token>`` in any case, a bare three-segment token, and the
    legacy ``<scheme> <token>`` shape. Anything else yields None.
    """
    if authorization is None:
        return None
    header = authorization.strip()
    if not header:
        return None

    match = _BEARER_RE.match(header)
    if match:
        token = match.group(1).strip()
        return token or None

    if _BARE_TOKEN_RE.match(header):
        return header

    parts = header.split()
    if len(parts) == 2:
        return parts[-1]
    return None
