"""
Admin access check

Admin endpoints accept the shared secret either as the ``x-admin-token``
header or the ``token`` query parameter. Nothing is remembered between
requests.
"""
import hmac
from typing import Optional

from order_api.core.config import Settings


def is_authorized(presented: Optional[str], app_settings: Settings) -> bool:
    """Return True when the caller may use admin endpoints."""
    if not app_settings.auth_required:
        return True

    expected = app_settings.admin_token
    if not expected:
        # REQUIRE_AUTH without a token: nobody gets in
        return False

    candidate = (presented or "").strip()
    if not candidate:
        return False
    return hmac.compare_digest(candidate.encode("utf-8"), expected.encode("utf-8"))
