"""
Order code generation
"""
import secrets

ORDER_ID_PREFIX = "GG-"
ORDER_ID_LENGTH = 10
# Uppercase letters and digits without 0/O and 1/I
ORDER_ID_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"


def make_order_id(choice=secrets.choice) -> str:
    """Return a new order code such as ``GG-7KQ2M9XHPA``."""
    return ORDER_ID_PREFIX + "".join(choice(ORDER_ID_ALPHABET) for _ in range(ORDER_ID_LENGTH))
