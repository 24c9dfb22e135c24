"""
Error types raised by the order service and mapped to JSON responses
"""


class OrderAPIError(Exception):
    """Base error carrying the HTTP status and the message shown to callers."""

    status_code = 500
    default_message = "Server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(OrderAPIError):
    """Client input failed a validation rule."""

    status_code = 400
    default_message = "Invalid request"


class AuthorizationError(OrderAPIError):
    status_code = 401
    default_message = "Unauthorized"


class NotFoundError(OrderAPIError):
    status_code = 404
    default_message = "Not found"


class StorageError(OrderAPIError):
    """Reading or writing the orders document failed.

    The message is for operator logs; callers only ever see ``public_message``.
    """

    status_code = 500
    default_message = "Storage failure"
    public_message = "Server error"
