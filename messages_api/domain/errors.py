"""Typed failures raised by the message use cases.

Each error carries a ``kind`` that the HTTP layer maps to a status code,
so callers never have to guess what a bare exception meant.
"""


class MessageAccessError(Exception):
    """Base class for message access failures."""

    kind = "error"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class UnauthorizedAccessError(MessageAccessError):
    """Caller is authenticated but not allowed to act on the message."""

    kind = "unauthorized"

    def __init__(self, detail: str, username: str, message_id: int) -> None:
        super().__init__(detail)
        self.username = username
        self.message_id = message_id


class MessageNotFoundError(MessageAccessError):
    kind = "not_found"

    def __init__(self, message_id: int) -> None:
        super().__init__(f"No such message: {message_id}")
        self.message_id = message_id


class UserNotFoundError(MessageAccessError):
    kind = "not_found"

    def __init__(self, username: str) -> None:
        super().__init__(f"No such user: {username}")
        self.username = username
