from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum


class MessageState(str, Enum):
    SENT = "sent"
    READ = "read"


@dataclass(frozen=True)
class MessageUser:
    """A user as embedded in a message."""

    username: str
    first_name: str
    last_name: str
    phone: str


@dataclass
class Message:
    """Message aggregate root.

    A message moves from SENT to READ exactly once, when its recipient
    reads it. READ is terminal.
    """

    id: int
    body: str
    sent_at: datetime
    from_user: MessageUser
    to_user: MessageUser
    read_at: datetime | None = None

    @property
    def from_username(self) -> str:
        return self.from_user.username

    @property
    def to_username(self) -> str:
        return self.to_user.username

    @property
    def state(self) -> MessageState:
        return MessageState.SENT if self.read_at is None else MessageState.READ

    def is_participant(self, username: str) -> bool:
        """True when username is the sender or the recipient."""
        return username in (self.from_user.username, self.to_user.username)

    def is_recipient(self, username: str) -> bool:
        return username == self.to_user.username

    def mark_read(self, at: datetime | None = None) -> bool:
        """Move the message to READ.

        Returns False without touching read_at if it was already read.
        """
        if self.read_at is not None:
            return False
        self.read_at = at or datetime.now(UTC)
        return True
