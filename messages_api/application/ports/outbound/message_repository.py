from abc import ABC, abstractmethod

from ....domain.entities import Message


class MessageRepository(ABC):
    """Output port for message persistence.

    Every method returns fully hydrated messages, with both users
    resolved. Unknown ids raise MessageNotFoundError and unknown
    usernames raise UserNotFoundError.
    """

    @abstractmethod
    async def get_by_id(self, message_id: int) -> Message:
        """Retrieve a message by ID."""
        ...

    @abstractmethod
    async def create(self, from_username: str, to_username: str, body: str) -> Message:
        """Insert a new message; the store assigns id and sent_at."""
        ...

    @abstractmethod
    async def mark_read(self, message_id: int) -> Message:
        """Set read_at if it is still unset and return the message."""
        ...
