from abc import ABC, abstractmethod

from ...dtos import CreateMessageDTO, MessageDetailDTO, SentMessageDTO


class GetMessageUseCase(ABC):
    """Input port for reading a message as one of its participants."""

    @abstractmethod
    async def execute(self, message_id: int, username: str) -> MessageDetailDTO:
        ...


class SendMessageUseCase(ABC):
    """Input port for sending a message from the authenticated user."""

    @abstractmethod
    async def execute(self, dto: CreateMessageDTO, username: str) -> SentMessageDTO:
        ...


class MarkMessageReadUseCase(ABC):
    """Input port for the recipient marking a message as read."""

    @abstractmethod
    async def execute(self, message_id: int, username: str) -> MessageDetailDTO:
        ...
