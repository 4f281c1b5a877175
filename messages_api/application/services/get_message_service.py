import structlog

from ...domain.errors import UnauthorizedAccessError
from ..dtos import MessageDetailDTO
from ..ports.inbound import GetMessageUseCase
from ..ports.outbound import MessageRepository

logger = structlog.get_logger()


class GetMessageService(GetMessageUseCase):
    """Service implementing the get message use case."""

    def __init__(self, repository: MessageRepository) -> None:
        self._repository = repository

    async def execute(self, message_id: int, username: str) -> MessageDetailDTO:
        """Get a message the caller sent or received."""
        message = await self._repository.get_by_id(message_id)

        if not message.is_participant(username):
            logger.warning(
                "Message access denied: not a participant",
                message_id=message_id,
                username=username,
            )
            raise UnauthorizedAccessError(
                "Only the sender or recipient may view this message",
                username=username,
                message_id=message_id,
            )

        return MessageDetailDTO.from_entity(message)
