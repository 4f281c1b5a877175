import structlog

from ...domain.errors import UnauthorizedAccessError
from ..dtos import MessageDetailDTO
from ..ports.inbound import MarkMessageReadUseCase
from ..ports.outbound import MessageRepository, UnitOfWork

logger = structlog.get_logger()


class MarkMessageReadService(MarkMessageReadUseCase):
    """Service implementing the mark-as-read use case.

    Only the recipient may mark a message read; the sender is refused
    even though the sender may view it. Marking an already read message
    again succeeds and keeps the original read_at.
    """

    def __init__(self, repository: MessageRepository, unit_of_work: UnitOfWork) -> None:
        self._repository = repository
        self._uow = unit_of_work

    async def execute(self, message_id: int, username: str) -> MessageDetailDTO:
        message = await self._repository.get_by_id(message_id)

        if not message.is_recipient(username):
            logger.warning(
                "Mark read denied: not the recipient",
                message_id=message_id,
                username=username,
            )
            raise UnauthorizedAccessError(
                "Only the recipient may mark this message as read",
                username=username,
                message_id=message_id,
            )

        if not message.mark_read():
            logger.debug("Message already read", message_id=message_id)
            return MessageDetailDTO.from_entity(message)

        async with self._uow:
            updated = await self._repository.mark_read(message_id)
            await self._uow.commit()

        logger.info("Message marked read", message_id=message_id, username=username)
        return MessageDetailDTO.from_entity(updated)
