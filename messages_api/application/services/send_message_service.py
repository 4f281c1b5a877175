import structlog

from ..dtos import CreateMessageDTO, SentMessageDTO
from ..ports.inbound import SendMessageUseCase
from ..ports.outbound import MessageRepository, UnitOfWork

logger = structlog.get_logger()


class SendMessageService(SendMessageUseCase):
    """Service implementing the send message use case."""

    def __init__(self, repository: MessageRepository, unit_of_work: UnitOfWork) -> None:
        self._repository = repository
        self._uow = unit_of_work

    async def execute(self, dto: CreateMessageDTO, username: str) -> SentMessageDTO:
        """Send a message from ``username``, the authenticated caller."""
        async with self._uow:
            message = await self._repository.create(
                from_username=username,
                to_username=dto.to_username,
                body=dto.body,
            )
            await self._uow.commit()

        logger.info(
            "Message sent",
            message_id=message.id,
            from_username=message.from_username,
            to_username=message.to_username,
        )
        return SentMessageDTO.from_entity(message)
