from datetime import UTC, datetime

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ...application.ports.outbound import MessageRepository
from ...domain.entities import Message
from ...domain.errors import MessageNotFoundError, UserNotFoundError
from .models import MAX_MESSAGE_ID, MessageModel, UserModel


class PostgresMessageRepository(MessageRepository):
    """PostgreSQL implementation of MessageRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, message_id: int) -> Message:
        _check_id_range(message_id)
        stmt = (
            select(MessageModel)
            .where(MessageModel.id == message_id)
            .options(
                selectinload(MessageModel.from_user),
                selectinload(MessageModel.to_user),
            )
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            raise MessageNotFoundError(message_id)
        return model.to_entity()

    async def create(self, from_username: str, to_username: str, body: str) -> Message:
        sender = await self._get_user(from_username)
        recipient = await self._get_user(to_username)

        model = MessageModel(
            from_username=sender.username,
            to_username=recipient.username,
            body=body,
            sent_at=datetime.now(UTC),
        )
        model.from_user = sender
        model.to_user = recipient
        self._session.add(model)
        await self._session.flush()
        return model.to_entity()

    async def mark_read(self, message_id: int) -> Message:
        """Set read_at once; later calls leave the first timestamp in place."""
        _check_id_range(message_id)
        stmt = (
            update(MessageModel)
            .where(MessageModel.id == message_id, MessageModel.read_at.is_(None))
            .values(read_at=datetime.now(UTC))
            .execution_options(synchronize_session=False)
        )
        await self._session.execute(stmt)
        return await self.get_by_id(message_id)

    async def _get_user(self, username: str) -> UserModel:
        user = await self._session.get(UserModel, username)
        if user is None:
            raise UserNotFoundError(username)
        return user


def _check_id_range(message_id: int) -> None:
    """Ids outside the INTEGER column range never resolve."""
    if not 1 <= message_id <= MAX_MESSAGE_ID:
        raise MessageNotFoundError(message_id)
