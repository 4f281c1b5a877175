from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ...application.ports.inbound import (
    GetMessageUseCase,
    MarkMessageReadUseCase,
    SendMessageUseCase,
)
from ...application.services import (
    GetMessageService,
    MarkMessageReadService,
    SendMessageService,
)
from ...config import settings
from ...infrastructure.persistence import (
    Database,
    PostgresMessageRepository,
    SqlAlchemyUnitOfWork,
)

# Singleton database instance
_database: Database | None = None


def get_database() -> Database:
    global _database
    if _database is None:
        _database = Database(settings.database_url, echo=settings.debug)
    return _database


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    db = get_database()
    session = db.session()
    try:
        yield session
    finally:
        await session.close()


async def get_message_service(session=Depends(get_session)) -> GetMessageUseCase:
    return GetMessageService(PostgresMessageRepository(session))


async def get_send_message_service(session=Depends(get_session)) -> SendMessageUseCase:
    return SendMessageService(
        PostgresMessageRepository(session),
        SqlAlchemyUnitOfWork(session),
    )


async def get_mark_read_service(session=Depends(get_session)) -> MarkMessageReadUseCase:
    return MarkMessageReadService(
        PostgresMessageRepository(session),
        SqlAlchemyUnitOfWork(session),
    )
