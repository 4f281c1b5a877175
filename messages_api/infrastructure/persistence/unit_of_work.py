from types import TracebackType

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from ...application.ports.outbound import UnitOfWork

logger = structlog.get_logger()


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Wraps one message write in the session's transaction.

    A failed create or mark-read leaves no partial row behind: the
    session is rolled back before the error reaches the caller.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def __aenter__(self) -> "SqlAlchemyUnitOfWork":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if exc_type is None:
            return
        logger.info("Rolling back message write", error_type=exc_type.__name__)
        await self.rollback()

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        await self._session.rollback()
