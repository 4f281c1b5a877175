from abc import ABC, abstractmethod
from types import TracebackType


class UnitOfWork(ABC):
    """Output port for the transaction around a message write.

    Leaving the block with an exception rolls back; callers commit
    explicitly.
    """

    @abstractmethod
    async def __aenter__(self) -> "UnitOfWork": ...

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...

    @abstractmethod
    async def commit(self) -> None:
        ...

    @abstractmethod
    async def rollback(self) -> None:
        ...
