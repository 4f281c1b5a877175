from .database import Database
from .message_repository import PostgresMessageRepository
from .unit_of_work import SqlAlchemyUnitOfWork

__all__ = ["Database", "PostgresMessageRepository", "SqlAlchemyUnitOfWork"]
