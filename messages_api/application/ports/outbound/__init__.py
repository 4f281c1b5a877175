from .message_repository import MessageRepository
from .unit_of_work import UnitOfWork

__all__ = ["MessageRepository", "UnitOfWork"]
