from .inbound import GetMessageUseCase, MarkMessageReadUseCase, SendMessageUseCase
from .outbound import MessageRepository, UnitOfWork

__all__ = [
    "GetMessageUseCase",
    "MarkMessageReadUseCase",
    "SendMessageUseCase",
    "MessageRepository",
    "UnitOfWork",
]
