from .message_use_cases import (
    GetMessageUseCase,
    MarkMessageReadUseCase,
    SendMessageUseCase,
)

__all__ = [
    "GetMessageUseCase",
    "MarkMessageReadUseCase",
    "SendMessageUseCase",
]
