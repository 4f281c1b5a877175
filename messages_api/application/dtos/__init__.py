from .message_dto import (
    CreateMessageDTO,
    MessageDetailDTO,
    MessageDetailResponse,
    SentMessageDTO,
    SentMessageResponse,
    UserDTO,
)

__all__ = [
    "CreateMessageDTO",
    "MessageDetailDTO",
    "MessageDetailResponse",
    "SentMessageDTO",
    "SentMessageResponse",
    "UserDTO",
]
