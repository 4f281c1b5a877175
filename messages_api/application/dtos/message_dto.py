"""Message DTOs.

Every response is wrapped as ``{"message": {...}}``.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from ...domain.entities import Message, MessageUser


class CreateMessageDTO(BaseModel):
    """DTO for sending a message.

    There is no sender field: the sender is always the authenticated
    caller. Unknown fields in the request body are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    to_username: str
    body: str


class UserDTO(BaseModel):
    username: str
    first_name: str
    last_name: str
    phone: str

    @classmethod
    def from_entity(cls, user: MessageUser) -> "UserDTO":
        return cls(
            username=user.username,
            first_name=user.first_name,
            last_name=user.last_name,
            phone=user.phone,
        )


class MessageDetailDTO(BaseModel):
    """Full message with both participants resolved."""

    id: int
    body: str
    sent_at: datetime
    read_at: datetime | None
    from_user: UserDTO
    to_user: UserDTO

    @classmethod
    def from_entity(cls, message: Message) -> "MessageDetailDTO":
        return cls(
            id=message.id,
            body=message.body,
            sent_at=message.sent_at,
            read_at=message.read_at,
            from_user=UserDTO.from_entity(message.from_user),
            to_user=UserDTO.from_entity(message.to_user),
        )


class SentMessageDTO(BaseModel):
    """A newly created message, referring to users by username only."""

    id: int
    from_username: str
    to_username: str
    body: str
    sent_at: datetime

    @classmethod
    def from_entity(cls, message: Message) -> "SentMessageDTO":
        return cls(
            id=message.id,
            from_username=message.from_username,
            to_username=message.to_username,
            body=message.body,
            sent_at=message.sent_at,
        )


class MessageDetailResponse(BaseModel):
    message: MessageDetailDTO


class SentMessageResponse(BaseModel):
    message: SentMessageDTO
