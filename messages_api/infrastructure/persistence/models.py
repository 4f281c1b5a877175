from datetime import UTC, datetime
from typing import overload

from sqlalchemy import DateTime, ForeignKey, Index, String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from ...domain.entities import Message, MessageUser


@overload
def _aware_utc(dt: datetime) -> datetime: ...


@overload
def _aware_utc(dt: None) -> None: ...


@overload
def _aware_utc(dt: datetime | None) -> datetime | None: ...


def _aware_utc(dt: datetime | None) -> datetime | None:
    """Attach UTC timezone to naive datetimes read from the database."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt


# messages.id is a 32-bit INTEGER
MAX_MESSAGE_ID = 2**31 - 1


class Base(DeclarativeBase):
    pass


class UserModel(Base):
    """SQLAlchemy model for users who exchange messages."""

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(255), primary_key=True)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)
    join_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    def to_entity(self) -> MessageUser:
        return MessageUser(
            username=self.username,
            first_name=self.first_name,
            last_name=self.last_name,
            phone=self.phone,
        )


class MessageModel(Base):
    """SQLAlchemy model for Message entity."""

    __tablename__ = "messages"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    from_username: Mapped[str] = mapped_column(
        String(255), ForeignKey("users.username"), nullable=False
    )
    to_username: Mapped[str] = mapped_column(
        String(255), ForeignKey("users.username"), nullable=False
    )
    body: Mapped[str] = mapped_column(Text, nullable=False)
    sent_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    read_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    from_user: Mapped[UserModel] = relationship(foreign_keys=[from_username])
    to_user: Mapped[UserModel] = relationship(foreign_keys=[to_username])

    __table_args__ = (
        Index("ix_messages_from_username", "from_username"),
        Index("ix_messages_to_username", "to_username"),
    )

    def to_entity(self) -> Message:
        """Convert ORM model to domain entity. Both users must be loaded."""
        return Message(
            id=self.id,
            body=self.body,
            sent_at=_aware_utc(self.sent_at),
            read_at=_aware_utc(self.read_at),
            from_user=self.from_user.to_entity(),
            to_user=self.to_user.to_entity(),
        )
