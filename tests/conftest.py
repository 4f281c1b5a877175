from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest

from messages_api.domain.entities import Message, MessageUser


@pytest.fixture
def alice() -> MessageUser:
    return MessageUser(username="alice", first_name="Alice", last_name="Anders", phone="+15550001")


@pytest.fixture
def bob() -> MessageUser:
    return MessageUser(username="bob", first_name="Bob", last_name="Baker", phone="+15550002")


@pytest.fixture
def message_factory(alice, bob):
    """Build alice→bob messages; override any field by keyword."""

    def make(
        message_id: int = 1,
        body: str = "hi",
        read_at: datetime | None = None,
        from_user: MessageUser | None = None,
        to_user: MessageUser | None = None,
    ) -> Message:
        return Message(
            id=message_id,
            body=body,
            sent_at=datetime.now(UTC) - timedelta(minutes=5),
            from_user=from_user or alice,
            to_user=to_user or bob,
            read_at=read_at,
        )

    return make


@pytest.fixture
def alice_to_bob(message_factory) -> Message:
    return message_factory()


@pytest.fixture
def read_message(message_factory) -> Message:
    return message_factory(message_id=2, read_at=datetime(2024, 1, 1, 12, 0, tzinfo=UTC))


@pytest.fixture
def mock_repository():
    return AsyncMock()


@pytest.fixture
def mock_unit_of_work():
    uow = AsyncMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=None)
    return uow
