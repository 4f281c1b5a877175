"""PostgresMessageRepository behaviour against a throwaway SQLite database."""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy import func, select

from messages_api.application.dtos import CreateMessageDTO
from messages_api.application.services import (
    GetMessageService,
    MarkMessageReadService,
    SendMessageService,
)
from messages_api.domain.errors import MessageNotFoundError, UserNotFoundError
from messages_api.infrastructure.persistence import (
    Database,
    PostgresMessageRepository,
    SqlAlchemyUnitOfWork,
)
from messages_api.infrastructure.persistence.models import MessageModel, UserModel
from messages_api.main import app
from messages_api.presentation.api.dependencies import (
    get_database,
    get_mark_read_service,
    get_message_service,
)
from messages_api.presentation.middleware import create_access_token


def sqlite_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'messages.db'}"


@pytest_asyncio.fixture
async def database(tmp_path):
    db = Database(sqlite_url(tmp_path))
    await db.create_tables()
    async with db.session() as session:
        session.add_all(
            [
                UserModel(username="alice", first_name="Alice", last_name="Anders", phone="+15550001"),
                UserModel(username="bob", first_name="Bob", last_name="Baker", phone="+15550002"),
            ]
        )
        await session.commit()
    yield db
    await db.close()


@pytest_asyncio.fixture
async def session(database):
    async with database.session() as session:
        yield session


@pytest.fixture
def repository(session):
    return PostgresMessageRepository(session)


async def count_messages(database: Database) -> int:
    async with database.session() as session:
        return await session.scalar(select(func.count()).select_from(MessageModel))


class TestCreate:
    @pytest.mark.asyncio
    async def test_assigns_id_and_sent_at(self, repository, session):
        message = await repository.create("alice", "bob", "hi")
        await session.commit()

        assert message.id >= 1
        assert message.sent_at.tzinfo is not None
        assert message.read_at is None
        assert message.from_user.first_name == "Alice"
        assert message.to_user.phone == "+15550002"

    @pytest.mark.asyncio
    async def test_unknown_recipient_raises(self, repository, database):
        with pytest.raises(UserNotFoundError) as exc_info:
            await repository.create("alice", "nobody", "hi")

        assert exc_info.value.username == "nobody"
        assert await count_messages(database) == 0

    @pytest.mark.asyncio
    async def test_unknown_sender_raises(self, repository):
        with pytest.raises(UserNotFoundError):
            await repository.create("ghost", "bob", "hi")

    @pytest.mark.asyncio
    async def test_failed_send_rolls_back_and_session_stays_usable(
        self, repository, session, database
    ):
        service = SendMessageService(repository, SqlAlchemyUnitOfWork(session))

        with pytest.raises(UserNotFoundError):
            await service.execute(CreateMessageDTO(to_username="nobody", body="hi"), "alice")

        sent = await service.execute(CreateMessageDTO(to_username="bob", body="hi"), "alice")

        assert sent.from_username == "alice"
        assert await count_messages(database) == 1


class TestGetById:
    @pytest.mark.asyncio
    async def test_round_trips_users(self, repository, session):
        created = await repository.create("alice", "bob", "hello")
        await session.commit()

        fetched = await repository.get_by_id(created.id)

        assert fetched.body == "hello"
        assert fetched.from_username == "alice"
        assert fetched.to_username == "bob"

    @pytest.mark.asyncio
    async def test_unknown_id_raises(self, repository):
        with pytest.raises(MessageNotFoundError):
            await repository.get_by_id(12345)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("message_id", [0, -1, 2**31, 3_000_000_000])
    async def test_out_of_range_id_is_not_found(self, repository, message_id):
        with pytest.raises(MessageNotFoundError):
            await repository.get_by_id(message_id)


class TestMarkRead:
    @pytest.mark.asyncio
    async def test_sets_read_at(self, repository, session):
        created = await repository.create("alice", "bob", "hi")
        await session.commit()

        updated = await repository.mark_read(created.id)
        await session.commit()

        assert updated.read_at is not None

    @pytest.mark.asyncio
    async def test_second_call_keeps_first_timestamp(self, repository, session, database):
        created = await repository.create("alice", "bob", "hi")
        await session.commit()
        first = await repository.mark_read(created.id)
        await session.commit()

        async with database.session() as other_session:
            second = await PostgresMessageRepository(other_session).mark_read(created.id)
            await other_session.commit()

        assert second.read_at == first.read_at

    @pytest.mark.asyncio
    async def test_unknown_id_raises(self, repository):
        with pytest.raises(MessageNotFoundError):
            await repository.mark_read(999)

    @pytest.mark.asyncio
    async def test_out_of_range_id_is_not_found(self, repository):
        with pytest.raises(MessageNotFoundError):
            await repository.mark_read(3_000_000_000)

    @pytest.mark.asyncio
    async def test_recipient_marks_read_once_through_service(self, repository, session):
        created = await repository.create("alice", "bob", "hi")
        await session.commit()
        service = MarkMessageReadService(repository, SqlAlchemyUnitOfWork(session))

        first = await service.execute(created.id, username="bob")
        again = await service.execute(created.id, username="bob")

        assert first.read_at is not None
        assert again.read_at == first.read_at


class TestSchema:
    @pytest.mark.asyncio
    async def test_no_missing_tables_after_create(self, database):
        assert await database.missing_tables() == []

    @pytest.mark.asyncio
    async def test_reports_missing_tables(self, tmp_path):
        db = Database(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}")
        try:
            assert await db.missing_tables() == ["messages", "users"]
        finally:
            await db.close()


class TestHttpBoundary:
    """Requests run on TestClient's own loop, so each test builds its own Database."""

    @pytest.fixture
    def client(self, tmp_path):
        db = Database(sqlite_url(tmp_path))
        app.dependency_overrides[get_database] = lambda: db
        app.dependency_overrides[get_message_service] = lambda: GetMessageService(
            PostgresMessageRepository(db.session())
        )
        app.dependency_overrides[get_mark_read_service] = lambda: MarkMessageReadService(
            PostgresMessageRepository(db.session()),
            SqlAlchemyUnitOfWork(db.session()),
        )
        yield TestClient(app)
        app.dependency_overrides.clear()

    def test_get_id_beyond_integer_range_is_404(self, client):
        response = client.get(
            "/api/v1/messages/3000000000",
            headers={"Authorization": f"Bearer {create_access_token('alice')}"},
        )

        assert response.status_code == 404
        assert response.json()["error"]["kind"] == "not_found"

    def test_mark_read_id_beyond_integer_range_is_404(self, client):
        response = client.post(
            "/api/v1/messages/3000000000/read",
            headers={"Authorization": f"Bearer {create_access_token('bob')}"},
        )

        assert response.status_code == 404

    def test_readiness_reports_missing_message_tables(self, client):
        response = client.get("/health/ready")

        body = response.json()
        assert body["status"] == "degraded"
        assert body["checks"]["database"]["status"] == "healthy"
        assert body["checks"]["schema"]["missing_tables"] == ["messages", "users"]
