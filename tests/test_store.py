from app.domain.status import Status
from main import create_app


async def test_initialize_creates_default_admin(quiz_app):
    admin = await quiz_app.users.authenticate('admin', 'admin123')
    assert admin is not None
    assert admin.is_admin
    assert admin.email == 'admin@quizapp.com'


async def test_initialize_is_idempotent(quiz_app, db_path):
    again = create_app(db_path)
    assert await again.store.initialize()
    assert await again.store.initialize()
    assert await again.users.register('admin', 'x@x.com', 'other', False) is Status.CONFLICT
    assert await again.users.authenticate('admin', 'admin123') is not None


async def test_initialize_keeps_an_existing_admin(db_path):
    app = create_app(db_path)
    await app.database.create_schema()
    assert await app.users.register('admin', 'boss@x.com', 'changed', True) is Status.SUCCESS
    assert await app.store.initialize()
    assert await app.users.authenticate('admin', 'admin123') is None
    assert await app.users.authenticate('admin', 'changed') is not None


async def test_unavailable_store_fails_softly(tmp_path):
    app = create_app(str(tmp_path / 'missing' / 'dir' / 'quiz_app.db'))
    assert await app.store.initialize() is False
    assert await app.users.register('bob', 'b@x.com', 'pw1') is Status.STORE_ERROR
    assert await app.users.authenticate('bob', 'pw1') is None
    assert await app.quizzes.list_quizzes() == []
    assert await app.quizzes.create_quiz('Geo', 'capitals', 1) is None
    assert await app.quizzes.delete_quiz(1) is Status.STORE_ERROR
    assert await app.results.history(1) == []
    assert await app.results.leaderboard() == []
    assert await app.results.record_result(1, 1, 'Geo', 1, 1, 100.0) is Status.STORE_ERROR


async def test_default_admin_password_is_not_logged(db_path, caplog):
    app = create_app(db_path)
    with caplog.at_level('INFO', logger='store'):
        assert await app.store.initialize()
    assert 'DEFAULT ADMIN' in caplog.text
    assert 'admin123' not in caplog.text
