import pytest
from main import create_app


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / 'quiz_app.db')


@pytest.fixture
async def quiz_app(db_path):
    app = create_app(db_path)
    assert await app.store.initialize()
    return app


@pytest.fixture
async def admin(quiz_app):
    return await quiz_app.users.authenticate('admin', 'admin123')


@pytest.fixture
async def geo_quiz(quiz_app, admin):
    quiz = await quiz_app.quizzes.create_quiz('Geo', 'capitals', admin.id)
    await quiz_app.quizzes.create_question(quiz.id, 'Capital of France?', 'Paris', 'Lyon', 'Nice', 'Dijon', 'Paris')
    await quiz_app.quizzes.create_question(quiz.id, 'Capital of Italy?', 'Milan', 'Rome', 'Turin', 'Naples', 'Rome')
    return quiz
