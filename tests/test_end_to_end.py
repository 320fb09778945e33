from app.domain.status import Status
from app.use_cases.results.scoring import score_attempt


async def test_register_then_login(quiz_app):
    assert await quiz_app.users.register('bob', 'b@x.com', 'pw1', False) is Status.SUCCESS
    assert await quiz_app.users.register('bob', 'b@x.com', 'pw1', False) is Status.CONFLICT
    bob = await quiz_app.users.authenticate('bob', 'pw1')
    assert bob.username == 'bob'
    assert await quiz_app.users.authenticate('bob', 'wrong') is None


async def test_author_take_and_review_a_quiz(quiz_app, admin):
    quiz = await quiz_app.quizzes.create_quiz('Geo', 'capitals', admin.id)
    assert quiz.id == 1
    question = await quiz_app.quizzes.create_question(
        quiz.id, 'Capital of France?', 'Paris', 'Lyon', 'Nice', 'Dijon', 'Paris')
    assert question.id == 1

    await quiz_app.users.register('bob', 'b@x.com', 'pw1', False)
    bob = await quiz_app.users.authenticate('bob', 'pw1')
    questions = await quiz_app.quizzes.list_questions(quiz.id)
    score, percentage = score_attempt(questions, ['Paris'])
    assert (score, percentage) == (1, 100.0)

    status = await quiz_app.results.record_result(bob.id, quiz.id, quiz.title, score, len(questions), percentage)
    assert status is Status.SUCCESS
    history = await quiz_app.results.history(bob.id)
    assert len(history) == 1
    assert history[0].quiz_title == 'Geo'
    assert history[0].percentage == 100.0
