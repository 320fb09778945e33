import logging
from typing import Optional
from app.domain.entities.quiz import Quiz
from app.domain.entities.question import Question, OPTION_LETTERS
from app.domain.exceptions import NotFoundError, QuizAppError, ValidationFailedError
from app.domain.repositories_interfaces.quiz_repo import QuizRepoInterface
from app.domain.repositories_interfaces.question_repo import QuestionRepoInterface
from app.domain.status import Status


logger = logging.getLogger('use_cases')


def validate_question(text: str, options: list[str], correct_answer: Optional[str]) -> None:
    """
    Validates the fields of a question before it is saved.

    :param text: The question text.
    :param options: The four option texts in A..D order.
    :param correct_answer: The option text marked as correct.
    :raises ValidationFailedError: If a field is blank or the answer is not one of the options.
    """
    if len(options) != len(OPTION_LETTERS):
        raise ValidationFailedError(f"A question needs exactly {len(OPTION_LETTERS)} options")
    if not text or not text.strip() or any(not option or not option.strip() for option in options):
        raise ValidationFailedError("All fields must be filled out")
    if correct_answer is None or correct_answer not in options:
        raise ValidationFailedError("The correct answer must be one of the options")
    if len(set(options)) != len(options):
        # Grading compares text, so an answer matching a duplicated option is ambiguous
        logger.warning("QUESTION HAS DUPLICATE OPTIONS: %r", text)


def resolve_correct_answer(options: list[str], letter: str) -> str:
    """Maps the option letter picked in the editor to the option text that is stored."""
    try:
        return options[OPTION_LETTERS.index(letter.upper())]
    except (ValueError, IndexError, AttributeError) as e:
        raise ValidationFailedError(f"Unknown option letter {letter!r}") from e


class QuizUseCases:
    def __init__(self, sql_quiz_repo: QuizRepoInterface, sql_question_repo: QuestionRepoInterface):
        self.sql_quiz_repo = sql_quiz_repo
        self.sql_question_repo = sql_question_repo

    async def list_quizzes(self) -> list[Quiz]:
        try:
            return await self.sql_quiz_repo.get_all()
        except QuizAppError as e:
            logger.error("LIST QUIZZES FAILED: %s", e)
            return []

    async def get_quiz(self, quiz_id: int) -> Optional[Quiz]:
        try:
            return await self.sql_quiz_repo.get(quiz_id)
        except QuizAppError as e:
            logger.error("GET QUIZ FAILED: %s", e)
            return None

    async def create_quiz(self, title: str, description: str, created_by: int) -> Optional[Quiz]:
        """
        Creates a new quiz owned by an administrator.

        :return: The stored Quiz with its id, None if the store rejected it.
        """
        quiz = Quiz(title=title, description=description, created_by=created_by)
        try:
            quiz = await self.sql_quiz_repo.save(quiz)
        except QuizAppError as e:
            logger.error("CREATE QUIZ FAILED: %s", e)
            return None
        logger.info("CREATE QUIZ %s", quiz.id)
        return quiz

    async def update_quiz(self, quiz_id: int, title: str, description: str) -> Status:
        quiz = Quiz(id=quiz_id, title=title, description=description)
        return await self._run(f"UPDATE QUIZ {quiz_id}", self.sql_quiz_repo.update(quiz))

    async def delete_quiz(self, quiz_id: int) -> Status:
        return await self._run(f"DELETE QUIZ {quiz_id}", self.sql_quiz_repo.delete(quiz_id))

    async def list_questions(self, quiz_id: int) -> list[Question]:
        try:
            return await self.sql_question_repo.get_by_quiz(quiz_id)
        except QuizAppError as e:
            logger.error("LIST QUESTIONS FAILED: %s", e)
            return []

    async def create_question(self, quiz_id: int, text: str, option_a: str, option_b: str,
                              option_c: str, option_d: str, correct_answer: str) -> Optional[Question]:
        try:
            validate_question(text, [option_a, option_b, option_c, option_d], correct_answer)
        except ValidationFailedError as e:
            logger.info("CREATE QUESTION REJECTED: %s", e)
            return None
        question = Question(quiz_id=quiz_id, text=text, option_a=option_a, option_b=option_b,
                            option_c=option_c, option_d=option_d, correct_answer=correct_answer)
        try:
            question = await self.sql_question_repo.save(question)
        except QuizAppError as e:
            logger.error("CREATE QUESTION FAILED: %s", e)
            return None
        logger.info("CREATE QUESTION %s FOR QUIZ %s", question.id, quiz_id)
        return question

    async def update_question(self, question_id: int, text: str, option_a: str, option_b: str,
                              option_c: str, option_d: str, correct_answer: str) -> Status:
        try:
            validate_question(text, [option_a, option_b, option_c, option_d], correct_answer)
        except ValidationFailedError as e:
            logger.info("UPDATE QUESTION %s REJECTED: %s", question_id, e)
            return Status.VALIDATION_FAILED
        question = Question(id=question_id, text=text, option_a=option_a, option_b=option_b,
                            option_c=option_c, option_d=option_d, correct_answer=correct_answer)
        return await self._run(f"UPDATE QUESTION {question_id}", self.sql_question_repo.update(question))

    async def delete_question(self, question_id: int) -> Status:
        return await self._run(f"DELETE QUESTION {question_id}", self.sql_question_repo.delete(question_id))

    async def _run(self, action: str, operation) -> Status:
        try:
            await operation
        except NotFoundError:
            logger.info("%s: NOT FOUND", action)
            return Status.NOT_FOUND
        except QuizAppError as e:
            logger.error("%s FAILED: %s", action, e)
            return Status.STORE_ERROR
        logger.info(action)
        return Status.SUCCESS
