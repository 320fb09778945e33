from pydantic import BaseModel, ConfigDict
from typing import Optional


OPTION_LETTERS = ('A', 'B', 'C', 'D')

"""
Question Entity:
1. id (int, None): Unique identifier for the question. None until the question is stored.
2. quiz_id (int, None): Identifier of the quiz this question belongs to.
Required on creation, a question never moves to another quiz so updates leave it out.
3. text (str): The content or text of the question.
4. option_a .. option_d (str): The four answer options.
5. correct_answer (str): The correct answer. Contains the text of one of the options, not its letter.
"""
class Question(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Optional[int] = None
    quiz_id: Optional[int] = None
    text: str
    option_a: str
    option_b: str
    option_c: str
    option_d: str
    correct_answer: str

    @property
    def options(self) -> list[str]:
        return [self.option_a, self.option_b, self.option_c, self.option_d]

    @property
    def correct_option_letter(self) -> Optional[str]:
        # First matching option wins when two options share the same text
        for letter, option in zip(OPTION_LETTERS, self.options):
            if option == self.correct_answer:
                return letter
        return None

    def is_correct_answer(self, answer: Optional[str]) -> bool:
        return answer is not None and answer == self.correct_answer
