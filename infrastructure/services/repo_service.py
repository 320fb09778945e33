# Repository service that contains all repositories and services the use cases are built from.
class RepoService:
    def __init__(self, sql_user_repo, sql_quiz_repo, sql_question_repo,
                 sql_quiz_result_repo, password_hasher):
        self.sql_user_repo = sql_user_repo
        self.sql_quiz_repo = sql_quiz_repo
        self.sql_question_repo = sql_question_repo
        self.sql_quiz_result_repo = sql_quiz_result_repo
        self.password_hasher = password_hasher
