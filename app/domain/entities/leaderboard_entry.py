from pydantic import BaseModel, ConfigDict


"""
LeaderboardEntry Entity:
1. username (str): The user the row aggregates.
2. average_score (float): Average percentage over all attempts of the user.
3. total_attempts (int): Number of recorded attempts.
4. total_score (int): Sum of the raw scores of all attempts.
"""
class LeaderboardEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str
    average_score: float
    total_attempts: int
    total_score: int
