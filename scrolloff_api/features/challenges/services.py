from typing import Sequence

from fastapi import HTTPException, status

from scrolloff_api.db.models.challenges import Challenge
from scrolloff_api.db.repositories.challenges import ChallengeRepository
from scrolloff_api.features.challenges.schemas import ChallengeIn


class ChallengeService:
    def __init__(self, repo: ChallengeRepository):
        self.repo = repo

    def list(self) -> Sequence[Challenge]:
        return self.repo.list()

    def get(self, challenge_id: int) -> Challenge:
        challenge = self.repo.get(challenge_id)
        if not challenge:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Challenge not found")
        return challenge

    def create(self, payload: ChallengeIn) -> Challenge:
        return self.repo.create(**payload.model_dump())

    def update(self, challenge_id: int, payload: ChallengeIn) -> Challenge:
        challenge = self.get(challenge_id)
        return self.repo.update(challenge, **payload.model_dump())

    def delete(self, challenge_id: int) -> None:
        self.repo.delete_by_id(challenge_id)
