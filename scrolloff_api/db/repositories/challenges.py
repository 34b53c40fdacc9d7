from scrolloff_api.db.repositories.base import BaseRepository
from scrolloff_api.db.models.challenges import Challenge

class ChallengeRepository(BaseRepository[Challenge]):
    model = Challenge
