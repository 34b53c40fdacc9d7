"""
➡️ But : agréger les chiffres du dashboard et des résultats du quiz.

Chaque requête d'agrégat est indépendante : si l'une échoue (table absente, erreur SQL),
elle est tracée et remplacée par 0 / [] sans faire échouer la réponse complète.
"""

import logging
from typing import Callable, Optional, Sequence, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from scrolloff_api.db.models.results import Result
from scrolloff_api.db.repositories.challenges import ChallengeRepository
from scrolloff_api.db.repositories.results import ResultRepository
from scrolloff_api.db.repositories.stories import StoryRepository
from scrolloff_api.db.repositories.users import UserRepository
from scrolloff_api.features.statistics.schemas import (
    DashboardStatsOut,
    DateCount,
    LevelCount,
    ResultIn,
    ResultsStatsOut,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StatisticsService:
    def __init__(
        self,
        *,
        session: Session,
        user_repo: UserRepository,
        result_repo: ResultRepository,
        story_repo: StoryRepository,
        challenge_repo: ChallengeRepository,
    ):
        self.session = session
        self.users = user_repo
        self.results = result_repo
        self.stories = story_repo
        self.challenges = challenge_repo

    def _safe(self, label: str, query: Callable[[], T], default: T) -> T:
        try:
            return query()
        except SQLAlchemyError:
            logger.warning("Statistics query '%s' failed, using default", label, exc_info=True)
            self.session.rollback()
            return default

    # ---------- Dashboard ----------
    def dashboard(self) -> DashboardStatsOut:
        return DashboardStatsOut(
            total_users=self._safe("users count", self.users.count, 0),
            total_tests=self._safe("results count", self.results.count, 0),
            pending_stories=self._safe("pending stories", lambda: self.stories.count_by_status("pending"), 0),
            active_challenges=self._safe("challenges count", self.challenges.count, 0),
        )

    # ---------- Résultats ----------
    def results_stats(self) -> ResultsStatsOut:
        distribution = self._safe("distribution by level", self.results.distribution_by_level, [])
        evolution = self._safe("evolution by date", self.results.evolution_by_date, [])
        return ResultsStatsOut(
            total_tests=self._safe("results count", self.results.count, 0),
            average_score=self._safe("average score", self.results.average_score, 0.0),
            distribution_by_level=[LevelCount(niveau=n, count=c) for n, c in distribution],
            evolution_by_date=[DateCount(date=d, count=c) for d, c in evolution],
        )

    def list_results(self) -> Sequence[Result]:
        return self.results.list_recent()

    def record_result(self, payload: ResultIn, *, user_id: Optional[int] = None) -> Result:
        return self.results.create(score=payload.score, niveau=payload.niveau, id_user=user_id)
