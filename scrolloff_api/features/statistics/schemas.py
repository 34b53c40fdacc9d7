import datetime as dt
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

# Les clés JSON restent en camelCase (contrat du dashboard)
_camel = ConfigDict(populate_by_name=True)

class DashboardStatsOut(BaseModel):
    model_config = _camel

    total_users: int = Field(0, alias="totalUsers")
    total_tests: int = Field(0, alias="totalTests")
    pending_stories: int = Field(0, alias="pendingStories")
    active_challenges: int = Field(0, alias="activeChallenges")

class LevelCount(BaseModel):
    niveau: str
    count: int

class DateCount(BaseModel):
    date: dt.date
    count: int

class ResultsStatsOut(BaseModel):
    model_config = _camel

    total_tests: int = Field(0, alias="totalTests")
    average_score: float = Field(0, alias="averageScore")
    distribution_by_level: List[LevelCount] = Field(default_factory=list, alias="distributionByLevel")
    evolution_by_date: List[DateCount] = Field(default_factory=list, alias="evolutionByDate")

class ResultIn(BaseModel):
    score: int = Field(ge=0)
    niveau: str = Field(min_length=1, max_length=50, examples=["Medium Risk"])

class ResultOut(BaseModel):
    id: int
    score: int
    niveau: str
    date_test: dt.datetime
    id_user: Optional[int] = None

    model_config = {"from_attributes": True}
