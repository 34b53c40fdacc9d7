from typing import List, Optional

from fastapi import APIRouter, Depends, status

from scrolloff_api.api.v1.dependencies import get_optional_user_id, get_statistics_service, require_admin
from scrolloff_api.features.common.schemas import CreatedOut
from scrolloff_api.features.statistics.schemas import (
    DashboardStatsOut,
    ResultIn,
    ResultOut,
    ResultsStatsOut,
)
from scrolloff_api.features.statistics.services import StatisticsService

router = APIRouter(
    prefix="/admin",
    tags=["statistics"],
    dependencies=[Depends(require_admin)],
)

public_router = APIRouter(prefix="/results", tags=["public"])

@router.get(
    "/stats",
    summary="Chiffres du dashboard",
    description="Chaque compteur est calculé indépendamment ; un compteur en erreur vaut 0.",
    response_model=DashboardStatsOut,
)
def dashboard_stats(svc: StatisticsService = Depends(get_statistics_service)):
    return svc.dashboard()

@router.get("/results/stats", summary="Statistiques des résultats du quiz", response_model=ResultsStatsOut)
def results_stats(svc: StatisticsService = Depends(get_statistics_service)):
    return svc.results_stats()

@router.get("/results", summary="Lister les résultats du quiz", response_model=List[ResultOut])
def list_results(svc: StatisticsService = Depends(get_statistics_service)):
    return svc.list_results()

@public_router.post(
    "",
    summary="Enregistrer un résultat de quiz",
    status_code=status.HTTP_201_CREATED,
    response_model=CreatedOut,
)
def record_result(
    payload: ResultIn,
    user_id: Optional[int] = Depends(get_optional_user_id),
    svc: StatisticsService = Depends(get_statistics_service),
):
    result = svc.record_result(payload, user_id=user_id)
    return CreatedOut(id=result.id, message="Result saved successfully")
