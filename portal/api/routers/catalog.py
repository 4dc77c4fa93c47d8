from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from portal.api.deps import get_get_plan_use_case, get_list_plans_use_case
from portal.api.schemas.catalog import PlanResponse, plan_response
from portal.application.dto.catalog import GetPlanInput
from portal.application.use_cases.get_plan import GetPlanUseCase
from portal.application.use_cases.list_plans import ListPlansUseCase
from portal.domain.exceptions import PlanNotFoundError


router = APIRouter()


@router.get("/v1/plans", response_model=list[PlanResponse])
def list_plans(
    use_case: ListPlansUseCase = Depends(get_list_plans_use_case),
):
    return [plan_response(plan) for plan in use_case.execute()]


@router.get("/v1/plans/{plan_id}", response_model=PlanResponse)
def get_plan(
    plan_id: UUID,
    use_case: GetPlanUseCase = Depends(get_get_plan_use_case),
):
    try:
        plan = use_case.execute(GetPlanInput(plan_id=str(plan_id)))
    except PlanNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return plan_response(plan)
