from __future__ import annotations

from fastapi import APIRouter, Depends

from portal.api.deps import get_current_actor, get_list_vps_use_case
from portal.api.schemas.vps import VpsListItemResponse, vps_list_item_response
from portal.application.use_cases.list_vps import ListVpsUseCase
from portal.domain.entities.actor import Actor


router = APIRouter()


@router.get("/v1/vps", response_model=list[VpsListItemResponse])
def list_vps(
    actor: Actor = Depends(get_current_actor),
    use_case: ListVpsUseCase = Depends(get_list_vps_use_case),
):
    return [vps_list_item_response(item) for item in use_case.execute(actor=actor)]
