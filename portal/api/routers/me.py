from __future__ import annotations

from fastapi import APIRouter, Depends

from portal.api.deps import get_current_actor, get_get_me_use_case
from portal.api.schemas.me import MeResponse
from portal.application.use_cases.get_me import GetMeUseCase
from portal.domain.entities.actor import Actor


router = APIRouter()


@router.get("/v1/me", response_model=MeResponse)
def get_me(
    actor: Actor = Depends(get_current_actor),
    use_case: GetMeUseCase = Depends(get_get_me_use_case),
):
    output = use_case.execute(actor=actor)
    return MeResponse(
        user={
            "id": output.user_id,
            "name": output.name,
            "email": output.email,
        },
        full_name=output.full_name,
        phone=output.phone,
        is_admin=output.is_admin,
        home_path=output.home_path,
    )
