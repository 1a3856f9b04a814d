from fastapi import APIRouter, Depends, Query, Response, status
from gymlog.deps.auth import get_identity
from gymlog.deps.sets import get_sets_service
from gymlog.schemas.exercise_set import SetCreate, SetRead, SetList
from gymlog.services.sets_service import SetsService

router = APIRouter(prefix="/api/sets", tags=["sets"])

@router.get("", response_model=SetList)
def list_sets(
    user_id: str | None = Query(None, alias="userId"),
    exercise: str | None = Query(None),
    identity: str = Depends(get_identity),
    service: SetsService = Depends(get_sets_service),
):
    return service.list_sets(identity, user_id=user_id, exercise=exercise)

@router.post("", response_model=SetRead)
def create_set(
    payload: SetCreate,
    identity: str = Depends(get_identity),
    service: SetsService = Depends(get_sets_service),
):
    return service.create_set(identity, payload)

@router.delete(
    "/{set_id}",
    response_model=SetRead,
    responses={status.HTTP_204_NO_CONTENT: {"description": "No set with that id owned by the caller"}},
)
def delete_set(
    set_id: str,
    identity: str = Depends(get_identity),
    service: SetsService = Depends(get_sets_service),
):
    deleted = service.delete_set(identity, set_id)
    if deleted is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return deleted
