from fastapi import APIRouter, Depends
from gymlog.deps.auth import get_identity

router = APIRouter(prefix="/api", tags=["heartbeat"])

@router.get("/heartbeat")
def heartbeat(_identity: str = Depends(get_identity)):
    return {"status": "ok"}
