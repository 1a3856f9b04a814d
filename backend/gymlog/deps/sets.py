from fastapi import Depends
from sqlalchemy.orm import Session

from gymlog.db import get_db
from gymlog.repositories.set_repo import SetRepository
from gymlog.services.sets_service import SetsService

def get_sets_service(db: Session = Depends(get_db)) -> SetsService:
    return SetsService(SetRepository(db))
