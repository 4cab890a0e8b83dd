from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.errors import StorageError

router = APIRouter()

@router.get("/z")
def healthz(db: Session = Depends(get_db)):
    # Check si l'API et la base répondent
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        raise StorageError("Database unavailable") from e
    return {"status": "ok"}
