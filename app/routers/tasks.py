from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.orm import Session
from typing import List

from app.core.database import get_db
from app.core.errors import NotFoundError
from app.schemas.task import TaskCreate, TaskUpdate, TaskResponse
from app.services import task_service

router = APIRouter(prefix="/api/todos", tags=["todos"])

# Colonne Integer: 4 octets sous PostgreSQL, un id hors bornes -> 400
MAX_TASK_ID = 2**31 - 1


@router.get("", response_model=List[TaskResponse])
def list_tasks(db: Session = Depends(get_db)):
    # Plus récentes en premier
    return task_service.list_tasks(db)


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(task_data: TaskCreate, db: Session = Depends(get_db)):
    return task_service.create_task(db, task_data)


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(task_id: int = Path(..., ge=1, le=MAX_TASK_ID), db: Session = Depends(get_db)):
    return task_service.get_task(db, task_id)


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(task_data: TaskUpdate, task_id: int = Path(..., ge=1, le=MAX_TASK_ID), db: Session = Depends(get_db)):
    return task_service.update_task(db, task_id, task_data)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: int = Path(..., ge=1, le=MAX_TASK_ID), db: Session = Depends(get_db)):
    if not task_service.delete_task(db, task_id):
        raise NotFoundError("Task not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
