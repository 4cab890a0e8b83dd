"""Task service"""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from datetime import datetime
from typing import List
import logging

from app.core.errors import NotFoundError, StorageError
from app.models.task import Task
from app.schemas.task import TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)


def list_tasks(db: Session) -> List[Task]:
    try:
        return db.query(Task).order_by(Task.created_at.desc(), Task.id.desc()).all()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching tasks: {e}")
        raise StorageError("Failed to fetch tasks") from e


def get_task(db: Session, task_id: int) -> Task:
    try:
        task = db.query(Task).filter(Task.id == task_id).first()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching task {task_id}: {e}")
        raise StorageError("Failed to fetch task") from e

    if not task:
        raise NotFoundError("Task not found")
    return task


def create_task(db: Session, data: TaskCreate) -> Task:
    # created_at == updated_at à la création
    now = datetime.utcnow()
    task = Task(text=data.text, completed=False, created_at=now, updated_at=now)
    try:
        db.add(task)
        db.commit()
        db.refresh(task)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating task: {e}")
        raise StorageError("Failed to create task") from e

    logger.info(f"Task {task.id} created")
    return task


def update_task(db: Session, task_id: int, data: TaskUpdate) -> Task:
    task = get_task(db, task_id)

    update_data = data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(task, field, value)
    task.updated_at = datetime.utcnow()

    try:
        db.commit()
        db.refresh(task)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating task {task_id}: {e}")
        raise StorageError("Failed to update task") from e

    logger.info(f"Task {task_id} updated ({', '.join(update_data) or 'no fields'})")
    return task


def delete_task(db: Session, task_id: int) -> bool:
    """Supprime la tâche; renvoie False si rien n'a été supprimé."""
    try:
        deleted = db.query(Task).filter(Task.id == task_id).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error deleting task {task_id}: {e}")
        raise StorageError("Failed to delete task") from e

    if deleted:
        logger.info(f"Task {task_id} deleted")
    return deleted > 0
