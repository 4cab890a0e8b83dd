"""View state of the task list and the values derived from it.

Everything here is plain data: the state serializes to JSON and the derived
values are pure functions of the fetched task list, so they can be tested
without any transport.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from app.schemas.task import TaskResponse


class TaskFilter(str, Enum):
    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"


class EditDraft(BaseModel):
    task_id: int
    text: str


class Notification(BaseModel):
    title: str
    description: str
    variant: str = "default"  # "destructive" pour les erreurs


class ViewState(BaseModel):
    tasks: List[TaskResponse] = Field(default_factory=list)
    draft: str = ""
    filter: TaskFilter = TaskFilter.ALL
    editing: Optional[EditDraft] = None
    loading: bool = True
    load_failed: bool = False
    notifications: List[Notification] = Field(default_factory=list)


class TaskCounts(BaseModel):
    total: int
    completed: int
    pending: int

    @classmethod
    def from_tasks(cls, tasks: List[TaskResponse]) -> "TaskCounts":
        total = len(tasks)
        completed = sum(1 for t in tasks if t.completed)
        return cls(total=total, completed=completed, pending=total - completed)


class Message(BaseModel):
    title: str
    hint: str


EMPTY_MESSAGES = {
    TaskFilter.ALL: Message(title="No tasks yet", hint="Get started by adding your first task above"),
    TaskFilter.ACTIVE: Message(title="No active tasks", hint="All your tasks are completed!"),
    TaskFilter.COMPLETED: Message(title="No completed tasks", hint="Complete some tasks to see them here"),
}

LOAD_ERROR = Message(title="Unable to load todos", hint="Please check your connection and try again.")


def filter_tasks(tasks: List[TaskResponse], task_filter: TaskFilter) -> List[TaskResponse]:
    if task_filter == TaskFilter.ACTIVE:
        return [t for t in tasks if not t.completed]
    if task_filter == TaskFilter.COMPLETED:
        return [t for t in tasks if t.completed]
    return list(tasks)


def empty_message(task_filter: TaskFilter) -> Message:
    return EMPTY_MESSAGES[TaskFilter(task_filter)]


def format_relative_time(created_at: datetime, now: Optional[datetime] = None) -> str:
    if now is None:
        now = datetime.now(created_at.tzinfo) if created_at.tzinfo else datetime.utcnow()

    diff_hours = int((now - created_at).total_seconds() // 3600)
    diff_days = diff_hours // 24

    if diff_hours < 1:
        return "Just now"
    if diff_hours < 24:
        return f"{diff_hours} hour{'s' if diff_hours > 1 else ''} ago"
    if diff_days == 1:
        return "Yesterday"
    return f"{diff_days} days ago"
