"""Render contract of the task list: what the presentation shell displays."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from app.view.state import (
    LOAD_ERROR,
    Message,
    TaskCounts,
    TaskFilter,
    ViewState,
    empty_message,
    filter_tasks,
    format_relative_time,
)


class RenderedTask(BaseModel):
    id: int
    text: str
    completed: bool
    created_label: str
    status_label: str
    editing: bool = False
    edit_text: Optional[str] = None


class RenderedView(BaseModel):
    status: str  # "loading" | "error" | "ready"
    filter: TaskFilter
    counts: TaskCounts
    items: List[RenderedTask] = []
    empty: Optional[Message] = None
    error: Optional[Message] = None
    summary: Optional[str] = None
    can_submit: bool = False
    can_clear_completed: bool = False


def render_view(state: ViewState, now: Optional[datetime] = None) -> RenderedView:
    counts = TaskCounts.from_tasks(state.tasks)

    if state.load_failed:
        return RenderedView(status="error", filter=state.filter, counts=counts, error=LOAD_ERROR)

    # Placeholder tant que le premier chargement n'est pas revenu
    if state.loading:
        return RenderedView(status="loading", filter=state.filter, counts=counts,
                            can_submit=bool(state.draft.strip()))

    items = []
    for task in filter_tasks(state.tasks, state.filter):
        editing = state.editing is not None and state.editing.task_id == task.id
        items.append(RenderedTask(
            id=task.id,
            text=task.text,
            completed=task.completed,
            created_label=f"Created {format_relative_time(task.created_at, now)}",
            status_label="Completed" if task.completed else "Pending",
            editing=editing,
            edit_text=state.editing.text if editing else None,
        ))

    summary = None
    if counts.total > 0:
        summary = f"{counts.pending} tasks remaining, {counts.completed} completed"

    return RenderedView(
        status="ready",
        filter=state.filter,
        counts=counts,
        items=items,
        empty=None if items else empty_message(state.filter),
        summary=summary,
        can_submit=bool(state.draft.strip()),
        can_clear_completed=counts.completed > 0,
    )
