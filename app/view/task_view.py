"""
Task view controller.

Every mutation waits for the server's answer, then refetches the whole list:
the displayed tasks are always the last list returned by the store, never a
local merge.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import datetime
from typing import Callable, List, Optional
import logging

from app.core.errors import TodoError
from app.schemas.task import TaskResponse
from app.view.api import TodoApiClient
from app.view.render import RenderedView, render_view
from app.view.state import EditDraft, Notification, TaskFilter, ViewState

logger = logging.getLogger(__name__)

SUCCESS_MESSAGES = {
    "add": "Task added successfully!",
    "update": "Task updated successfully!",
    "delete": "Task deleted successfully!",
}

DELETE_CONFIRMATION = "Are you sure you want to delete this task?"


class TaskView:
    def __init__(self, api: TodoApiClient, confirm: Callable[[str], bool], max_workers: int = 4):
        self.api = api
        self.confirm = confirm
        self.max_workers = max_workers
        self.state = ViewState()

    # --- synchronisation avec le store ---

    def load(self) -> bool:
        """Premier chargement; un échec bascule la vue en état d'erreur."""
        self.state.loading = True
        self.state.load_failed = False
        return self.refresh()

    def retry(self) -> bool:
        # Equivalent d'un rechargement complet de la page
        self.state = ViewState()
        return self.load()

    def refresh(self) -> bool:
        try:
            tasks = self.api.list_tasks()
        except TodoError as e:
            logger.warning(f"Fetching tasks failed: {e.message}")
            if self.state.loading:
                self.state.loading = False
                self.state.load_failed = True
            return False

        self.state.tasks = tasks
        self.state.loading = False
        self.state.load_failed = False

        editing = self.state.editing
        if editing and not any(t.id == editing.task_id for t in tasks):
            self.state.editing = None
        return True

    # --- notifications ---

    def _succeeded(self, action: str):
        self.state.notifications.append(Notification(title="Success", description=SUCCESS_MESSAGES[action]))

    def _failed(self, action: str, error: TodoError):
        # Le détail interne reste dans les logs
        logger.warning(f"Failed to {action} task: {error.message}")
        self.state.notifications.append(Notification(
            title="Error",
            description=f"Failed to {action} task. Please try again.",
            variant="destructive",
        ))

    def drain_notifications(self) -> List[Notification]:
        notifications, self.state.notifications = self.state.notifications, []
        return notifications

    # --- saisie ---

    def set_draft(self, text: str):
        self.state.draft = text

    def set_filter(self, task_filter):
        self.state.filter = TaskFilter(task_filter)

    def _find(self, task_id: int) -> Optional[TaskResponse]:
        for task in self.state.tasks:
            if task.id == task_id:
                return task
        logger.warning(f"Task {task_id} is not in the fetched list")
        return None

    # --- commandes ---

    def submit_draft(self) -> bool:
        text = self.state.draft.strip()
        if not text:
            return False
        try:
            self.api.create_task(text)
        except TodoError as e:
            self._failed("add", e)
            return False

        self.state.draft = ""
        self._succeeded("add")
        self.refresh()
        return True

    def toggle(self, task_id: int) -> bool:
        task = self._find(task_id)
        if task is None:
            return False
        try:
            self.api.update_task(task.id, completed=not task.completed)
        except TodoError as e:
            self._failed("update", e)
            return False

        self._succeeded("update")
        self.refresh()
        return True

    def start_edit(self, task_id: int) -> bool:
        # Abandonne sans prévenir une édition en cours sur une autre tâche
        task = self._find(task_id)
        if task is None:
            return False
        self.state.editing = EditDraft(task_id=task.id, text=task.text)
        return True

    def set_edit_text(self, text: str):
        if self.state.editing is not None:
            self.state.editing.text = text

    def cancel_edit(self):
        self.state.editing = None

    def save_edit(self) -> bool:
        editing = self.state.editing
        if editing is None:
            return False
        text = editing.text.strip()
        if not text:
            return False
        try:
            self.api.update_task(editing.task_id, text=text)
        except TodoError as e:
            self._failed("update", e)
            return False

        self.state.editing = None
        self._succeeded("update")
        self.refresh()
        return True

    def delete(self, task_id: int) -> bool:
        if not self.confirm(DELETE_CONFIRMATION):
            return False
        try:
            self.api.delete_task(task_id)
        except TodoError as e:
            self._failed("delete", e)
            return False

        self._succeeded("delete")
        self.refresh()
        return True

    def clear_completed(self) -> int:
        """Supprime toutes les tâches terminées, une requête par tâche.

        Pas d'atomicité: chaque échec est signalé à part, sans rollback.
        Renvoie le nombre de suppressions confirmées par le serveur.
        """
        completed = [t for t in self.state.tasks if t.completed]
        if not completed:
            return 0
        if not self.confirm(f"Are you sure you want to delete {len(completed)} completed task(s)?"):
            return 0

        removed = 0
        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            futures = [pool.submit(self.api.delete_task, t.id) for t in completed]
            # L'ordre de fin n'a pas d'importance: on relit la liste après
            for future in as_completed(futures):
                try:
                    future.result()
                except TodoError as e:
                    self._failed("delete", e)
                    continue
                removed += 1
                self._succeeded("delete")

        self.refresh()
        return removed

    def render(self, now: Optional[datetime] = None) -> RenderedView:
        return render_view(self.state, now)
