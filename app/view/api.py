"""
Client HTTP pour /api/todos, utilisé par la vue des tâches.

Accepte n'importe quelle session compatible requests (requests.Session,
ou le TestClient FastAPI dans les tests).
"""

from typing import List, Optional
import logging

import requests

from app.core.config import settings
from app.core.errors import TransportError, error_for_status
from app.schemas.task import TaskResponse

logger = logging.getLogger(__name__)


def _detail(response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(body, dict) and "detail" in body:
        return str(body["detail"])
    return str(body)


class TodoApiClient:
    def __init__(self, base_url: str = settings.API_BASE_URL, session=None):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()

    def _send(self, method: str, path: str = "", **kwargs):
        url = f"{self.base_url}/api/todos{path}"
        try:
            response = getattr(self.session, method)(url, **kwargs)
        except requests.RequestException as e:
            logger.warning(f"{method.upper()} {url} failed: {e}")
            raise TransportError("Network error") from e

        if response.status_code >= 400:
            error = error_for_status(response.status_code, _detail(response))
            logger.warning(f"{method.upper()} {url} -> {response.status_code}: {error.message}")
            raise error
        return response

    def list_tasks(self) -> List[TaskResponse]:
        response = self._send("get")
        return [TaskResponse.model_validate(item) for item in response.json()]

    def create_task(self, text: str) -> TaskResponse:
        response = self._send("post", json={"text": text})
        return TaskResponse.model_validate(response.json())

    def update_task(self, task_id: int, text: Optional[str] = None, completed: Optional[bool] = None) -> TaskResponse:
        # N'envoie que les champs fournis (mise à jour partielle)
        payload = {}
        if text is not None:
            payload["text"] = text
        if completed is not None:
            payload["completed"] = completed
        response = self._send("put", f"/{task_id}", json=payload)
        return TaskResponse.model_validate(response.json())

    def delete_task(self, task_id: int) -> None:
        self._send("delete", f"/{task_id}")
