"""Error taxonomy shared by the store (server) and the view (client)."""


class TodoError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TodoError):
    """Malformed or missing input."""
    status_code = 400


class NotFoundError(TodoError):
    """The targeted task id does not exist."""
    status_code = 404


class StorageError(TodoError):
    """The database failed underneath a store operation."""
    status_code = 500


class TransportError(TodoError):
    """The request never got an HTTP answer (client side only)."""
    status_code = 503


def error_for_status(status_code: int, message: str) -> TodoError:
    # Mappe une réponse HTTP vers l'exception correspondante
    if status_code == 400:
        return ValidationError(message)
    if status_code == 404:
        return NotFoundError(message)
    return StorageError(message)
