class TaskClientError(Exception):
    pass


class TaskStoreError(TaskClientError):
    """Network or service failure talking to the task store."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ValidationError(TaskClientError):
    """Local validation failure; raised before any request is made."""
