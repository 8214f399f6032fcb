"""Error taxonomy shared by the store and the request handler.

Store operations raise these; ``habitlog.api.routes`` turns them into a
``{"error": message}`` body with the matching ``status_code``.
"""


class HabitError(Exception):
    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(HabitError):
    status_code = 400


class NotFoundError(HabitError):
    status_code = 404


class StorageError(HabitError):
    status_code = 500
