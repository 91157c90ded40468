# SPDX-License-Identifier: MIT


class ZentodoError(Exception):
    pass


class ValidationError(ZentodoError):
    pass


class StoreError(ZentodoError):
    """A task store operation failed (network loss, permission denial, ...)."""


class TaskNotFoundError(StoreError):
    def __init__(self, id: object) -> None:
        super().__init__(f"task not found: {id}")
        self.id = id
