"""Exceptions raised by the workshop engine."""


class WorkshopError(Exception):
    """Base class for workshop failures."""


class StoreOpenError(WorkshopError):
    """The progress store could not be opened or created."""


class DocumentError(WorkshopError):
    """A challenge document could not be read or parsed."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class ResolutionError(WorkshopError):
    """A numeric answer does not point at one of the question's choices."""

    def __init__(self, identity: str, index: int, choice_count: int):
        self.identity = identity
        self.index = index
        self.choice_count = choice_count
        super().__init__(
            f"Answer index {index} is out of range for '{identity}' "
            f"({choice_count} choices)"
        )
