# Custom exceptions for uiforge

class UIForgeError(Exception):
    """Base exception for all application-specific errors."""
    pass


class TargetNotFound(UIForgeError):
    """Raised when an operation references a node id that is not in the tree."""
    def __init__(self, node_id: str, operation: str = ""):
        self.node_id = node_id
        self.operation = operation
        where = f" ({operation})" if operation else ""
        super().__init__(f"Node '{node_id}' not found{where}")


class InvalidRelocation(UIForgeError):
    """
    A move that would be a self-move or create a cycle.

    Never escapes the mutation layer: move() turns it into a no-op.
    """
    def __init__(self, active_id: str, over_id: str, reason: str):
        self.active_id = active_id
        self.over_id = over_id
        self.reason = reason
        super().__init__(f"Cannot move '{active_id}' relative to '{over_id}': {reason}")


class InvalidStyleGroup(UIForgeError, ValueError):
    """Raised when a style update names a bucket or breakpoint that does not exist."""
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown style group '{name}'")


class StorageError(UIForgeError):
    """Raised when a snapshot or history file cannot be written."""
    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        super().__init__(f"Storage failure for {path}: {message}")


class ConfigError(UIForgeError):
    """Raised for configuration-related problems."""
    pass
