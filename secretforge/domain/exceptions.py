"""Exceptions raised by SecretForge domain services."""


class SecretForgeError(RuntimeError):
    """Base class for domain exceptions."""


class ReentrantUpdate(SecretForgeError):
    """Raised when a subscriber mutates the tracker while a publish is running."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Cannot call {operation}() from a secrets listener")
        self.operation = operation
