"""Domain-specific exceptions — framework-independent."""


class InvalidRequestError(Exception):
    """Raised for missing or malformed input; never reaches the store."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, message: str, namespace: str, key: str | None = None):
        self.namespace = namespace
        self.key = key
        super().__init__(message)


class UnknownNamespaceError(EntityNotFoundError):
    """No articles are stored for the given user ID."""

    def __init__(self, namespace: str):
        super().__init__("unknown ID", namespace)


class UnknownKeyError(EntityNotFoundError):
    """The user namespace exists but holds no article with the given title."""

    def __init__(self, namespace: str, key: str):
        super().__init__("unknown title", namespace, key)


class StorageFailureError(Exception):
    """Raised when the embedded store cannot read, decode, or commit.

    The message is meant for logs only; clients get an opaque 500.
    """

    def __init__(self, operation: str, namespace: str, detail: str = ""):
        self.operation = operation
        self.namespace = namespace
        message = f"{operation} failed for namespace '{namespace}'"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class EncodingFailureError(Exception):
    """Raised when a response body cannot be serialized."""
