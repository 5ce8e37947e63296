class VariableStoreError(Exception):
    """Base class for errors raised by the variable store."""


class InvalidArgumentError(VariableStoreError, ValueError):
    """Raised for bad keys, values, script names or contexts, and when a capacity limit is hit."""


class UnsupportedOperationError(VariableStoreError, TypeError):
    """Raised when something tries to modify a read-only view returned by the store."""
