from importlib import metadata as _metadata


def _load_version() -> str:
    """Return the package version from the installed metadata."""
    try:
        return _metadata.version("scriptvars")
    except _metadata.PackageNotFoundError:
        return "0.0.0"


__version__ = _load_version()

from scriptvars.config import (  # noqa: E402
    MAX_GLOBAL_VARS,
    MAX_KEY_SIZE,
    MAX_SCRIPT_VARS,
    MAX_VALUE_SIZE,
    Limits,
)
from scriptvars.context import SCRIPT_NAME_ATTRIBUTE, SimpleScriptContext  # noqa: E402
from scriptvars.errors import (  # noqa: E402
    InvalidArgumentError,
    UnsupportedOperationError,
    VariableStoreError,
)
from scriptvars.store import ReadOnlyVars, VariableStore  # noqa: E402

__all__ = [
    "MAX_GLOBAL_VARS",
    "MAX_KEY_SIZE",
    "MAX_SCRIPT_VARS",
    "MAX_VALUE_SIZE",
    "Limits",
    "SCRIPT_NAME_ATTRIBUTE",
    "SimpleScriptContext",
    "InvalidArgumentError",
    "UnsupportedOperationError",
    "VariableStoreError",
    "ReadOnlyVars",
    "VariableStore",
]
