"""Reading the current script name out of an execution context.

The script engine owns its contexts, all the store needs is a way to ask one
for a named attribute. Plain mappings and anything exposing
``get_attribute(name)`` are understood.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from scriptvars.errors import InvalidArgumentError

SCRIPT_NAME_ATTRIBUTE = "scriptvars.script.name"


def lookup(context, attribute_name: str) -> Any | None:
    match context:
        case Mapping():
            return context.get(attribute_name)
        case _ if callable(getattr(context, "get_attribute", None)):
            return context.get_attribute(attribute_name)
        case _:
            raise InvalidArgumentError(
                f"Unsupported context type {type(context).__name__}, "
                f"expected a mapping or an object with get_attribute()"
            )


def script_name_from(context) -> str:
    if context is None:
        raise InvalidArgumentError("Parameter context must not be None.")

    script_name = lookup(context, SCRIPT_NAME_ATTRIBUTE)
    if script_name is None:
        raise InvalidArgumentError(
            f"Failed to obtain the script name from the context, attribute '{SCRIPT_NAME_ATTRIBUTE}' is not set."
        )
    if not isinstance(script_name, str):
        raise InvalidArgumentError(
            f"The context attribute '{SCRIPT_NAME_ATTRIBUTE}' is not a string: {type(script_name).__name__}"
        )
    return script_name


class SimpleScriptContext:
    def __init__(self, attributes: Mapping[str, Any] | None = None):
        self._attributes: dict[str, Any] = dict(attributes or {})

    @classmethod
    def for_script(cls, script_name) -> "SimpleScriptContext":
        return cls({SCRIPT_NAME_ATTRIBUTE: script_name})

    def get_attribute(self, name: str) -> Any | None:
        return self._attributes.get(name)

    def set_attribute(self, name: str, value: Any) -> None:
        self._attributes[name] = value

    def remove_attribute(self, name: str) -> Any | None:
        return self._attributes.pop(name, None)

    def __repr__(self) -> str:
        return f"SimpleScriptContext({self._attributes!r})"
