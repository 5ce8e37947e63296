"""Bounded variable store shared between scripts and the host.

Two tiers of text variables are kept: global ones, visible to everybody, and
script ones, visible only under the name of the script that set them. Both are
capped (see :class:`scriptvars.config.Limits`), inserting past a cap fails
instead of evicting anything.

Setting a variable to ``None`` removes it. Mappings handed out are read-only
copies, so callers never hold references into the store itself.
"""
from __future__ import annotations

import threading
from collections.abc import Iterator, Mapping

from rich.markup import escape

from scriptvars import events
from scriptvars.config import Limits
from scriptvars.context import script_name_from
from scriptvars.errors import InvalidArgumentError, UnsupportedOperationError
from scriptvars.util import log


class ReadOnlyVars(Mapping):
    """An immutable copy of a set of variables, taken when it was handed out."""

    __slots__ = ("_data",)

    def __init__(self, data: Mapping | None = None):
        self._data = dict(data or {})

    def __getitem__(self, key):
        return self._data[key]

    def __iter__(self) -> Iterator:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ReadOnlyVars({self._data!r})"

    def _unsupported(self, *_args, **_kwargs):
        raise UnsupportedOperationError("Variables are read-only, use the store to change them.")

    __setitem__ = _unsupported
    __delitem__ = _unsupported
    __ior__ = _unsupported
    pop = _unsupported
    popitem = _unsupported
    clear = _unsupported
    update = _unsupported
    setdefault = _unsupported


_EMPTY = ReadOnlyVars()


class VariableStore:
    """Global and per-script variables with hard capacity limits.

    Safe to share between threads. The global variables and the script table
    each have their own lock, ``clear`` and ``snapshot`` take both, always
    globals first.
    """

    def __init__(self, limits: Limits | None = None) -> None:
        self._limits = limits or Limits()
        self._global_vars: dict[str, str] = {}
        self._script_vars: dict[str, dict[str, str]] = {}
        self._global_lock = threading.Lock()
        self._script_lock = threading.Lock()

    @property
    def limits(self) -> Limits:
        return self._limits

    # ------------------------------------------------------------------
    # validation

    def _validate_key(self, key) -> None:
        if key is None or key == "":
            raise InvalidArgumentError("Parameter key must not be None or empty.")
        if not isinstance(key, str):
            raise InvalidArgumentError(f"Parameter key must be a string, got: {type(key).__name__}")
        if len(key) > self._limits.max_key_size:
            raise InvalidArgumentError(
                f"Parameter key ({key}) has more than {self._limits.max_key_size} characters."
            )

    def _validate_value(self, value) -> None:
        if value is None:
            return
        if not isinstance(value, str):
            raise InvalidArgumentError(f"Parameter value must be a string, got: {type(value).__name__}")
        if len(value) > self._limits.max_value_size:
            raise InvalidArgumentError(
                f"Value for variable has more than {self._limits.max_value_size} characters."
            )

    @staticmethod
    def _validate_script_name(script_name) -> None:
        if script_name is None or script_name == "":
            raise InvalidArgumentError("Parameter script name must not be None or empty.")
        if not isinstance(script_name, str):
            raise InvalidArgumentError(
                f"Parameter script name must be a string, got: {type(script_name).__name__}"
            )

    # ------------------------------------------------------------------
    # mutation helpers, called with the owning lock held

    @staticmethod
    def _apply(variables: dict[str, str], key: str, value: str | None, max_vars: int, owner: str) -> str | None:
        """Sets or removes ``key`` in ``variables``, returns the event to emit (if any)."""
        if value is None:
            if variables.pop(key, None) is None:
                return None
            return events.VAR_REMOVED

        if key not in variables and len(variables) >= max_vars:
            log.warning(f"Rejected variable '{escape(key)}': {escape(owner)} already holds {max_vars} variables")
            raise InvalidArgumentError(
                f"Maximum number of {owner} variables reached: {max_vars}"
            )
        variables[key] = value
        return events.VAR_SET

    def _notify(self, event: str | None, scope: str, script_name: str | None, key: str, value: str | None):
        if event is None:
            return
        if event == events.VAR_SET:
            log.debug(f"Set {scope} variable '{escape(key)}'" + (f" of script '{escape(script_name)}'" if script_name else ""))
            events.emit(event, sender=self, scope=scope, script_name=script_name, key=key, value=value)
        else:
            log.debug(f"Removed {scope} variable '{escape(key)}'" + (f" of script '{escape(script_name)}'" if script_name else ""))
            events.emit(event, sender=self, scope=scope, script_name=script_name, key=key)

    # ------------------------------------------------------------------
    # global variables

    def set_global_var(self, key: str, value: str | None) -> None:
        """Sets a global variable, or removes it when ``value`` is ``None``.

        Raises InvalidArgumentError for an invalid key or value, or when a new
        key would exceed ``limits.max_global_vars``. Existing keys can always be
        overwritten.
        """
        self._validate_key(key)
        self._validate_value(value)
        with self._global_lock:
            event = self._apply(self._global_vars, key, value, self._limits.max_global_vars, "global")
        self._notify(event, events.SCOPE_GLOBAL, None, key, value)

    def get_global_var(self, key: str) -> str | None:
        if not isinstance(key, str):
            return None
        with self._global_lock:
            return self._global_vars.get(key)

    def get_global_vars(self) -> ReadOnlyVars:
        with self._global_lock:
            return ReadOnlyVars(self._global_vars)

    def clear_global_vars(self) -> None:
        with self._global_lock:
            cleared = bool(self._global_vars)
            self._global_vars.clear()
        if cleared:
            log.debug("Cleared global variables")
            events.emit(events.VARS_CLEARED, sender=self, scope=events.SCOPE_GLOBAL, script_name=None)

    # ------------------------------------------------------------------
    # script variables

    def set_script_var(self, script_name: str, key: str, value: str | None) -> None:
        """Sets a variable of the given script, or removes it when ``value`` is ``None``.

        Raises InvalidArgumentError for an invalid script name, key or value, or
        when a new key would exceed ``limits.max_script_vars`` for that script.
        """
        self._validate_script_name(script_name)
        self._validate_key(key)
        self._validate_value(value)
        with self._script_lock:
            variables = self._script_vars.get(script_name, {})
            event = self._apply(variables, key, value, self._limits.max_script_vars, f"script '{script_name}'")
            if variables:
                self._script_vars[script_name] = variables
            else:
                self._script_vars.pop(script_name, None)
        self._notify(event, events.SCOPE_SCRIPT, script_name, key, value)

    def set_context_script_var(self, context, key: str, value: str | None) -> None:
        """Like :meth:`set_script_var`, with the script name read from an execution context."""
        self.set_script_var(script_name_from(context), key, value)

    def get_script_var(self, script_name: str, key: str) -> str | None:
        if not isinstance(script_name, str) or not isinstance(key, str):
            return None
        with self._script_lock:
            variables = self._script_vars.get(script_name)
            if variables is None:
                return None
            return variables.get(key)

    def get_context_script_var(self, context, key: str) -> str | None:
        return self.get_script_var(script_name_from(context), key)

    def get_script_vars(self, script_name: str) -> ReadOnlyVars:
        if not isinstance(script_name, str):
            return _EMPTY
        with self._script_lock:
            variables = self._script_vars.get(script_name)
            if not variables:
                return _EMPTY
            return ReadOnlyVars(variables)

    def get_context_script_vars(self, context) -> ReadOnlyVars:
        return self.get_script_vars(script_name_from(context))

    def get_script_names(self) -> frozenset[str]:
        with self._script_lock:
            return frozenset(self._script_vars)

    def clear_script_vars(self, script_name: str) -> None:
        with self._script_lock:
            cleared = self._script_vars.pop(script_name, None) is not None
        if cleared:
            log.debug(f"Cleared variables of script '{escape(script_name)}'")
            events.emit(events.VARS_CLEARED, sender=self, scope=events.SCOPE_SCRIPT, script_name=script_name)

    # ------------------------------------------------------------------

    def clear(self) -> None:
        """Removes all global and script variables."""
        with self._global_lock, self._script_lock:
            had_globals = bool(self._global_vars)
            had_scripts = bool(self._script_vars)
            self._global_vars.clear()
            self._script_vars.clear()
        log.debug("Cleared all variables")
        if had_globals:
            events.emit(events.VARS_CLEARED, sender=self, scope=events.SCOPE_GLOBAL, script_name=None)
        if had_scripts:
            # script_name None: every script was cleared
            events.emit(events.VARS_CLEARED, sender=self, scope=events.SCOPE_SCRIPT, script_name=None)

    def snapshot(self) -> ReadOnlyVars:
        with self._global_lock, self._script_lock:
            global_vars = ReadOnlyVars(self._global_vars)
            scripts = ReadOnlyVars({name: ReadOnlyVars(v) for name, v in self._script_vars.items()})
        return ReadOnlyVars({"global": global_vars, "scripts": scripts})

    def __repr__(self) -> str:
        with self._global_lock, self._script_lock:
            return (
                f"VariableStore(global_vars={len(self._global_vars)}, "
                f"scripts={len(self._script_vars)})"
            )
