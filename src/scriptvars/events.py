"""Change notifications for the variable store, sent over blinker signals.

Events are sent after the store has released its lock. Two threads writing
the same key can therefore deliver their ``var.set`` events in a different
order than the writes were applied. Read the store for the current value.
"""
from __future__ import annotations

import time

from blinker import Namespace
from rich.markup import escape

from .util import log

VAR_SET = "var.set"
VAR_REMOVED = "var.removed"
VARS_CLEARED = "vars.cleared"

SCOPE_GLOBAL = "global"
SCOPE_SCRIPT = "script"

_ns = Namespace()


def now_ms() -> int:
    return int(time.time() * 1000)


def signal(name: str):
    return _ns.signal(name)


def emit(name: str, sender: object | None = None, **payload):
    msg = dict(payload)
    msg.setdefault("ts", now_ms())
    try:
        return signal(name).send(sender, event=name, **msg)
    except Exception as e:
        # Subscribers must not break a store operation that already succeeded.
        log.error(f"Event subscriber error for {escape(name)}: {escape(str(e))}", exc_info=True)
        return []
