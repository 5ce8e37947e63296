import logging
import uuid

import pytest

from scriptvars import events
from scriptvars.config import Limits
from scriptvars.context import SimpleScriptContext
from scriptvars.store import VariableStore
from scriptvars.util import log


def create_key():
    return f"Key-{uuid.uuid4().hex[:8]}"


def create_value():
    return f"Value-{uuid.uuid4().hex}"


def context_for(script_name):
    return SimpleScriptContext.for_script(script_name)


@pytest.fixture
def store():
    store = VariableStore()
    yield store
    store.clear()


@pytest.fixture
def small_store():
    return VariableStore(Limits(max_global_vars=3, max_script_vars=2, max_key_size=5, max_value_size=8))


@pytest.fixture
def recorded_events():
    # Signals live in a module-level namespace, so receivers are disconnected
    # after each test to keep them from leaking.
    captured = []

    def receiver(sender, **kw):
        captured.append((sender, kw))

    names = (events.VAR_SET, events.VAR_REMOVED, events.VARS_CLEARED)
    for name in names:
        events.signal(name).connect(receiver)
    yield captured
    for name in names:
        events.signal(name).disconnect(receiver)


@pytest.fixture
def debug_logging():
    logger = logging.getLogger("scriptvars")
    previous = logger.level
    log.set_default_level("DEBUG")
    yield logger
    logger.setLevel(previous)
