from typing import NamedTuple, Dict, Any, ChainMap, Mapping

from scriptvars.errors import InvalidArgumentError
from scriptvars.util import log

MAX_GLOBAL_VARS = 50
MAX_SCRIPT_VARS = 50
MAX_KEY_SIZE = 30
MAX_VALUE_SIZE = 10000

ENV_PREFIX = "SCRIPTVARS_"


class Option(NamedTuple):
    key: str
    default: Any
    help: str = ""

    def from_dict(self, config_dict: Dict[str, Any]):
        return config_dict.get(self.key, self.default)

    @property
    def env_name(self) -> str:
        return ENV_PREFIX + self.key.upper()


class Settings:
    MAX_GLOBAL_VARS = Option("max_global_vars", MAX_GLOBAL_VARS, "Maximum number of global variables")
    MAX_SCRIPT_VARS = Option("max_script_vars", MAX_SCRIPT_VARS, "Maximum number of variables per script")
    MAX_KEY_SIZE = Option("max_key_size", MAX_KEY_SIZE, "Maximum length of a variable key")
    MAX_VALUE_SIZE = Option("max_value_size", MAX_VALUE_SIZE, "Maximum length of a variable value")
    LOG_LEVEL = Option("log_level", "WARNING", "Logging level")


def get_all_settings() -> list[Option]:
    return [option for _name, option in vars(Settings).items() if isinstance(option, Option)]


def _limit_settings() -> list[Option]:
    return [option for option in get_all_settings() if isinstance(option.default, int)]


def create_config(*dicts: Dict[str, object]) -> Mapping[str, object]:
    """Creates a dict-like configuration from multiple dictionaries.
    Earlier dictionaries win over later ones, default values come last.
    """
    defaults = {option.key: option.default for option in get_all_settings()}
    return ChainMap({}, *dicts, defaults)


def conf_get(d, option: Option):
    return d.get(option.key, option.default)


def _coerce_int(option: Option, raw) -> int:
    if isinstance(raw, bool):
        raise InvalidArgumentError(f"Setting '{option.key}' must be an integer, got: {raw!r}")
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"Setting '{option.key}' must be an integer, got: {raw!r}") from None
    if value <= 0:
        raise InvalidArgumentError(f"Setting '{option.key}' must be positive, got: {value}")
    return value


def parse_env_overrides(env: Mapping[str, str]) -> dict:
    """Picks up SCRIPTVARS_<SETTING> entries for known settings, anything else is ignored."""
    limit_keys = {option.key for option in _limit_settings()}
    overrides = {}
    for option in get_all_settings():
        raw = env.get(option.env_name)
        if raw is None:
            continue
        if option.key in limit_keys:
            overrides[option.key] = _coerce_int(option, raw.strip())
        else:
            overrides[option.key] = raw.strip()
    return overrides


class Limits(NamedTuple):
    """Capacity limits enforced by a VariableStore."""

    max_global_vars: int = MAX_GLOBAL_VARS
    max_script_vars: int = MAX_SCRIPT_VARS
    max_key_size: int = MAX_KEY_SIZE
    max_value_size: int = MAX_VALUE_SIZE

    @classmethod
    def from_config(cls, conf: Mapping[str, object]) -> "Limits":
        values = {option.key: _coerce_int(option, conf_get(conf, option)) for option in _limit_settings()}
        return cls(**values)


def configure_logging(conf: Mapping[str, object]) -> None:
    log.set_default_level(conf_get(conf, Settings.LOG_LEVEL))
