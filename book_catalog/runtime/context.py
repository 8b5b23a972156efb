import os
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace
from pathlib import Path

from loguru import logger

from book_catalog.runtime.config.config_data import ConfigData
from book_catalog.runtime.config.config_template import load_templated_yaml

CONFIG_PATH_ENV_VAR = "BOOK_CATALOG_CONFIG"


@dataclass
class AppContext:
    """Application context containing configuration and other app-wide state."""

    config: ConfigData


def load_default_config() -> ConfigData:
    """Load config.yaml (or the file named by BOOK_CATALOG_CONFIG).

    Falls back to the model defaults when no file is present.
    """
    path = Path(os.getenv(CONFIG_PATH_ENV_VAR, "config.yaml"))
    if not path.exists():
        logger.info("No configuration file at {}; using defaults", path)
        return ConfigData()
    return load_templated_yaml(path)


_app_context: ContextVar[AppContext | None] = ContextVar("app_context", default=None)


def get_context() -> AppContext:
    """Get the current application context, loading configuration on first use.

    Returns:
        AppContext: The current application context containing configuration.
    """
    context = _app_context.get()
    if context is None:
        context = AppContext(config=load_default_config())
        _app_context.set(context)
    return context


def set_context(context: AppContext) -> Token[AppContext | None]:
    """Set the current application context.

    Args:
        context: AppContext instance to set as current.
    """
    return _app_context.set(context)


def _recursive_dict_merge(base_dict: dict, override_dict: dict) -> dict:
    """Recursively merge two dictionaries, override values winning."""
    result = base_dict.copy()

    for key, value in override_dict.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _recursive_dict_merge(result[key], value)
        else:
            result[key] = value

    return result


@contextmanager
def with_context(config_override: ConfigData | dict | None = None):
    """Context manager for temporarily overriding the application context.

    A dict override is merged into the current configuration, so partial
    overrides inherit the values they don't mention. A ConfigData override
    replaces the configuration outright.

    Example:
        with with_context({"app": {"expose_store_errors": False}}):
            assert get_config().app.expose_store_errors is False
    """
    if config_override is None:
        yield
        return

    current_config = get_context().config

    if isinstance(config_override, ConfigData):
        merged_config = config_override
    elif isinstance(config_override, dict):
        merged_config = ConfigData.model_validate(
            _recursive_dict_merge(current_config.model_dump(), config_override)
        )
    else:
        raise ValueError(
            f"config_override must be ConfigData, dict or None, got {type(config_override)}"
        )

    token = set_context(replace(get_context(), config=merged_config))
    try:
        yield
    finally:
        _app_context.reset(token)


def set_config(config: ConfigData) -> None:
    """Replace the current application configuration."""
    set_context(AppContext(config=config))


def get_config() -> ConfigData:
    """Convenience function to get the current configuration."""
    return get_context().config
