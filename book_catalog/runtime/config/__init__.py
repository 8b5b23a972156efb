from .config_data import AppConfig, ConfigData, CORSConfig, DatabaseConfig, LoggingConfig
from .config_template import load_templated_yaml, substitute_env_vars

__all__ = [
    "AppConfig",
    "ConfigData",
    "CORSConfig",
    "DatabaseConfig",
    "LoggingConfig",
    "load_templated_yaml",
    "substitute_env_vars",
]
