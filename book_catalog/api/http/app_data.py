from dataclasses import dataclass

from book_catalog.core.services import DbSessionService
from book_catalog.runtime.config.config_data import ConfigData


@dataclass
class ApplicationDependencies:
    config: ConfigData
    database_service: DbSessionService
