from functools import lru_cache

from .config import Settings, get_settings
from .logger import logger
from .model import DEFAULT_CATALOG, Catalog, load_catalog_file


@lru_cache(maxsize=1)
def settings_dependency() -> Settings:
    return get_settings()


@lru_cache(maxsize=1)
def catalog_dependency() -> Catalog:
    settings = settings_dependency()
    if settings.catalog_file:
        logger.info(f"Using catalog file {settings.catalog_file}")
        return load_catalog_file(settings.catalog_file)
    return DEFAULT_CATALOG
