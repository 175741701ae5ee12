from functools import lru_cache

from .models.settings import Settings


@lru_cache
def get_settings() -> Settings:
    return Settings()
