from functools import lru_cache

from fastapi import Depends

from app.config.settings import Settings
from app.extraction.pipeline import ExtractionPipeline, build_pipeline


@lru_cache
def get_settings() -> Settings:
    return Settings()


def get_extraction_pipeline(settings: Settings = Depends(get_settings)) -> ExtractionPipeline:
    """A fresh pipeline per request, built from read-only settings."""
    return build_pipeline(settings)
