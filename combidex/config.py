from dataclasses import dataclass, fields, replace
from .types import *


@dataclass(frozen=True)
class Settings:
    """process-wide defaults picked up by structures and accessors"""
    index_type: Type = int          # integer type used for counts and ranks
    max_workers: int = 4            # thread pool size for part.map
    sample_seed: Optional[int] = None


_settings = Settings()


def get_settings() -> Settings:
    return _settings


def configure(**changes: Any) -> Settings:
    """replace some settings, returns the new settings object"""
    global _settings
    known = {f.name for f in fields(Settings)}
    unknown = set(changes) - known
    if unknown:
        raise InvalidArgument(f"unknown settings: {', '.join(sorted(unknown))}")
    if 'max_workers' in changes and changes['max_workers'] < 1:
        raise InvalidArgument("max_workers must be positive")
    _settings = replace(_settings, **changes)
    return _settings


def reset() -> Settings:
    """restore the defaults"""
    global _settings
    _settings = Settings()
    return _settings
