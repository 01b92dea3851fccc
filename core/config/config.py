"""Runtime configuration for the password generator."""

import logging


def _get_log_level(name: str) -> int:
    """Resolve a logging level name with validation."""
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {name}")
    return level


class Config:
    """Centralized operational settings.
    
    Password policy lives in PolicyBounds and is not configurable here.
    Nothing is read from the environment or from files.
    """
    
    # Logging (records go to stderr, passwords go to stdout)
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s - %(message)s"
    
    # Registry name of the sampler used by the default generator
    SAMPLER: str = "system"
    
    def log_level(self) -> int:
        """Return LOG_LEVEL as a logging module level."""
        return _get_log_level(self.LOG_LEVEL)


config = Config()
