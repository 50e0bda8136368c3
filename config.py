"""
Runtime configuration read from environment variables
"""
from dataclasses import dataclass
from typing import Optional
import os


class ConfigError(ValueError):
    """Raised when a CALENDAR_* environment variable has an unusable value"""


@dataclass
class CalendarConfig:
    seed: Optional[int] = None  # None = fresh randomness every run
    plot_dir: str = "plots"
    log_level: str = "INFO"
    actor_base: str = "simpleSystemBase"  # thespian system base

    @classmethod
    def from_env(cls, environ=None):
        """Build a config from CALENDAR_* environment variables"""
        env = os.environ if environ is None else environ
        seed = env.get('CALENDAR_SEED')
        if seed not in (None, ''):
            try:
                seed = int(seed)
            except ValueError:
                raise ConfigError(f"CALENDAR_SEED must be an integer, got {seed!r}")
        else:
            seed = None
        return cls(
            seed=seed,
            plot_dir=env.get('CALENDAR_PLOT_DIR', 'plots'),
            log_level=env.get('CALENDAR_LOG_LEVEL', 'INFO').upper(),
            actor_base=env.get('CALENDAR_ACTOR_BASE', 'simpleSystemBase'),
        )
