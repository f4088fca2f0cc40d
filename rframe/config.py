"""
Configuration settings for rframe.
"""
from typing import Optional, Dict, Any
import os
import threading

# Default settings
DEFAULT_CONFIG = {
    # Random source
    "seed": None,  # None means fresh OS entropy on every process start
    "thread_local_random": True,  # One generator per thread instead of a locked shared one
    "check_finite": True,  # Reject NaN/Inf draws

    # Logging
    "log_level": "WARNING",  # Level used by utils.setup_logging() when none is given
}

# Environment variable consulted when no seed is passed explicitly
SEED_ENV_VAR = "RFRAME_SEED"

_active_config = None
_config_lock = threading.Lock()


class RFrameConfig:
    """Configuration manager for rframe settings"""

    def __init__(self, **kwargs):
        """
        Initialize configuration with default values, overridden by any provided kwargs.

        Args:
            **kwargs: Configuration overrides
        """
        self._config = DEFAULT_CONFIG.copy()

        # Override defaults with any provided values
        for key, value in kwargs.items():
            if key in self._config:
                self._config[key] = value
            else:
                raise ValueError(f"Unknown configuration parameter: {key}")

        # Seed from the environment unless given explicitly
        if "seed" not in kwargs and os.environ.get(SEED_ENV_VAR):
            raw = os.environ[SEED_ENV_VAR]
            try:
                self._config["seed"] = int(raw)
            except ValueError:
                raise ValueError(f"{SEED_ENV_VAR} must be an integer, got {raw!r}") from None

        self._validate()

    def _validate(self):
        seed = self._config["seed"]
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int) or seed < 0):
            raise ValueError(f"seed must be a non-negative integer or None, got {seed!r}")
        for key in ("thread_local_random", "check_finite"):
            if not isinstance(self._config[key], bool):
                raise ValueError(f"{key} must be a boolean, got {self._config[key]!r}")
        if not isinstance(self._config["log_level"], (str, int)):
            raise ValueError(f"log_level must be a level name or number, got {self._config['log_level']!r}")

    def __getitem__(self, key):
        if key not in self._config:
            raise KeyError(f"Unknown configuration parameter: {key}")
        return self._config[key]

    def __setitem__(self, key, value):
        """Set a configuration value"""
        if key not in self._config:
            raise ValueError(f"Unknown configuration parameter: {key}")
        previous = self._config[key]
        self._config[key] = value
        try:
            self._validate()
        except ValueError:
            self._config[key] = previous
            raise
        if self is _active_config:
            _reset_random_source()

    def get(self, key, default=None):
        return self._config[key] if key in self._config else default

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict of every setting, safe to mutate"""
        return dict(self._config)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "RFrameConfig":
        if not isinstance(config_dict, dict):
            raise ValueError(f"Configuration must be a mapping, got {type(config_dict).__name__}")
        return cls(**config_dict)

    @classmethod
    def from_file(cls, filename: str) -> "RFrameConfig":
        """Load configuration from a JSON or YAML file"""
        with open(filename, 'r') as f:
            if filename.endswith(('.yml', '.yaml')):
                import yaml
                config_dict = yaml.safe_load(f) or {}
            else:
                import json
                config_dict = json.load(f)
        if not isinstance(config_dict, dict):
            raise ValueError(f"Configuration file {filename} must contain a mapping")
        return cls.from_dict(config_dict)

    def save_to_file(self, filename: str):
        """Save configuration to a JSON or YAML file"""
        with open(filename, 'w') as f:
            if filename.endswith(('.yml', '.yaml')):
                import yaml
                yaml.safe_dump(self._config, f, default_flow_style=False)
            else:
                import json
                json.dump(self._config, f, indent=2)

    def __repr__(self):
        return f"RFrameConfig({self._config!r})"


def get_config() -> RFrameConfig:
    """
    Get the process-wide configuration, creating it from defaults on first use.
    """
    global _active_config
    with _config_lock:
        if _active_config is None:
            _active_config = RFrameConfig()
        return _active_config


def set_config(config: Optional[RFrameConfig]) -> None:
    """
    Replace the process-wide configuration. Passing None resets to defaults on next use.
    """
    global _active_config
    if config is not None and not isinstance(config, RFrameConfig):
        raise TypeError("config must be an RFrameConfig instance or None")
    with _config_lock:
        _active_config = config
    _reset_random_source()


def _reset_random_source() -> None:
    # The default random source is built from the active configuration
    from .rng import set_random_source
    set_random_source(None)
