"""
Application Mode Configuration
Develop and Product modes with different logging behaviors
"""
import os
import yaml
import logging
from enum import Enum
from typing import Optional, Dict, Any
from functools import lru_cache
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


class AppMode(str, Enum):
    """Application running modes"""
    DEVELOP = "develop"
    PRODUCT = "product"

    @classmethod
    def from_string(cls, value: str) -> "AppMode":
        """Parse mode from string"""
        value = value.lower().strip()
        if value in ("develop", "dev", "development", "debug"):
            return cls.DEVELOP
        elif value in ("product", "prod", "production"):
            return cls.PRODUCT
        else:
            raise ValueError(f"Unknown app mode: {value}. Use 'develop' or 'product'")


@dataclass
class ModeConfig:
    """Configuration settings per mode"""
    # Logging
    log_level: str = "INFO"
    enable_stack_trace: bool = False
    enable_debug_logs: bool = False
    log_sampling_rate: float = 1.0  # 1.0 = log all, 0.1 = log 10%

    # Performance
    enable_performance_tracking: bool = False
    slow_request_threshold_ms: int = 1000

    # Error handling
    expose_internal_errors: bool = False


DEVELOP_CONFIG = ModeConfig(
    log_level="DEBUG",
    enable_stack_trace=True,
    enable_debug_logs=True,
    log_sampling_rate=1.0,
    enable_performance_tracking=True,
    slow_request_threshold_ms=500,
    expose_internal_errors=True,
)

PRODUCT_CONFIG = ModeConfig(
    log_level="INFO",
    enable_stack_trace=False,
    enable_debug_logs=False,
    log_sampling_rate=1.0,
    enable_performance_tracking=True,
    slow_request_threshold_ms=2000,
    expose_internal_errors=False,
)


class AppModeManager:
    """
    Centralized application mode manager.
    Supports configuration from:
    1. Environment variable (APP_MODE)
    2. Config file (config.yaml)
    """

    _instance: Optional["AppModeManager"] = None
    _initialized: bool = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._mode: AppMode = AppMode.PRODUCT  # Default to product for safety
        self._config: ModeConfig = PRODUCT_CONFIG
        self._custom_config: Dict[str, Any] = {}
        self._initialized = True

        self._load_configuration()

    def _load_configuration(self):
        """Load configuration from env and config file (file wins)"""
        mode = None

        env_mode = os.environ.get("APP_MODE")
        if env_mode:
            try:
                mode = AppMode.from_string(env_mode)
            except ValueError:
                logger.warning("Ignoring unknown APP_MODE=%r", env_mode)

        config_paths = [
            Path("config.yaml"),
            Path("config/config.yaml"),
        ]
        config_file = os.environ.get("CONFIG_FILE")
        if config_file:
            config_paths.append(Path(config_file))

        for config_path in config_paths:
            if not config_path.is_file():
                continue
            try:
                with open(config_path) as f:
                    yaml_config = yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                logger.warning("Could not read %s: %s", config_path, e)
                continue
            if yaml_config and "app_mode" in yaml_config:
                mode = AppMode.from_string(yaml_config["app_mode"])
                self._custom_config = yaml_config.get("mode_config") or {}
                break

        if mode:
            self.set_mode(mode)

    def set_mode(self, mode: AppMode):
        """Set application mode and update configuration"""
        self._mode = mode
        base = DEVELOP_CONFIG if mode == AppMode.DEVELOP else PRODUCT_CONFIG
        self._config = ModeConfig(**{
            **base.__dict__,
            **self._custom_config
        })

    @property
    def mode(self) -> AppMode:
        return self._mode

    @property
    def config(self) -> ModeConfig:
        return self._config

    @property
    def is_develop(self) -> bool:
        return self._mode == AppMode.DEVELOP

    def get_log_level(self) -> str:
        """Get appropriate log level for current mode"""
        return self._config.log_level

    def should_log_stack_trace(self) -> bool:
        return self._config.enable_stack_trace

    def should_expose_internal_errors(self) -> bool:
        return self._config.expose_internal_errors


@lru_cache()
def get_app_mode_manager() -> AppModeManager:
    """Get singleton AppModeManager instance"""
    return AppModeManager()
