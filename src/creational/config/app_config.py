#!/usr/bin/env python3
"""
Configuration Management
Environment-specific configuration for the demonstration runner
"""

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..notifications import Channel
from ..reports import Department

logger = logging.getLogger(__name__)

ENV_VAR = "CREATIONAL_ENV"
LOG_LEVEL_VAR = "CREATIONAL_LOG_LEVEL"
LOG_FILE_VAR = "CREATIONAL_LOG_FILE"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
SECTIONS = ("logging", "demo")

class ConfigError(ValueError):
    """Raised when a configuration file cannot be read or validated"""

class Environment(str, Enum):
    """Environment types"""
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"

class LoggingConfig(BaseModel):
    """Logging configuration"""
    level: str = Field(default="WARNING", description="Logging level")
    structured: bool = Field(default=False, description="Emit JSON log lines")
    performance: bool = Field(default=True, description="Include memory usage in log lines")
    log_file: Optional[str] = Field(None, description="Optional log file path")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v):
        level = str(v).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown logging level '{v}'. Available: {', '.join(LOG_LEVELS)}")
        return level

class DemoSettings(BaseModel):
    """Which variants the demonstration runs, in order"""
    channels: List[Channel] = Field(default_factory=lambda: list(Channel))
    departments: List[Department] = Field(default_factory=lambda: list(Department))

    @field_validator('channels', 'departments')
    @classmethod
    def validate_not_empty(cls, v):
        if not v:
            raise ValueError('At least one variant must be selected')
        return v

class AppConfig(BaseModel):
    """Complete application configuration"""
    model_config = ConfigDict(validate_assignment=True)

    environment: Environment = Field(default=Environment.DEVELOPMENT, description="Current environment")
    debug_mode: bool = Field(default=False, description="Force DEBUG logging")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    demo: DemoSettings = Field(default_factory=DemoSettings)

    def effective_log_level(self) -> str:
        """Logging level after debug mode is applied"""
        return "DEBUG" if self.debug_mode else self.logging.level

class ConfigManager:
    """Configuration manager with environment-specific loading"""

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        self.config_dir = Path(config_dir) if config_dir else Path(__file__).parent / "environments"

        self._config: Optional[AppConfig] = None
        self._environment: Optional[Environment] = None

    def load_config(self,
                    environment: Optional[str] = None,
                    config_file: Optional[Union[str, Path]] = None) -> AppConfig:
        """
        Load configuration for the specified environment

        Args:
            environment: Environment name, defaults to $CREATIONAL_ENV or development
            config_file: Extra YAML file merged on top of the environment config

        Returns:
            Validated configuration

        Raises:
            ConfigError: If a file is invalid or the merged config fails validation
        """
        env = environment or os.getenv(ENV_VAR, Environment.DEVELOPMENT.value)

        try:
            self._environment = Environment(env)
        except ValueError:
            logger.warning(f"Unknown environment '{env}', defaulting to development")
            self._environment = Environment.DEVELOPMENT

        base_config = self._load_yaml_file(self.config_dir / "base.yaml")
        env_config = self._load_environment_config(self._environment)
        merged_config = self._merge_configs(base_config, env_config)

        if config_file:
            if not Path(config_file).exists():
                raise ConfigError(f"Config file not found: {config_file}")
            merged_config = self._merge_configs(merged_config, self._load_yaml_file(Path(config_file)))

        self._check_sections(merged_config)
        merged_config['environment'] = self._environment.value
        final_config = self._apply_env_overrides(merged_config)

        try:
            self._config = AppConfig(**final_config)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration for '{self._environment.value}': {e}") from e

        logger.info(f"Configuration loaded for environment: {self._environment.value}")
        return self._config

    def _load_environment_config(self, environment: Environment) -> Dict[str, Any]:
        """Load environment-specific configuration"""
        env_config_path = self.config_dir / f"{environment.value}.yaml"

        if env_config_path.exists():
            return self._load_yaml_file(env_config_path)
        else:
            logger.warning(f"Environment config not found: {env_config_path}")
            return {}

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load YAML configuration file"""
        if not file_path.exists():
            logger.warning(f"Config file not found: {file_path}")
            return {}

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load config from {file_path}: {e}")
            raise ConfigError(f"Failed to load config from {file_path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Config file {file_path} must contain a mapping")

        logger.debug(f"Loaded config from: {file_path}")
        return config

    def _merge_configs(self, base_config: Dict[str, Any], env_config: Dict[str, Any]) -> Dict[str, Any]:
        """Merge base and environment configurations"""
        def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
            result = base.copy()
            for key, value in override.items():
                if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                    result[key] = deep_merge(result[key], value)
                else:
                    result[key] = value
            return result

        return deep_merge(base_config, env_config)

    def _check_sections(self, config: Dict[str, Any]) -> None:
        """Nested sections must be mappings before overrides are applied"""
        for section in SECTIONS:
            value = config.get(section)
            if value is not None and not isinstance(value, dict):
                raise ConfigError(f"'{section}' section must be a mapping, got {type(value).__name__}")

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides"""
        logging_config = dict(config.get("logging") or {})

        if os.getenv(LOG_LEVEL_VAR):
            logging_config["level"] = os.getenv(LOG_LEVEL_VAR)
        if os.getenv(LOG_FILE_VAR):
            logging_config["log_file"] = os.getenv(LOG_FILE_VAR)

        return {**config, "logging": logging_config}

    def get_config(self) -> Optional[AppConfig]:
        """Get current configuration"""
        return self._config

    def get_environment(self) -> Optional[Environment]:
        """Get current environment"""
        return self._environment

    def reload_config(self) -> AppConfig:
        """Reload configuration"""
        return self.load_config(self._environment.value if self._environment else None)

    def validate_config(self, config_dict: Dict[str, Any]) -> bool:
        """Validate configuration dictionary"""
        try:
            AppConfig(**config_dict)
            return True
        except ValidationError as e:
            logger.error(f"Configuration validation failed: {e}")
            return False

# Global configuration manager instance
config_manager = ConfigManager()

def get_config(environment: Optional[str] = None) -> AppConfig:
    """Get configuration for environment"""
    return config_manager.load_config(environment)

def get_current_config() -> Optional[AppConfig]:
    """Get current loaded configuration"""
    return config_manager.get_config()
