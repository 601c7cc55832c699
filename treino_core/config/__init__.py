"""Configuration management for Treino Core."""

import os
import yaml
import logging
from pathlib import Path
from typing import Dict, Any, Optional

from pydantic import BaseModel, Field, validator

from treino_core.constants import (
    DEFAULT_CONFIG_PATH, DEFAULT_DATA_FILE, DEFAULT_EXPORT_DIR,
    DEFAULT_LOG_LEVEL, DATA_FILE_ENV_VAR, STORAGE_KEY
)

logger = logging.getLogger(__name__)

class StorageConfig(BaseModel):
    """Blob storage configuration model."""
    data_file: str = Field(default=DEFAULT_DATA_FILE, description="JSON file holding the persisted blobs")
    key: str = Field(default=STORAGE_KEY, description="Key of the entries blob")

    @validator('key')
    def validate_key(cls, v: str) -> str:
        """Validate storage key."""
        if not v.strip():
            logger.warning(f"Empty storage key. Using default: {STORAGE_KEY}")
            return STORAGE_KEY
        return v

class ExportConfig(BaseModel):
    """CSV export configuration model."""
    directory: str = Field(default=DEFAULT_EXPORT_DIR, description="Directory where CSV exports are written")

class LoggingConfig(BaseModel):
    """Logging configuration model."""
    level: str = Field(default=DEFAULT_LOG_LEVEL, description="Logging level")

    @validator('level')
    def validate_level(cls, v: str) -> str:
        """Validate logging level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            logger.warning(f"Invalid logging level: {v}. Using default: {DEFAULT_LOG_LEVEL}")
            return DEFAULT_LOG_LEVEL
        return v.upper()

class TreinoConfig(BaseModel):
    """Main configuration model."""
    storage: StorageConfig = Field(default_factory=StorageConfig, description="Storage configuration")
    export: ExportConfig = Field(default_factory=ExportConfig, description="Export configuration")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Logging configuration")

def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from the YAML config file.

    Args:
        config_path: Path to the config file. If None, default is used.

    Returns:
        Dict with configuration values (defaults filled in).
    """
    path = str(config_path) if config_path else DEFAULT_CONFIG_PATH
    raw_config: Dict[str, Any] = {}

    try:
        resolved_path = resolve_path(path)
        config_file = Path(resolved_path)
        if config_file.exists():
            with open(config_file, 'r', encoding='utf-8') as f:
                raw_config = yaml.safe_load(f) or {}
            logger.debug(f"Loaded configuration from {resolved_path}")
        else:
            logger.debug(f"Config file '{resolved_path}' not found. Using defaults.")
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Error loading config file '{path}': {e}")

    if not isinstance(raw_config, dict):
        logger.error(f"Config file '{path}' is not a mapping. Using defaults.")
        raw_config = {}

    try:
        return TreinoConfig(**raw_config).dict()
    except Exception as validation_error:
        logger.error(f"Configuration validation error: {validation_error}")
        logger.warning("Using default configuration")
        return TreinoConfig().dict()

def resolve_path(path: Optional[str]) -> Optional[str]:
    """Resolve path with environment variables and user home."""
    if path is None:
        return None
    return os.path.expanduser(os.path.expandvars(path))

def get_config_value(config: Dict[str, Any], key_path: str, default: Any = None) -> Any:
    """
    Get configuration value using a dot-separated path.

    Args:
        config: Configuration dictionary
        key_path: Dot-separated path (e.g., "section.key")
        default: Default value if path not found

    Returns:
        Configuration value or default if not found
    """
    keys = key_path.split('.')
    current = config

    for key in keys:
        if isinstance(current, dict) and key in current:
            current = current[key]
        else:
            return default

    return current

def get_data_file(config: Dict[str, Any], cli_value: Optional[str] = None) -> str:
    """
    Get the blob file path with consistent precedence:
    1. Command line option
    2. Environment variable
    3. Configuration
    4. Default constant value
    """
    if cli_value:
        data_file = cli_value
    else:
        data_file = os.environ.get(DATA_FILE_ENV_VAR) or get_config_value(
            config, "storage.data_file", DEFAULT_DATA_FILE)
    return resolve_path(str(data_file))
