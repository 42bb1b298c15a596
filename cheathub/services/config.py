"""Configuration service for managing application settings."""

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import structlog

from ..models import AppConfig

log = structlog.stdlib.get_logger()


class ValidationResult:
    """Result of configuration validation."""
    
    def __init__(self, is_valid: bool, errors: list[str] | None = None) -> None:
        self.is_valid: bool = is_valid
        self.errors: list[str] = errors or []


class ConfigurationService:
    """Service for managing application configuration.
    
    Only connection and display settings live here; credentials and tokens
    are never written to disk.
    """
    
    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path: Path = config_path or Path.home() / ".config" / "cheathub" / "config.json"
        log.info("Configuration service initialized", config_path=str(self.config_path))
    
    def load_config(self) -> AppConfig:
        """Load configuration from file or return default configuration."""
        if not self.config_path.exists():
            log.info("Configuration file not found, using defaults")
            return self._get_default_config()
        
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                data: dict[str, Any] = json.load(f)
            
            config = self._dict_to_config(data)
            validation_result = self.validate_config(config)
            
            if not validation_result.is_valid:
                log.warning("Invalid configuration loaded, using defaults", errors=validation_result.errors)
                return self._get_default_config()
            
            log.info("Configuration loaded successfully")
            return config
            
        except (OSError, json.JSONDecodeError, AttributeError, TypeError, ValueError) as e:
            log.error("Failed to load configuration, using defaults", error=str(e))
            return self._get_default_config()
    
    def save_config(self, config: AppConfig) -> None:
        """Save configuration to file."""
        validation_result = self.validate_config(config)
        if not validation_result.is_valid:
            raise ValueError(f"Invalid configuration: {', '.join(validation_result.errors)}")
        
        # Ensure directory exists
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        
        try:
            data = self._config_to_dict(config)
            with open(self.config_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            
            log.info("Configuration saved successfully")
            
        except OSError as e:
            log.error("Failed to save configuration", error=str(e))
            raise
    
    def validate_config(self, config: AppConfig) -> ValidationResult:
        """Validate configuration settings."""
        errors = []
        
        # Validate api_base_url
        parsed = urlparse(config.api_base_url) if isinstance(config.api_base_url, str) else None
        if parsed is None or parsed.scheme not in ("http", "https") or not parsed.netloc:
            errors.append("api_base_url must be an absolute http(s) URL")
        
        # Validate request_timeout
        if not isinstance(config.request_timeout, (int, float)) or config.request_timeout <= 0:
            errors.append("request_timeout must be a positive number")
        elif config.request_timeout > 300:
            errors.append("request_timeout should not exceed 300 seconds")
        
        if not isinstance(config.verify_ssl, bool):
            errors.append("verify_ssl must be a boolean")
        
        # Validate delays
        for name in ("notification_timeout", "copy_feedback_delay"):
            value = getattr(config, name)
            if not isinstance(value, (int, float)) or value <= 0:
                errors.append(f"{name} must be a positive number")
            elif value > 60:
                errors.append(f"{name} should not exceed 60 seconds")
        
        # Validate log_level
        valid_log_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if config.log_level not in valid_log_levels:
            errors.append(f"log_level must be one of: {', '.join(sorted(valid_log_levels))}")
        
        return ValidationResult(len(errors) == 0, errors)
    
    def _get_default_config(self) -> AppConfig:
        """Get default configuration."""
        return AppConfig()
    
    def _config_to_dict(self, config: AppConfig) -> dict[str, str | float | bool]:
        """Convert AppConfig to dictionary for JSON serialization."""
        return {
            "api_base_url": config.api_base_url,
            "request_timeout": config.request_timeout,
            "verify_ssl": config.verify_ssl,
            "notification_timeout": config.notification_timeout,
            "copy_feedback_delay": config.copy_feedback_delay,
            "log_level": config.log_level,
        }
    
    def _dict_to_config(self, data: dict[str, Any]) -> AppConfig:
        """Convert dictionary to AppConfig, filling missing keys with defaults."""
        defaults = AppConfig()
        
        def number(key: str, default: float) -> float:
            raw = data.get(key, default)
            if isinstance(raw, bool) or not isinstance(raw, (int, float)):
                return default
            return float(raw)
        
        verify_raw = data.get("verify_ssl", defaults.verify_ssl)
        
        return AppConfig(
            api_base_url=str(data.get("api_base_url") or defaults.api_base_url).rstrip("/"),
            request_timeout=number("request_timeout", defaults.request_timeout),
            verify_ssl=verify_raw if isinstance(verify_raw, bool) else defaults.verify_ssl,
            notification_timeout=number("notification_timeout", defaults.notification_timeout),
            copy_feedback_delay=number("copy_feedback_delay", defaults.copy_feedback_delay),
            log_level=str(data.get("log_level") or defaults.log_level).upper(),
        )
