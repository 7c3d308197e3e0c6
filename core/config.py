"""
Centralized configuration management.
All environment variables and settings are defined here.
"""
import codecs
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    # Application
    app_name: str = Field(default="Lydia to YNAB Converter", alias="APP_NAME")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8000)
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    
    # Conversion
    output_filename: str = Field(default="ynab.csv", alias="OUTPUT_FILENAME")
    file_encoding: str = Field(default="utf-8", alias="FILE_ENCODING")
    strict_rows: bool = Field(default=False, alias="STRICT_ROWS")
    
    # Upload limits
    max_upload_files: int = Field(default=20, alias="MAX_UPLOAD_FILES")
    
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level is one of the standard levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v_upper
    
    @field_validator("port")
    @classmethod
    def validate_port(cls, v):
        """Validate port is in valid range."""
        if not (1 <= v <= 65535):
            raise ValueError("Port must be between 1 and 65535")
        return v
    
    @field_validator("output_filename")
    @classmethod
    def validate_output_filename(cls, v):
        """Output must be a bare .csv file name."""
        if not v.lower().endswith(".csv"):
            raise ValueError("Output filename must end with .csv")
        if "/" in v or "\\" in v:
            raise ValueError("Output filename must not contain path separators")
        return v
    
    @field_validator("file_encoding")
    @classmethod
    def validate_file_encoding(cls, v):
        """Reject codecs Python does not know about."""
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown file encoding: {v}")
        return v
    
    @field_validator("max_upload_files")
    @classmethod
    def validate_max_upload_files(cls, v):
        """Validate upload cap."""
        if v < 1:
            raise ValueError("Max upload files must be at least 1")
        if v > 200:
            raise ValueError("Max upload files should not exceed 200")
        return v


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings singleton.
    
    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None
