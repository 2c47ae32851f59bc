"""Configuration management using Pydantic Settings."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from scamwatch.llm_providers import GeminiModel

logger = logging.getLogger(__name__)


class GenerationConfig(BaseModel):
    """Remote generation parameters."""

    model: str = GeminiModel.GEMINI_3_FLASH_PREVIEW.value
    output_mode: Literal["native", "tool"] = "native"
    default_count: int = Field(default=30, ge=1)
    initial_count: int = Field(default=40, ge=1)  # Batch generated on API startup
    research_count: int = Field(default=12, ge=1)
    summary_sample_size: int = Field(default=10, ge=1)  # Entries embedded in summary prompts


class APIConfig(BaseModel):
    """Dashboard API server parameters."""

    host: str = "127.0.0.1"
    port: int = 8000
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://localhost:5173"]
    )
    initial_load: bool = True


class LoggingConfig(BaseModel):
    """Logging parameters."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    environment: str = "development"  # Logfire environment tag
    trace_prompts: bool = True  # Attach prompt/response text to generation spans


class Settings(BaseSettings):
    """Main configuration class."""

    # Paths
    data_dir: Path = Path("data")

    # API Keys
    gemini_api_key: str = ""
    logfire_token: str = ""

    # Nested configuration sections
    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    api: APIConfig = Field(default_factory=APIConfig)
    log: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("data_dir", mode="after")
    @classmethod
    def resolve_data_dir(cls, v: Path) -> Path:
        """Resolve data directory to absolute path."""
        return v.resolve()

    def load_yaml_config(self) -> None:
        """Load and merge YAML configuration."""
        config_path = self.data_dir / "config.yaml"

        if not config_path.exists():
            logger.info(
                f"Config file not found: {config_path}. "
                "Using defaults. Run 'python -m scamwatch init' to create it."
            )
            return

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                yaml_config = yaml.safe_load(f)

            if not yaml_config:
                logger.warning(f"Empty config file: {config_path}")
                return

            for section_name in ["generation", "api", "log"]:
                if section_name in yaml_config:
                    section = getattr(self, section_name)
                    section_dict = section.model_dump()
                    section_dict.update(yaml_config[section_name] or {})
                    setattr(self, section_name, section.__class__(**section_dict))

            logger.info(f"Loaded configuration from {config_path}")

        except yaml.YAMLError as e:
            logger.error(f"Failed to parse YAML config: {e}")
            raise
        except Exception as e:
            logger.error(f"Failed to load config: {e}")
            raise


@lru_cache()
def get_settings() -> Settings:
    """Get singleton Settings instance."""
    settings = Settings()
    settings.load_yaml_config()
    return settings
