"""Configuration management for Staplegun."""

from pydantic_settings import BaseSettings


class StaplegunConfig(BaseSettings):
    """Configuration settings loaded from environment variables."""

    # Plugins
    plugins_dir: str | None = None
    command_extension: str = "py"

    # Logging
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "STAPLEGUN_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


# Global config instance
_config: StaplegunConfig | None = None


def get_config() -> StaplegunConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = StaplegunConfig()
    return _config


def set_config(config: StaplegunConfig | None) -> None:
    """Set the global configuration instance (None resets to defaults)."""
    global _config
    _config = config
