"""Configuration management for the instruction definition importer."""

import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from cutscene_importer import PROJECT_DIR

ENVIRONMENTS = ("prd", "acc", "dev", "local")
DEFAULT_MAX_RULE_DEPTH = 64


class ImporterConfig(BaseModel):
    """Settings that control how definition files are located and parsed."""

    # Filesystem folders behind the res:// and user:// virtual roots
    project_root: Path = Field(default=PROJECT_DIR, description="Folder that res:// paths resolve against")
    user_dir: Path = Field(
        default=Path.home() / ".local/share/cutscene_importer", description="Folder that user:// paths resolve against"
    )

    max_rule_depth: int = Field(default=DEFAULT_MAX_RULE_DEPTH, description="Deepest allowed compile rule nesting")
    definition_glob: str = Field(default="*.xml", description="Glob pattern for definition files in a folder")

    @field_validator("max_rule_depth")
    @classmethod
    def validate_max_rule_depth(cls, v):
        """Nesting depth must allow at least one top-level rule."""
        if v < 1:
            raise ValueError(f"max_rule_depth must be at least 1, got {v}")
        return v

    @classmethod
    def from_yaml_and_env(
        cls, config_path: str | Path | None = None, env: str = "local", env_dir: str | Path = "config"
    ) -> "ImporterConfig":
        """Load configuration from both YAML and environment files."""
        if env not in ENVIRONMENTS:
            raise ValueError(f"Invalid environment: {env}")

        # Load environment-specific .env file
        env_file = Path(env_dir) / f".env.{env}"
        if env_file.exists():
            load_dotenv(env_file, override=True)
        else:
            # Fallback to root .env if exists
            load_dotenv(override=True)

        # Load YAML config
        config_path = Path(config_path) if config_path is not None else PROJECT_DIR / "project_config.yml"
        env_config = {}
        if config_path.exists():
            with open(config_path) as f:
                yaml_config = yaml.safe_load(f) or {}
                env_config = yaml_config.get(env) or {}

        values = {
            "project_root": os.getenv("CUTSCENE_PROJECT_ROOT", env_config.get("project_root")),
            "user_dir": os.getenv("CUTSCENE_USER_DIR", env_config.get("user_dir")),
            "max_rule_depth": os.getenv("CUTSCENE_MAX_RULE_DEPTH", env_config.get("max_rule_depth")),
            "definition_glob": os.getenv("CUTSCENE_DEFINITION_GLOB", env_config.get("definition_glob")),
        }
        return cls(**{key: value for key, value in values.items() if value is not None})


# Singleton pattern for config
_config: Optional[ImporterConfig] = None


def get_config(env: Optional[str] = None) -> ImporterConfig:
    """Get or create configuration singleton."""
    global _config
    if _config is None:
        env = env or os.getenv("ENVIRONMENT", "local")
        _config = ImporterConfig.from_yaml_and_env(env=env)
    return _config


def reset_config():
    """Reset configuration singleton (useful for testing)."""
    global _config
    _config = None
