from dotenv import load_dotenv
from dataclasses import dataclass
from typing import Optional
from pathlib import Path
import json
import os

from seo_report.constants import DEFAULT_REQUEST_TIMEOUT_SECONDS, DEFAULT_USER_AGENT

load_dotenv()  # Loads variables from .env file


def env_int(name: str, default: int) -> int:
    """Read an integer environment variable, keeping the default if it is not a number."""
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


class Settings:
    """
    Manages application settings loaded from environment variables.
    """
    USER_AGENT = os.getenv("USER_AGENT", DEFAULT_USER_AGENT)
    REQUEST_TIMEOUT = env_int("REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT_SECONDS)
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE = os.getenv("LOG_FILE")


settings = Settings()


@dataclass
class Config:
    """Configuration for the SEO report engine."""
    user_agent: str = DEFAULT_USER_AGENT
    timeout: int = DEFAULT_REQUEST_TIMEOUT_SECONDS
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Returns:
            Config: Configuration instance with values from environment
        """
        return cls(
            user_agent=os.getenv("USER_AGENT", DEFAULT_USER_AGENT),
            timeout=env_int("REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT_SECONDS),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE"),
        )


@dataclass
class AnalysisThresholds:
    """Configurable thresholds for SEO analysis and scoring."""

    # Meta tags
    title_min: int = 30
    title_max: int = 60
    description_min: int = 70
    description_max: int = 160

    # Images
    generic_alt_min_length: int = 10

    # Keywords
    keyword_min_length: int = 3  # tokens must be longer than this
    top_keywords_count: int = 10
    keyword_over_optimized: float = 4.0  # percentage
    keyword_under_optimized: float = 0.5  # percentage

    # Headings
    min_heading_count: int = 3

    # Page speed estimate
    html_kb_per_point: float = 10.0  # every 10KB of HTML costs one point
    image_weight: float = 3.0
    script_weight: float = 5.0
    stylesheet_weight: float = 2.0
    mobile_speed_factor: float = 0.7
    max_images: int = 10
    max_scripts: int = 5
    large_html_bytes: int = 100 * 1024  # 100KB
    slow_page_speed: int = 50

    @classmethod
    def from_env(cls) -> "AnalysisThresholds":
        """Load thresholds from environment variables.

        Environment variables should be prefixed with SEO_THRESHOLD_
        e.g., SEO_THRESHOLD_TITLE_MAX=65

        Returns:
            AnalysisThresholds with values from environment
        """
        thresholds = cls()
        prefix = "SEO_THRESHOLD_"

        for field_name in thresholds.__dataclass_fields__:
            env_key = f"{prefix}{field_name.upper()}"
            env_value = os.getenv(env_key)

            if env_value is not None:
                field_type = thresholds.__dataclass_fields__[field_name].type
                try:
                    if field_type == int:
                        setattr(thresholds, field_name, int(env_value))
                    elif field_type == float:
                        setattr(thresholds, field_name, float(env_value))
                except ValueError:
                    pass  # Keep default if conversion fails

        return thresholds

    @classmethod
    def from_file(cls, path: str) -> "AnalysisThresholds":
        """Load thresholds from a JSON configuration file.

        Args:
            path: Path to JSON configuration file

        Returns:
            AnalysisThresholds with values from file
        """
        thresholds = cls()
        file_path = Path(path)

        if not file_path.exists():
            return thresholds

        with open(file_path, 'r') as f:
            config = json.load(f)

        threshold_config = config.get('thresholds', config)

        for field_name in thresholds.__dataclass_fields__:
            if field_name in threshold_config:
                setattr(thresholds, field_name, threshold_config[field_name])

        return thresholds

    def to_dict(self) -> dict:
        """Convert thresholds to dictionary.

        Returns:
            Dictionary of all threshold values
        """
        return {
            field_name: getattr(self, field_name)
            for field_name in self.__dataclass_fields__
        }

    def save_to_file(self, path: str) -> None:
        """Save current thresholds to a JSON file.

        Args:
            path: Path to save configuration
        """
        with open(path, 'w') as f:
            json.dump({'thresholds': self.to_dict()}, f, indent=2)


# Global default thresholds instance
default_thresholds = AnalysisThresholds()
