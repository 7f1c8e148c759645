"""Application settings and configuration management."""

import os
from functools import lru_cache
from typing import Dict, List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_GRAPH_PATH = os.path.join(
    os.path.dirname(os.path.dirname(__file__)), "data", "library_graph.json"
)


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application
    app_name: str = Field(default="Wayfinder")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)
    workers: int = Field(default=1)

    # Logging
    log_level: str = Field(default="INFO")

    # CORS
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080"]
    )

    # Search Configuration
    max_suggestions: int = Field(default=6)
    max_query_length: int = Field(default=100)
    suggestion_threshold: float = Field(default=0.6)  # "did you mean" cut-off
    highlight_open_tag: str = Field(default='<mark class="search-highlight">')
    highlight_close_tag: str = Field(default="</mark>")
    category_keywords: Dict[str, List[str]] = Field(
        default={
            "restroom": ["restroom", "bathroom"],
            "study": ["study", "group room"],
            "computer": ["computer", "lab"],
        }
    )

    # Building graph
    graph_path: str = Field(default=DEFAULT_GRAPH_PATH)
    kiosk_node_id: str = Field(default="F1_KIOSK_A")
    default_floor: int = Field(default=1)

    # Mobile hand-off (QR code target)
    public_base_url: str = Field(default="http://localhost:3000")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
