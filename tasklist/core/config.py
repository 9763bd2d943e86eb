# tasklist/core/config.py
"""
Application configuration - single source of truth for all settings.
"""
import os
from dataclasses import dataclass, field
from typing import List
from dotenv import load_dotenv

load_dotenv()


def _csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(frozen=True)
class TaskDefaults:
    """Values a new task gets when the caller leaves them out."""
    priority: str = "Medium"
    category: str = "General"
    rank: int = 0
    done: bool = False


@dataclass
class StoreSettings:
    """Persistence configuration."""
    backend: str = field(default_factory=lambda: os.getenv("TASK_STORE", "mongo").lower())
    mongo_uri: str = field(default_factory=lambda: os.getenv("MONGO_URI", "mongodb://localhost:27017/tasklist"))
    server_selection_timeout_ms: int = 5000


@dataclass
class ExpirySettings:
    """Retention window and background sweep cadence."""
    retention_seconds: int = field(default_factory=lambda: int(os.getenv("TASK_RETENTION_SECONDS", "86400")))
    sweep_interval_seconds: float = field(
        default_factory=lambda: float(os.getenv("EXPIRY_SWEEP_INTERVAL_SECONDS", "60"))
    )


@dataclass
class Settings:
    """Main application settings."""
    store: StoreSettings = field(default_factory=StoreSettings)
    expiry: ExpirySettings = field(default_factory=ExpirySettings)
    defaults: TaskDefaults = field(default_factory=TaskDefaults)
    port: int = field(default_factory=lambda: int(os.getenv("PORT", 5000)))
    cors_origins: List[str] = field(
        default_factory=lambda: _csv(os.getenv("CLIENT_URL", "http://localhost:5173"))
    )
    rate_limit: str = field(default_factory=lambda: os.getenv("RATE_LIMIT", "100/minute"))
    debug: bool = field(default_factory=lambda: os.getenv("TASKLIST_DEBUG", "false").lower() == "true")


# Singleton instance
settings = Settings()
