import os
from dataclasses import dataclass, field
from typing import List, Optional
from dotenv import load_dotenv
from config.paths import PLAN_STORE_PATH

load_dotenv()


def _csv_env(name: str) -> List[str]:
    return [v.strip() for v in os.getenv(name, "").split(",") if v.strip()]


@dataclass
class Settings:
    """Deployment settings read from the environment (and a local .env file)."""

    api_key: Optional[str] = field(default_factory=lambda: os.getenv("API_KEY"))
    """Required x-api-key header value. Unset disables the check (dev mode)."""
    enable_cors: bool = field(default_factory=lambda: os.getenv("ENABLE_CORS") == "true")
    cors_allow_origins: List[str] = field(default_factory=lambda: _csv_env("CORS_ALLOW_ORIGINS"))
    allowed_hosts: List[str] = field(default_factory=lambda: _csv_env("ALLOWED_HOSTS") or ["*"])
    max_body_bytes: int = field(default_factory=lambda: int(os.getenv("MAX_BODY_BYTES", "0")))
    """Largest accepted request body; 0 means no limit."""
    plan_store_path: str = field(
        default_factory=lambda: os.getenv("PLAN_STORE_PATH") or str(PLAN_STORE_PATH)
    )


def get_settings() -> Settings:
    return Settings()
