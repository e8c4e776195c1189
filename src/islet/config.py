"""Configuration for Islet."""

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass
class Config:
    """Application configuration."""

    database_url: str = "sqlite:///./islet.db"
    host: str = "localhost"
    port: int = 1965
    certfile: Path | None = None
    keyfile: Path | None = None
    log_level: str = "INFO"
    log_file: Path | None = None
    json_logs: bool = False
    data_path: Path | None = None

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        certfile = os.getenv("ISLET_CERTFILE")
        keyfile = os.getenv("ISLET_KEYFILE")
        log_file = os.getenv("ISLET_LOG_FILE")
        data_path = os.getenv("ISLET_DATA_PATH")

        return cls(
            database_url=os.getenv("ISLET_DATABASE_URL", cls.database_url),
            host=os.getenv("ISLET_HOST", cls.host),
            port=int(os.getenv("ISLET_PORT", str(cls.port))),
            certfile=Path(certfile) if certfile else None,
            keyfile=Path(keyfile) if keyfile else None,
            log_level=os.getenv("ISLET_LOG_LEVEL", cls.log_level),
            log_file=Path(log_file) if log_file else None,
            json_logs=os.getenv("ISLET_JSON_LOGS", "").lower()
            in ("true", "1", "yes"),
            data_path=Path(data_path) if data_path else None,
        )
