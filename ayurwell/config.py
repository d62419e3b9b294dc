from __future__ import annotations

import os
from pathlib import Path
from typing import List


class Settings:
    """Centralized configuration for the Ayurwell backend."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent
        data_root_default = repo_root / "data"

        self.data_root: Path = Path(
            os.environ.get("AYURWELL_DATA_ROOT") or data_root_default
        ).expanduser()
        self.app_db_path: Path = Path(
            os.environ.get("AYURWELL_DB_PATH") or (self.data_root / "ayurwell.db")
        ).expanduser()
        self.log_level: str = (os.environ.get("AYURWELL_LOG_LEVEL") or "INFO").upper()
        # Dominant dosha share (percent) at which dietary suggestions kick in.
        self.elevated_dosha_pct: int = int(
            os.environ.get("AYURWELL_ELEVATED_DOSHA_PCT") or "40"
        )
        self.host: str = os.environ.get("AYURWELL_HOST") or "127.0.0.1"
        self.port: int = int(os.environ.get("AYURWELL_PORT") or "8000")

        cors = os.environ.get("AYURWELL_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()
