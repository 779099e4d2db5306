"""Central configuration — loads from .env and environment variables."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


_BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment / .env file.

    Checklist weights and band thresholds are fixed constants in
    ``ai_verify.scoring.tables`` and are not exposed here.
    """

    model_config = SettingsConfigDict(
        env_file=str(_BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Environment ──────────────────────────────────────────────
    environment: Literal["development", "staging", "production"] = "development"
    log_level: str = "INFO"

    # ── Frontend ─────────────────────────────────────────────────
    page_title: str = "AI-VERIFY — Clinical AI Output Risk Checker"

    # ── Paths ────────────────────────────────────────────────────
    report_dir: str = str(_BASE_DIR / "data" / "reports")

    # ── Helpers ──────────────────────────────────────────────────
    def ensure_dirs(self) -> None:
        """Create all required data directories."""
        Path(self.report_dir).mkdir(parents=True, exist_ok=True)


def get_settings() -> Settings:
    """Return a Settings instance built from the current environment."""
    return Settings()


if __name__ == "__main__":
    s = get_settings()
    s.ensure_dirs()
    print(f"Environment : {s.environment}")
    print(f"Log level   : {s.log_level}")
    print(f"Reports     : {s.report_dir}")
    print("✓ Config loaded successfully")
