# rosterapp/core/config.py
from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


EnvType = Literal["local", "dev", "staging", "prod"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # App
    APP_NAME: str = "PuppyBowlRoster"
    APP_ENV: EnvType = "local"
    LOG_LEVEL: str = "INFO"
    PAGE_TITLE: str = "Puppy Bowl"

    # Remote roster API
    ROSTER_API_ROOT: str = "https://fsa-puppy-bowl.herokuapp.com/api"
    COHORT_NAME: str = Field(default="2410-FTB-ET-WEB-PT", description="Cohort segment of the API path")
    ROSTER_REQUEST_TIMEOUT: float = 30.0

    # Dev toggle: serve the remote API from an in-process fake
    ROSTER_FAKE_MODE: bool = False

    @property
    def api_url(self) -> str:
        return f"{self.ROSTER_API_ROOT.rstrip('/')}/{self.COHORT_NAME.strip('/')}"

    # ---------- Validators ----------

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return str(v).strip().upper() or "INFO"

    @field_validator("COHORT_NAME", "ROSTER_API_ROOT")
    @classmethod
    def _strip_quotes(cls, v: str) -> str:
        # allow quoted values from .env
        return str(v).strip().strip('"').strip("'")

    # ---------- Runtime validations ----------

    def validate_at_startup(self) -> None:
        """Fail fast with clear messages for misconfigurations."""
        problems: list[str] = []

        if not self.ROSTER_FAKE_MODE:
            if not self.ROSTER_API_ROOT.startswith(("http://", "https://")):
                problems.append("ROSTER_API_ROOT must be an http(s) URL.")
            if not self.COHORT_NAME:
                problems.append("COHORT_NAME is required unless ROSTER_FAKE_MODE is on.")

        if self.ROSTER_REQUEST_TIMEOUT <= 0:
            problems.append("ROSTER_REQUEST_TIMEOUT must be positive.")

        if problems:
            raise RuntimeError("Config validation failed: " + " ".join(problems))


settings = Settings()
