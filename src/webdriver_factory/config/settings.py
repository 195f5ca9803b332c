from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from webdriver_factory.domain.models.driver_models import WindowSize

load_dotenv()

DEFAULT_GRID_URL = "http://localhost:4444/wd/hub"
DEFAULT_COMMAND_TIMEOUT = 10.0


def _default_driver_path() -> Path:
    """Directorio del ejecutable en curso (donde suelen dejarse chromedriver/geckodriver)."""
    entry = sys.argv[0] if sys.argv and sys.argv[0] else "."
    return Path(entry).resolve().parent


class FactorySettings(BaseSettings):
    """
    Configuración del factory de WebDrivers.

    Es de sólo lectura para el factory: los defaults se aplican aquí y
    en ningún otro lugar. Cada campo puede sobreescribirse con una variable
    de entorno con prefijo WEBDRIVER_ (p. ej. WEBDRIVER_GRID_URL).
    """

    model_config = SettingsConfigDict(
        env_prefix="WEBDRIVER_",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Selenium Grid ---
    grid_url: str = Field(default=DEFAULT_GRID_URL)
    command_timeout: float = Field(default=DEFAULT_COMMAND_TIMEOUT, gt=0)

    # --- Drivers locales ---
    driver_path: Path = Field(default_factory=_default_driver_path)
    default_window_size: WindowSize = Field(default=WindowSize.maximise)

    # --- Logging ---
    log_level: str = Field(default="INFO")
    log_format: Optional[str] = Field(default=None)

    @field_validator("grid_url")
    @classmethod
    def _validate_grid_url(cls, v: str) -> str:
        v = str(v).strip()
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("grid_url inválida (esperado: http(s)://host:puerto/ruta)")
        return v

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, v: str) -> str:
        v = str(v).strip().upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"log_level inválido: {v}")
        return v

    @field_validator("log_format")
    @classmethod
    def _normalize_log_format(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = str(v).strip().lower()
        if v not in ("json", "console"):
            raise ValueError("log_format debe ser 'json' o 'console'")
        return v

    @property
    def json_logs(self) -> Optional[bool]:
        """None deja que logging_config lo detecte según el TTY."""
        if self.log_format is None:
            return None
        return self.log_format == "json"
