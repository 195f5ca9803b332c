from __future__ import annotations

import logging
import platform
from pathlib import Path
from typing import Optional, Union

from selenium.webdriver.common.options import ArgOptions

from webdriver_factory.domain.models.driver_models import Browser, PlatformType

logger = logging.getLogger(__name__)


# ------------------------------ helpers genéricos ------------------------------

_DRIVER_EXECUTABLES = {
    Browser.chrome: "chromedriver",
    Browser.firefox: "geckodriver",
    Browser.internet_explorer: "IEDriverServer",
    Browser.edge: "msedgedriver",
}


def detect_host_platform() -> PlatformType:
    """Sistema operativo del host (platform.system() devuelve 'Darwin' en macOS)."""
    system = platform.system().lower()
    if system == "darwin":
        return PlatformType.mac
    if system == "windows":
        return PlatformType.windows
    if system == "linux":
        return PlatformType.linux
    return PlatformType.any


def describe_host_platform(host: PlatformType) -> str:
    """Nombre legible del host para mensajes de error."""
    if host is not PlatformType.any:
        return host.label
    return platform.system() or "an unrecognised operating system"


def resolve_driver_executable(driver_path: Union[str, Path, None], browser: Browser) -> Optional[Path]:
    """
    Busca el binario del driver de `browser` dentro de `driver_path`.

    Retorna None si no está: en ese caso Selenium Manager lo resuelve solo.
    Safari siempre usa el safaridriver del sistema.
    """
    name = _DRIVER_EXECUTABLES.get(browser)
    if not name or not driver_path:
        return None
    base = Path(driver_path)
    for candidate in (base / name, base / f"{name}.exe"):
        if candidate.is_file():
            return candidate
    return None


def is_headless_options(options: ArgOptions) -> bool:
    """True si las opciones piden modo headless (Chromium: --headless[=new], Firefox: -headless)."""
    for arg in getattr(options, "arguments", None) or []:
        flag = str(arg).strip().lower()
        if flag in ("-headless", "--headless") or flag.startswith("--headless="):
            return True
    return False


def safe_quit(driver) -> None:
    """Cierra el driver si está vivo (idempotente)."""
    if driver:
        try:
            driver.quit()
        except Exception:
            logger.debug("Error cerrando driver", exc_info=True)
