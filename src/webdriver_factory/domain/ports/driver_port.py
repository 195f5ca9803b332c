from __future__ import annotations

from pathlib import Path
from typing import Protocol, Union, runtime_checkable

from selenium.webdriver.common.options import ArgOptions
from selenium.webdriver.remote.webdriver import WebDriver

from webdriver_factory.domain.models.driver_models import Browser, DriverMode, PlatformType


# =========================
# Puerto: CustomWebDriver
# =========================

@runtime_checkable
class CustomWebDriver(Protocol):
    """
    Handle uniforme sobre una sesión de Selenium, local o remota.

    Cada handle es dueño de exactamente un WebDriver durante toda su vida y
    nunca lo comparte. El caller debe invocar `quit()` una vez al terminar
    (o usar el handle como context manager).

    La política de tamaño de ventana y la captura de pantalla se escriben
    una sola vez contra esta interfaz, sin preguntar por la variante.
    """

    mode: DriverMode

    def get_driver(self) -> WebDriver:
        """
        Retorna el WebDriver subyacente.

        Raises:
            DriverNotInitializedError: Si el handle no tiene driver
        """
        ...

    def get_screenshot(self) -> bytes:
        """Captura la pantalla actual como bytes PNG."""
        ...

    def save_screenshot(self, path: Union[str, Path]) -> Path:
        """Guarda la captura en `path` (crea directorios) y retorna la ruta."""
        ...

    def quit(self) -> None:
        """Termina la sesión. Llamadas posteriores no hacen nada."""
        ...


# =========================
# Puerto: DriverOptionsFactory
# =========================

@runtime_checkable
class DriverOptionsFactory(Protocol):
    """
    Construye el objeto de opciones/capabilities que entiende Selenium.

    El factory de drivers lo trata como opaco: sólo lo pasa al constructor
    del driver local o remoto.
    """

    def get_options(
        self,
        browser: Browser,
        headless: bool = False,
        platform: PlatformType = PlatformType.any,
    ) -> ArgOptions:
        ...
