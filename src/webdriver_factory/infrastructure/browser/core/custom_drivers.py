from __future__ import annotations

import base64
from abc import ABC, abstractmethod
from pathlib import Path
from types import TracebackType
from typing import Optional, Type, Union

from selenium.webdriver.remote.command import Command
from selenium.webdriver.remote.webdriver import WebDriver

from webdriver_factory.crosscutting.exceptions import DriverNotInitializedError
from webdriver_factory.crosscutting.logging_config import get_logger
from webdriver_factory.domain.models.driver_models import DriverMode

from .browser_utils import safe_quit

log = get_logger("custom_drivers")


class _BaseCustomWebDriver(ABC):
    """Comportamiento común de los handles local y remoto."""

    mode: DriverMode

    def __init__(self, driver: Optional[WebDriver]) -> None:
        self._driver = driver

    def get_driver(self) -> WebDriver:
        if self._driver is None:
            raise DriverNotInitializedError(
                f"The {self.mode.value} driver has not been initialized yet",
                details={"mode": self.mode.value},
            )
        return self._driver

    @abstractmethod
    def get_screenshot(self) -> bytes:
        """Captura PNG de la página actual."""
        raise NotImplementedError

    def save_screenshot(self, path: Union[str, Path]) -> Path:
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(self.get_screenshot())
        return target

    def quit(self) -> None:
        if self._driver is None:
            return
        driver, self._driver = self._driver, None
        log.info("driver_quit", mode=self.mode.value)
        safe_quit(driver)

    def __enter__(self):
        return self

    def __exit__(
        self,
        _exc_type: Optional[Type[BaseException]],
        _exc_val: Optional[BaseException],
        _exc_tb: Optional[TracebackType],
    ) -> None:
        self.quit()


class LocalWebDriver(_BaseCustomWebDriver):
    """Handle sobre un navegador lanzado en este proceso (Chrome, Firefox, ...)."""

    mode = DriverMode.local

    def get_screenshot(self) -> bytes:
        return self.get_driver().get_screenshot_as_png()


class RemoteWebDriver(_BaseCustomWebDriver):
    """
    Handle sobre una sesión alojada en un Selenium Grid.

    La captura ejecuta el comando `screenshot` del protocolo directamente y
    decodifica el base64 de la respuesta, sin pasar por
    `get_screenshot_as_png()` del driver remoto: no todos los backends de
    grid devuelven la codificación que ese método espera.
    """

    mode = DriverMode.remote

    def __init__(self, driver: Optional[WebDriver], grid_url: str) -> None:
        super().__init__(driver)
        self.grid_url = grid_url

    def get_screenshot(self) -> bytes:
        response = self.get_driver().execute(Command.SCREENSHOT)
        return base64.b64decode(response["value"])
