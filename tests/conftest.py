"""
Configuración global de pytest con fixtures compartidas.

Este archivo proporciona:
- Un WebDriver falso que recuerda la geometría de la ventana (sin navegador real)
- Patch del módulo selenium.webdriver usado por el factory
- Settings de test sin depender de variables de entorno
"""
from __future__ import annotations

import base64
from typing import Generator
from unittest.mock import MagicMock, patch

import pytest
from selenium.common.exceptions import WebDriverException

from webdriver_factory.config.settings import FactorySettings
from webdriver_factory.domain.models.driver_models import PlatformType
from webdriver_factory.infrastructure.browser.core.driver_factory import WebDriverFactory


PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-image-data"


class FakeWebDriver:
    """
    Doble de WebDriver con estado de ventana real.

    `position_fails=True` simula contextos (headless, algunos grids)
    donde mover la ventana no está soportado.
    """

    def __init__(self, *, position_fails: bool = False) -> None:
        self.position_fails = position_fails
        self.size = {"width": 800, "height": 600}
        self.position = {"x": 40, "y": 40}
        self.maximized = False
        self.quit_calls = 0
        self.executed: list = []
        self.title = "Example Domain"

    def maximize_window(self) -> None:
        self.maximized = True

    def set_window_position(self, x: int, y: int) -> None:
        if self.position_fails:
            raise WebDriverException("setting window position is not supported")
        self.position = {"x": x, "y": y}

    def get_window_position(self) -> dict:
        return dict(self.position)

    def set_window_size(self, width: int, height: int) -> None:
        self.size = {"width": width, "height": height}

    def get_window_size(self) -> dict:
        return dict(self.size)

    def get_screenshot_as_png(self) -> bytes:
        return PNG_BYTES

    def execute(self, command, params=None) -> dict:
        self.executed.append(command)
        return {"value": base64.b64encode(PNG_BYTES).decode("ascii")}

    def quit(self) -> None:
        self.quit_calls += 1


# =========================================================
# Fixtures: drivers falsos
# =========================================================

@pytest.fixture
def png_bytes() -> bytes:
    return PNG_BYTES


@pytest.fixture
def fake_driver() -> FakeWebDriver:
    return FakeWebDriver()


@pytest.fixture
def fake_driver_no_position() -> FakeWebDriver:
    return FakeWebDriver(position_fails=True)


@pytest.fixture
def mock_webdriver(fake_driver: FakeWebDriver) -> Generator[MagicMock, None, None]:
    """
    Patch de `selenium.webdriver` tal como lo ve el factory.

    Todas las clases de driver (Chrome, Firefox, Ie, Edge, Safari, Remote)
    devuelven `fake_driver`.
    """
    with patch("webdriver_factory.infrastructure.browser.core.driver_factory.webdriver") as mock:
        for name in ("Chrome", "Firefox", "Ie", "Edge", "Safari", "Remote"):
            getattr(mock, name).return_value = fake_driver
        yield mock


# =========================================================
# Fixture: Configuración de Test
# =========================================================

@pytest.fixture
def test_settings(tmp_path) -> FactorySettings:
    """Settings explícitas: grid local por defecto y driver_path temporal vacío."""
    return FactorySettings(
        grid_url="http://localhost:4444/wd/hub",
        driver_path=tmp_path,
        command_timeout=10.0,
    )


@pytest.fixture
def factory_for():
    """Construye un factory simulando el sistema operativo del host."""

    def _make(host_platform: PlatformType, settings: FactorySettings) -> WebDriverFactory:
        return WebDriverFactory(settings, host_platform=host_platform)

    return _make


@pytest.fixture
def linux_factory(factory_for, test_settings) -> WebDriverFactory:
    return factory_for(PlatformType.linux, test_settings)


@pytest.fixture
def windows_factory(factory_for, test_settings) -> WebDriverFactory:
    return factory_for(PlatformType.windows, test_settings)


@pytest.fixture
def mac_factory(factory_for, test_settings) -> WebDriverFactory:
    return factory_for(PlatformType.mac, test_settings)
