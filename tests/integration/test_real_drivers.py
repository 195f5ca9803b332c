"""
Tests de integración con navegadores reales.

Lanzan Chrome/Firefox locales (Selenium Manager resuelve los drivers) y,
si WEBDRIVER_GRID_URL apunta a un grid vivo, sesiones remotas.

Se saltan salvo que WEBDRIVER_INTEGRATION=1.
"""
from __future__ import annotations

import os

import pytest

from webdriver_factory import (
    Browser,
    FactorySettings,
    PlatformType,
    RemoteWebDriver,
    UnsupportedConfigurationError,
    UnsupportedPlatformError,
    WebDriverFactory,
    WindowSize,
)
from webdriver_factory.infrastructure.browser import detect_host_platform

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        os.getenv("WEBDRIVER_INTEGRATION") != "1",
        reason="requiere navegadores reales (WEBDRIVER_INTEGRATION=1)",
    ),
]

EXAMPLE_URL = "https://example.com/"
EXAMPLE_TITLE = "Example Domain"


@pytest.fixture(scope="module")
def factory() -> WebDriverFactory:
    return WebDriverFactory(FactorySettings())


@pytest.fixture
def handles():
    """Cierra al final todos los handles creados por el test."""
    created = []
    yield created
    for handle in created:
        handle.quit()


@pytest.mark.parametrize("browser", [Browser.firefox, Browser.chrome])
def test_local_driver_loads_example(factory, handles, browser):
    handle = factory.get_local_driver(browser, headless=True, window_size=WindowSize.unchanged)
    handles.append(handle)

    driver = handle.get_driver()
    driver.get(EXAMPLE_URL)

    assert driver.title == EXAMPLE_TITLE


def test_headless_firefox_hd(factory, handles):
    handle = factory.get_local_driver(Browser.firefox, headless=True, window_size=WindowSize.hd)
    handles.append(handle)

    driver = handle.get_driver()
    driver.get(EXAMPLE_URL)

    assert driver.title == EXAMPLE_TITLE
    assert driver.get_window_size() == {"width": 1366, "height": 768}


def test_headless_chrome_fhd(factory, handles):
    handle = factory.get_local_driver(Browser.chrome, headless=True, window_size=WindowSize.fhd)
    handles.append(handle)

    size = handle.get_driver().get_window_size()

    assert (size["width"], size["height"]) == (1920, 1080)


@pytest.mark.parametrize("browser", [Browser.chrome, Browser.firefox])
def test_local_screenshot_is_png(factory, handles, browser):
    handle = factory.get_local_driver(browser, headless=True, window_size=WindowSize.hd)
    handles.append(handle)
    handle.get_driver().get(EXAMPLE_URL)

    screenshot = handle.get_screenshot()

    assert screenshot.startswith(b"\x89PNG")


@pytest.mark.parametrize("browser", [Browser.edge, Browser.internet_explorer, Browser.safari])
def test_unsupported_headless(factory, browser):
    with pytest.raises(UnsupportedConfigurationError, match=f"Headless mode is not currently supported for {browser.label}."):
        factory.get_local_driver(browser, headless=True)


@pytest.mark.skipif(detect_host_platform() is not PlatformType.linux, reason="sólo en Linux")
@pytest.mark.parametrize("browser", [Browser.edge, Browser.internet_explorer, Browser.safari])
def test_unsupported_platform_on_linux(factory, browser):
    with pytest.raises(UnsupportedPlatformError, match="is only available on"):
        factory.get_local_driver(browser)


@pytest.mark.skipif(not os.getenv("WEBDRIVER_GRID_URL"), reason="requiere un Selenium Grid (WEBDRIVER_GRID_URL)")
@pytest.mark.parametrize("browser", [Browser.chrome, Browser.firefox])
def test_remote_driver(factory, handles, browser):
    handle = factory.get_remote_driver(browser, platform=PlatformType.any)
    handles.append(handle)

    assert isinstance(handle, RemoteWebDriver)
    assert handle.grid_url == factory.grid_url

    driver = handle.get_driver()
    driver.get(EXAMPLE_URL)

    assert driver.title == EXAMPLE_TITLE
    assert handle.get_screenshot().startswith(b"\x89PNG")
