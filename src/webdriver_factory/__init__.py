"""webdriver_factory — Selenium WebDriver factory (local y Selenium Grid)."""

from webdriver_factory.config.settings import FactorySettings
from webdriver_factory.crosscutting.exceptions import (
    DriverNotInitializedError,
    UnsupportedBrowserError,
    UnsupportedConfigurationError,
    UnsupportedPlatformError,
    WebDriverFactoryError,
)
from webdriver_factory.domain.models.driver_models import Browser, DriverMode, PlatformType, WindowSize
from webdriver_factory.domain.ports.driver_port import CustomWebDriver, DriverOptionsFactory
from webdriver_factory.infrastructure.browser import (
    DefaultDriverOptionsFactory,
    LocalWebDriver,
    RemoteWebDriver,
    WebDriverFactory,
    apply_window_size,
)

__all__ = [
    "Browser",
    "CustomWebDriver",
    "DefaultDriverOptionsFactory",
    "DriverMode",
    "DriverNotInitializedError",
    "DriverOptionsFactory",
    "FactorySettings",
    "LocalWebDriver",
    "PlatformType",
    "RemoteWebDriver",
    "UnsupportedBrowserError",
    "UnsupportedConfigurationError",
    "UnsupportedPlatformError",
    "WebDriverFactory",
    "WebDriverFactoryError",
    "WindowSize",
]
