"""
Core del módulo de browser:
contiene el factory de drivers, los handles local/remoto, las opciones
por defecto y la política de tamaño de ventana.
"""

from .core.browser_utils import (
    describe_host_platform,
    detect_host_platform,
    is_headless_options,
    resolve_driver_executable,
    safe_quit,
)
from .core.custom_drivers import LocalWebDriver, RemoteWebDriver
from .core.driver_factory import WebDriverFactory, browser_for_options
from .core.driver_options import DefaultDriverOptionsFactory
from .core.window_size import apply_window_size

__all__ = [
    # browser_utils
    "describe_host_platform",
    "detect_host_platform",
    "is_headless_options",
    "resolve_driver_executable",
    "safe_quit",
    # custom_drivers
    "LocalWebDriver",
    "RemoteWebDriver",
    # driver_factory
    "WebDriverFactory",
    "browser_for_options",
    # driver_options
    "DefaultDriverOptionsFactory",
    # window_size
    "apply_window_size",
]
