from __future__ import annotations

import time
from pathlib import Path
from typing import Optional, Union

from selenium import webdriver
from selenium.webdriver import ChromeOptions, EdgeOptions, FirefoxOptions, IeOptions, SafariOptions
from selenium.webdriver.common.options import ArgOptions
from selenium.webdriver.remote.client_config import ClientConfig

from webdriver_factory.config.settings import FactorySettings
from webdriver_factory.crosscutting.exceptions import (
    UnsupportedBrowserError,
    UnsupportedConfigurationError,
    UnsupportedPlatformError,
)
from webdriver_factory.crosscutting.logging_config import get_logger
from webdriver_factory.crosscutting.metrics import (
    driver_init_duration_seconds,
    driver_init_failures_total,
    drivers_created_total,
)
from webdriver_factory.domain.models.driver_models import (
    LOCAL_PLATFORM_REQUIREMENTS,
    Browser,
    DriverMode,
    PlatformType,
    WindowSize,
)
from webdriver_factory.domain.ports.driver_port import CustomWebDriver, DriverOptionsFactory

from .browser_utils import (
    describe_host_platform,
    detect_host_platform,
    is_headless_options,
    resolve_driver_executable,
)
from .custom_drivers import LocalWebDriver, RemoteWebDriver
from .driver_options import DefaultDriverOptionsFactory
from .window_size import apply_window_size

log = get_logger("driver_factory")

# (clase de driver, clase de service) dentro de selenium.webdriver
_LOCAL_DRIVERS = {
    Browser.chrome: ("Chrome", "ChromeService"),
    Browser.firefox: ("Firefox", "FirefoxService"),
    Browser.internet_explorer: ("Ie", "IeService"),
    Browser.edge: ("Edge", "EdgeService"),
    Browser.safari: ("Safari", "SafariService"),
}

# EdgeOptions antes que ChromeOptions: ambas derivan de ChromiumOptions
_OPTIONS_TYPES = (
    (EdgeOptions, Browser.edge),
    (ChromeOptions, Browser.chrome),
    (FirefoxOptions, Browser.firefox),
    (IeOptions, Browser.internet_explorer),
    (SafariOptions, Browser.safari),
)


def browser_for_options(options: ArgOptions) -> Optional[Browser]:
    """Infiere el navegador a partir del tipo de opciones de Selenium."""
    for options_type, browser in _OPTIONS_TYPES:
        if isinstance(options, options_type):
            return browser
    return None


def _coerce_browser(browser: Union[Browser, str, None]) -> Optional[Browser]:
    try:
        return Browser(browser)
    except ValueError:
        return None


class WebDriverFactory:
    """
    Crea handles de WebDriver locales o remotos ya configurados.

    Valida cada pedido contra la matriz de soporte (headless sólo en
    Chrome/Firefox, Safari sólo en macOS, Edge/IE sólo en Windows),
    construye la sesión con Selenium y aplica la política de tamaño de
    ventana antes de devolver el handle.

    No guarda referencias a los handles que produce: el caller es quien
    debe cerrarlos con `quit()`. Los errores de Selenium al construir la
    sesión (binario ausente, grid inalcanzable) se propagan sin envolver
    y sin reintentos.
    """

    def __init__(
        self,
        settings: Optional[FactorySettings] = None,
        options_factory: Optional[DriverOptionsFactory] = None,
        *,
        host_platform: Optional[PlatformType] = None,
    ) -> None:
        self.settings = settings or FactorySettings()
        self.options_factory = options_factory or DefaultDriverOptionsFactory()
        self.host_platform = host_platform or detect_host_platform()

    @property
    def grid_url(self) -> str:
        return self.settings.grid_url

    @property
    def driver_path(self) -> Path:
        return self.settings.driver_path

    # ------------------------------------------------------------------ local

    def get_local_driver(
        self,
        browser: Union[Browser, str],
        headless: bool = False,
        window_size: Optional[WindowSize] = None,
    ) -> CustomWebDriver:
        """
        Lanza un navegador local del tipo pedido con las opciones por defecto.

        Sin `window_size` se usa `settings.default_window_size` (maximizada).
        """
        kind = self._validate_request(browser, headless, DriverMode.local)
        if window_size is None:
            window_size = self.settings.default_window_size
        options = self.options_factory.get_options(kind, headless, PlatformType.any)
        return self._create_local(kind, options, headless, window_size)

    def get_local_driver_from_options(
        self,
        options: ArgOptions,
        window_size: Optional[WindowSize] = None,
    ) -> CustomWebDriver:
        """
        Lanza un navegador local a partir de opciones ya construidas.

        El navegador se infiere del tipo de `options` y se aplica la misma
        matriz de soporte que en `get_local_driver`. Sin `window_size`,
        Safari se maximiza y el resto usa HD.
        """
        kind = browser_for_options(options)
        headless = is_headless_options(options)
        kind = self._validate_request(
            kind if kind is not None else type(options).__name__,
            headless,
            DriverMode.local,
        )
        if window_size is None:
            window_size = WindowSize.maximise if kind is Browser.safari else WindowSize.hd
        return self._create_local(kind, options, headless, window_size)

    # ------------------------------------------------------------------ remote

    def get_remote_driver(
        self,
        browser: Union[Browser, str],
        grid_url: Optional[str] = None,
        platform: PlatformType = PlatformType.any,
        headless: bool = False,
        window_size: WindowSize = WindowSize.hd,
    ) -> CustomWebDriver:
        """Pide una sesión al grid resolviendo las opciones con el options factory."""
        kind = self._validate_request(browser, headless, DriverMode.remote)
        options = self.options_factory.get_options(kind, headless, PlatformType(platform))
        return self.get_remote_driver_from_options(options, grid_url, window_size)

    def get_remote_driver_from_options(
        self,
        options: ArgOptions,
        grid_url: Optional[str] = None,
        window_size: WindowSize = WindowSize.hd,
    ) -> CustomWebDriver:
        """
        Abre una sesión en el grid con las opciones dadas.

        Sin validaciones propias: el grid decide si acepta las capabilities.
        Todas las sesiones remotas comparten el mismo timeout de comandos.
        """
        url = str(grid_url or self.settings.grid_url)
        kind = browser_for_options(options)
        label = kind.value if kind is not None else "unknown"

        log.info("remote_driver_requested", browser=label, grid_url=url, window_size=WindowSize(window_size).value)
        client_config = ClientConfig(remote_server_addr=url, timeout=self.settings.command_timeout)
        started = time.monotonic()
        try:
            driver = webdriver.Remote(command_executor=url, options=options, client_config=client_config)
        except Exception as e:
            driver_init_failures_total.labels(browser=label, mode=DriverMode.remote.value).inc()
            log.error("driver_init_failed", browser=label, mode=DriverMode.remote.value, grid_url=url, error=str(e))
            raise

        return self._finalize(RemoteWebDriver(driver, url), label, window_size, started)

    # ------------------------------------------------------------------ ventana

    def set_window_size(self, handle: CustomWebDriver, window_size: WindowSize) -> CustomWebDriver:
        return apply_window_size(handle, window_size)

    # ------------------------------------------------------------------ internals

    def _validate_request(
        self,
        browser: Union[Browser, str, None],
        headless: bool,
        mode: DriverMode,
    ) -> Browser:
        """
        Valida el pedido; gana la primera violación:
        headless no soportado -> plataforma local no soportada -> navegador desconocido.
        """
        kind = _coerce_browser(browser)
        name = kind.label if kind is not None else str(browser)

        if headless and (kind is None or not kind.supports_headless):
            log.warning("unsupported_request", reason="headless", browser=name, mode=mode.value)
            raise UnsupportedConfigurationError(
                f"Headless mode is not currently supported for {name}.",
                details={"browser": name, "headless": True, "mode": mode.value},
            )

        if mode is DriverMode.local and kind is not None:
            required = LOCAL_PLATFORM_REQUIREMENTS.get(kind)
            if required is not None and self.host_platform is not required:
                log.warning(
                    "unsupported_request",
                    reason="platform",
                    browser=name,
                    required_platform=required.value,
                    host_platform=self.host_platform.value,
                )
                raise UnsupportedPlatformError(
                    f"{name} is only available on {required.label}; "
                    f"it is not supported on {describe_host_platform(self.host_platform)}.",
                    details={
                        "browser": name,
                        "platform": required.value,
                        "host_platform": self.host_platform.value,
                    },
                )

        if kind is None:
            log.warning("unsupported_request", reason="browser", browser=name, mode=mode.value)
            raise UnsupportedBrowserError(
                f"{name} is not currently supported.",
                details={"browser": name, "mode": mode.value},
            )
        return kind

    def _build_service(self, browser: Browser):
        _, service_name = _LOCAL_DRIVERS[browser]
        service_cls = getattr(webdriver, service_name)
        executable = resolve_driver_executable(self.driver_path, browser)
        if executable is None:
            return service_cls()
        return service_cls(executable_path=str(executable))

    def _create_local(
        self,
        browser: Browser,
        options: ArgOptions,
        headless: bool,
        window_size: WindowSize,
    ) -> CustomWebDriver:
        driver_name, _ = _LOCAL_DRIVERS[browser]
        log.info(
            "local_driver_requested",
            browser=browser.value,
            headless=headless,
            window_size=WindowSize(window_size).value,
        )
        started = time.monotonic()
        try:
            driver_cls = getattr(webdriver, driver_name)
            driver = driver_cls(options=options, service=self._build_service(browser))
        except Exception as e:
            driver_init_failures_total.labels(browser=browser.value, mode=DriverMode.local.value).inc()
            log.error("driver_init_failed", browser=browser.value, mode=DriverMode.local.value, error=str(e))
            raise

        return self._finalize(LocalWebDriver(driver), browser.value, window_size, started)

    def _finalize(
        self,
        handle: CustomWebDriver,
        browser_label: str,
        window_size: WindowSize,
        started: float,
    ) -> CustomWebDriver:
        """Aplica la ventana; si falla, cierra la sesión recién creada y propaga."""
        mode = handle.mode.value
        try:
            apply_window_size(handle, window_size)
        except Exception as e:
            log.error("driver_init_failed", browser=browser_label, mode=mode, stage="window_size", error=str(e))
            driver_init_failures_total.labels(browser=browser_label, mode=mode).inc()
            handle.quit()
            raise

        driver_init_duration_seconds.labels(browser=browser_label, mode=mode).observe(time.monotonic() - started)
        drivers_created_total.labels(browser=browser_label, mode=mode).inc()
        log.info("driver_initialized", browser=browser_label, mode=mode, window_size=WindowSize(window_size).value)
        return handle
