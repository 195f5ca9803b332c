from __future__ import annotations

from typing import Callable, Dict

from selenium.webdriver import ChromeOptions, EdgeOptions, FirefoxOptions, IeOptions, SafariOptions
from selenium.webdriver.common.options import ArgOptions

from webdriver_factory.crosscutting.exceptions import UnsupportedBrowserError
from webdriver_factory.domain.models.driver_models import Browser, PlatformType


# platformName W3C por plataforma; `any` deja que el grid elija
_PLATFORM_NAMES = {
    PlatformType.windows: "windows",
    PlatformType.linux: "linux",
    PlatformType.mac: "mac",
}

_CHROMIUM_FLAGS = [
    "--no-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
    "--disable-extensions",
    "--no-first-run",
    "--no-default-browser-check",
    "--disable-features=TranslateUI",
]


def _apply_platform(opts: ArgOptions, platform: PlatformType) -> None:
    name = _PLATFORM_NAMES.get(platform)
    if name:
        opts.platform_name = name


class DefaultDriverOptionsFactory:
    """
    Opciones por defecto para los cinco navegadores soportados.

    No lanza efectos colaterales: sólo prepara objetos de construcción.
    El modo headless sólo se aplica a Chrome y Firefox; validar la
    combinación es responsabilidad del factory de drivers.
    """

    def __init__(self, *, page_load_strategy: str = "normal") -> None:
        self.page_load_strategy = page_load_strategy
        self._builders: Dict[Browser, Callable[[bool, PlatformType], ArgOptions]] = {
            Browser.chrome: self.get_chrome_options,
            Browser.firefox: self.get_firefox_options,
            Browser.internet_explorer: self.get_internet_explorer_options,
            Browser.edge: self.get_edge_options,
            Browser.safari: self.get_safari_options,
        }

    def get_options(
        self,
        browser: Browser,
        headless: bool = False,
        platform: PlatformType = PlatformType.any,
    ) -> ArgOptions:
        try:
            builder = self._builders[Browser(browser)]
        except (KeyError, ValueError):
            raise UnsupportedBrowserError(
                f"{browser} is not currently supported.",
                details={"browser": str(browser)},
            ) from None
        return builder(headless, platform)

    def get_chrome_options(self, headless: bool = False, platform: PlatformType = PlatformType.any) -> ChromeOptions:
        opts = ChromeOptions()
        for f in _CHROMIUM_FLAGS:
            opts.add_argument(f)
        if headless:
            opts.add_argument("--headless=new")

        prefs = {
            "profile.default_content_setting_values.notifications": 2,
            "credentials_enable_service": False,
            "profile.password_manager_enabled": False,
        }
        opts.add_experimental_option("prefs", prefs)
        opts.page_load_strategy = self.page_load_strategy
        _apply_platform(opts, platform)
        return opts

    def get_firefox_options(self, headless: bool = False, platform: PlatformType = PlatformType.any) -> FirefoxOptions:
        opts = FirefoxOptions()
        if headless:
            opts.add_argument("-headless")
        # Sin notificaciones ni pantalla de bienvenida
        opts.set_preference("dom.webnotifications.enabled", False)
        opts.set_preference("browser.aboutwelcome.enabled", False)
        opts.page_load_strategy = self.page_load_strategy
        _apply_platform(opts, platform)
        return opts

    def get_internet_explorer_options(self, headless: bool = False, platform: PlatformType = PlatformType.any) -> IeOptions:
        opts = IeOptions()
        opts.ignore_zoom_level = True
        opts.ensure_clean_session = True
        opts.page_load_strategy = self.page_load_strategy
        _apply_platform(opts, platform)
        return opts

    def get_edge_options(self, headless: bool = False, platform: PlatformType = PlatformType.any) -> EdgeOptions:
        opts = EdgeOptions()
        for f in _CHROMIUM_FLAGS:
            opts.add_argument(f)
        opts.page_load_strategy = self.page_load_strategy
        _apply_platform(opts, platform)
        return opts

    def get_safari_options(self, headless: bool = False, platform: PlatformType = PlatformType.any) -> SafariOptions:
        opts = SafariOptions()
        opts.page_load_strategy = self.page_load_strategy
        _apply_platform(opts, platform)
        return opts
