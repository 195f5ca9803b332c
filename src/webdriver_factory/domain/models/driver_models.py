from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple


class Browser(str, Enum):
    chrome = "chrome"
    firefox = "firefox"
    internet_explorer = "internet_explorer"
    edge = "edge"
    safari = "safari"

    @property
    def label(self) -> str:
        """Nombre legible, usado en mensajes de error."""
        return _BROWSER_LABELS[self]

    @property
    def supports_headless(self) -> bool:
        return self in HEADLESS_BROWSERS


class PlatformType(str, Enum):
    """
    Sistema operativo. Para drivers remotos selecciona el `platformName`
    de las capabilities; para drivers locales describe el host.
    """
    any = "any"
    windows = "windows"
    linux = "linux"
    mac = "mac"

    @property
    def label(self) -> str:
        return _PLATFORM_LABELS[self]


class DriverMode(str, Enum):
    local = "local"
    remote = "remote"


class WindowSize(str, Enum):
    """
    Tamaños de ventana habituales: sin cambios, maximizada, 768p y 1080p.
    """
    unchanged = "unchanged"
    maximise = "maximise"
    hd = "hd"
    fhd = "fhd"

    @property
    def dimensions(self) -> Optional[Tuple[int, int]]:
        """(ancho, alto) en píxeles, o None si la política no fija geometría."""
        return _WINDOW_DIMENSIONS.get(self)


HEADLESS_BROWSERS = frozenset({Browser.chrome, Browser.firefox})

# Navegadores locales atados a un sistema operativo concreto
LOCAL_PLATFORM_REQUIREMENTS = {
    Browser.safari: PlatformType.mac,
    Browser.edge: PlatformType.windows,
    Browser.internet_explorer: PlatformType.windows,
}

_BROWSER_LABELS = {
    Browser.chrome: "Chrome",
    Browser.firefox: "Firefox",
    Browser.internet_explorer: "Internet Explorer",
    Browser.edge: "Edge",
    Browser.safari: "Safari",
}

_PLATFORM_LABELS = {
    PlatformType.any: "any platform",
    PlatformType.windows: "Windows",
    PlatformType.linux: "Linux",
    PlatformType.mac: "macOS",
}

_WINDOW_DIMENSIONS = {
    WindowSize.hd: (1366, 768),
    WindowSize.fhd: (1920, 1080),
}
