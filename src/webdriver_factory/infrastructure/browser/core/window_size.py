from __future__ import annotations

from selenium.common.exceptions import WebDriverException

from webdriver_factory.crosscutting.logging_config import get_logger
from webdriver_factory.crosscutting.metrics import window_position_fallbacks_total
from webdriver_factory.domain.models.driver_models import WindowSize
from webdriver_factory.domain.ports.driver_port import CustomWebDriver

log = get_logger("window_size")


def apply_window_size(handle: CustomWebDriver, window_size: WindowSize) -> CustomWebDriver:
    """
    Aplica un tamaño de ventana habitual al driver del handle y retorna el mismo handle.

    - unchanged: no toca la ventana
    - maximise: maximiza
    - hd / fhd: mueve la ventana al origen y fija 1366x768 / 1920x1080.
      Si mover la ventana falla (headless, algunos grids), se fija sólo
      el tamaño. Un fallo al fijar el tamaño se propaga.
    """
    window_size = WindowSize(window_size)
    if window_size is WindowSize.unchanged:
        return handle

    driver = handle.get_driver()
    if window_size is WindowSize.maximise:
        driver.maximize_window()
        return handle

    width, height = window_size.dimensions
    try:
        driver.set_window_position(0, 0)
    except WebDriverException as e:
        log.debug("window_position_fallback", size=window_size.value, error=str(e))
        window_position_fallbacks_total.inc()
    driver.set_window_size(width, height)
    return handle
