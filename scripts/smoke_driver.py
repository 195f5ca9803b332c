#!/usr/bin/env python3
"""
Smoke test manual de un WebDriver.

Lanza un navegador local (o pide una sesión al grid), navega a una URL,
muestra el título y, opcionalmente, guarda una captura de pantalla.

Ejemplos:
    python scripts/smoke_driver.py firefox --headless --window-size hd
    python scripts/smoke_driver.py chrome --remote --platform linux
    python scripts/smoke_driver.py firefox --headless --metrics
"""

import argparse
import sys

from selenium.common.exceptions import WebDriverException

from webdriver_factory import (
    Browser,
    FactorySettings,
    PlatformType,
    WebDriverFactory,
    WebDriverFactoryError,
    WindowSize,
)
from webdriver_factory.crosscutting.logging_config import (
    bind_driver_context,
    clear_driver_context,
    configure_structured_logging,
)
from webdriver_factory.crosscutting.metrics import get_metrics


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Lanza un WebDriver y carga una página")
    parser.add_argument("browser", choices=[b.value for b in Browser])
    parser.add_argument("--url", default="https://example.com/")
    parser.add_argument("--headless", action="store_true")
    parser.add_argument("--window-size", choices=[w.value for w in WindowSize], default=None)
    parser.add_argument("--remote", action="store_true", help="Usar el Selenium Grid en lugar de un driver local")
    parser.add_argument("--grid-url", default=None)
    parser.add_argument("--platform", choices=[p.value for p in PlatformType], default=PlatformType.any.value)
    parser.add_argument("--screenshot", default=None, help="Ruta donde guardar la captura PNG")
    parser.add_argument("--metrics", action="store_true", help="Imprimir las métricas Prometheus al terminar")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    settings = FactorySettings()
    configure_structured_logging(level=settings.log_level, json_format=settings.json_logs)

    factory = WebDriverFactory(settings)
    browser = Browser(args.browser)
    bind_driver_context(browser=browser.value, mode="remote" if args.remote else "local")

    try:
        if args.remote:
            handle = factory.get_remote_driver(
                browser,
                grid_url=args.grid_url,
                platform=PlatformType(args.platform),
                headless=args.headless,
                window_size=WindowSize(args.window_size or WindowSize.hd.value),
            )
        else:
            window_size = WindowSize(args.window_size) if args.window_size else None
            handle = factory.get_local_driver(browser, headless=args.headless, window_size=window_size)
    except WebDriverFactoryError as e:
        print(f"❌ Pedido no soportado: {e}")
        return 2
    except WebDriverException as e:
        print(f"❌ No se pudo crear el driver: {e}")
        return 1

    try:
        with handle:
            driver = handle.get_driver()
            driver.get(args.url)
            size = driver.get_window_size()
            print(f"✓ Título: {driver.title}")
            print(f"✓ Ventana: {size['width']}x{size['height']}")
            if args.screenshot:
                path = handle.save_screenshot(args.screenshot)
                print(f"✓ Captura guardada en {path}")
    finally:
        clear_driver_context()

    if args.metrics:
        print(get_metrics().decode("utf-8"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
