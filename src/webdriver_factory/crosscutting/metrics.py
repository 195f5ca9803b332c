# -*- coding: utf-8 -*-
"""
Métricas Prometheus del factory de WebDrivers.

Expone:
- Drivers creados por navegador y modo
- Fallos de construcción
- Duración de la construcción (proceso local o sesión en el grid)
- Fallbacks de posicionamiento de ventana
"""
from __future__ import annotations

from prometheus_client import Counter, Histogram, generate_latest


# Drivers entregados al caller
drivers_created_total = Counter(
    "webdriver_drivers_created_total",
    "Total WebDriver handles created",
    ["browser", "mode"]
)

# Fallos del colaborador (Selenium) al construir la sesión
driver_init_failures_total = Counter(
    "webdriver_driver_init_failures_total",
    "Total WebDriver construction failures",
    ["browser", "mode"]
)

# Duración de la construcción de la sesión
driver_init_duration_seconds = Histogram(
    "webdriver_driver_init_duration_seconds",
    "WebDriver construction duration in seconds",
    ["browser", "mode"],
    buckets=(0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0)
)

# Veces que set_window_position falló y sólo se fijó el tamaño
window_position_fallbacks_total = Counter(
    "webdriver_window_position_fallbacks_total",
    "Window position failures recovered by a size-only retry",
)


def get_metrics() -> bytes:
    """Genera las métricas en formato de exposición Prometheus."""
    return generate_latest()