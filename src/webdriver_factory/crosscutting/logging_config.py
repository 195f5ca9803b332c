# -*- coding: utf-8 -*-
"""
Configuración de logging estructurado con structlog.

- Formato legible (consola) en desarrollo, JSON cuando no hay TTY
  o LOG_FORMAT=json
- Contexto de sesión (browser, mode, grid_url) vía contextvars
- Loggers ruidosos de Selenium/urllib3 silenciados
"""
from __future__ import annotations

import os
import sys
import logging
from typing import Any, Dict, Optional
import structlog
from structlog.types import Processor


_NOISY_LOGGERS = (
    "selenium",
    "selenium.webdriver.remote.remote_connection",
    "selenium.webdriver.common.selenium_manager",
    "urllib3",
)


def _add_process_id(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    event_dict["pid"] = os.getpid()
    return event_dict


def configure_structured_logging(
    level: str = "INFO",
    json_format: Optional[bool] = None,
    include_process_id: bool = True,
) -> None:
    """
    Configura structlog + logging estándar.

    Args:
        level: Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: True fuerza JSON; None lo detecta
                     (JSON si LOG_FORMAT=json o si stdout no es TTY)
        include_process_id: Incluir el PID (útil con varios navegadores en paralelo)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if json_format is None:
        json_format = (
            os.getenv("LOG_FORMAT", "").lower() == "json"
            or not sys.stdout.isatty()
        )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if include_process_id:
        processors.append(_add_process_id)

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    for noisy in _NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Obtiene un logger estructurado.

    Args:
        name: Nombre del logger (típicamente el del módulo)
    """
    return structlog.get_logger(name)


def bind_driver_context(
    browser: Optional[str] = None,
    mode: Optional[str] = None,
    grid_url: Optional[str] = None,
    **kwargs: Any,
) -> None:
    """
    Vincula el contexto de la sesión de navegador a todos los logs
    del contexto actual.
    """
    context: Dict[str, Any] = {}
    if browser:
        context["browser"] = browser
    if mode:
        context["mode"] = mode
    if grid_url:
        context["grid_url"] = grid_url
    context.update(kwargs)
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(**context)


def clear_driver_context() -> None:
    """Limpia el contexto vinculado."""
    structlog.contextvars.clear_contextvars()
