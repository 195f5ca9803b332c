"""Excepciones centralizadas del factory de WebDrivers."""
from __future__ import annotations

from typing import Optional, Dict, Any


class WebDriverFactoryError(Exception):
    """
    Excepción base para todos los errores del factory.

    Atributos:
        error_code: Código de error único para el cliente
        message: Mensaje de error legible
        details: Información adicional (navegador, plataforma, etc.)
        cause: Excepción original que causó el error (opcional)

    Los fallos de construcción del propio Selenium (binario ausente, grid
    inalcanzable, sesión rechazada) NO se envuelven: se propagan tal cual.
    """

    error_code: str = "WEBDRIVER_FACTORY_ERROR"

    def __init__(
        self,
        message: str,
        *,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.error_code
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convierte la excepción a un diccionario (logs, reportes)."""
        result = {
            "error": {
                "code": self.error_code,
                "message": self.message,
            }
        }
        if self.details:
            result["error"]["details"] = self.details
        return result


class UnsupportedBrowserError(WebDriverFactoryError):
    """El navegador pedido no tiene camino de construcción local ni remoto."""
    error_code = "UNSUPPORTED_BROWSER"


class UnsupportedPlatformError(WebDriverFactoryError):
    """El navegador no está disponible en el sistema operativo actual o pedido."""
    error_code = "UNSUPPORTED_PLATFORM"


class UnsupportedConfigurationError(WebDriverFactoryError):
    """Combinación de opciones inválida (p. ej. headless en Edge)."""
    error_code = "UNSUPPORTED_CONFIGURATION"


class DriverNotInitializedError(WebDriverFactoryError):
    """Se pidió el driver de un handle que nunca recibió uno."""
    error_code = "DRIVER_NOT_INITIALIZED"
