"""
Configuración de logging.

Los módulos usan ``logging.getLogger(__name__)``; la CLI llama a
``setup_logger`` una vez al arrancar.
"""

import logging

from floodpilot.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(name: str = "floodpilot", level: str | None = None) -> logging.Logger:
    """
    Configura el logger raíz del paquete con un handler de consola.

    Args:
        name: Nombre del logger
        level: Nivel de logging (default: Settings.log_level)

    Returns:
        Logger configurado
    """
    logger = logging.getLogger(name)

    if level is None:
        level = Settings().log_level
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    return logger
