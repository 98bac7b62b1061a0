"""
logger.py — Logging para guidepages usando Rich + archivo.

Dual output:
- Rich console: colores para uso interactivo y para los logs de CI
- Archivo rotativo: logs/guidepages.log para revisar despliegues viejos

Uso:
    from guidepages.utils.logger import get_logger, console
    logger = get_logger("guidepages.deploy")
    logger.info("Publicando documentación...")
    logger.success("No error in the documentation deployment")
    logger.error("git push falló")
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

# Dentro de pytest no se escriben logs a disco
_in_pytest = "pytest" in sys.modules or "PYTEST_CURRENT_TEST" in os.environ

guide_theme = Theme({
    "info": "cyan",
    "success": "bold green",
    "warning": "bold yellow",
    "error": "bold red",
    "step": "bold magenta",
})

# Consola global — se usa en todo el proyecto
console = Console(theme=guide_theme)

# ================================================================
# File logging setup
# ================================================================

_file_logger: logging.Logger | None = None


def _setup_file_logger() -> logging.Logger:
    """Configura el logger de archivo con rotacion."""
    global _file_logger
    if _file_logger is not None:
        return _file_logger

    # No crear logs en pytest
    if _in_pytest:
        _file_logger = logging.getLogger("guidepages.null")
        _file_logger.addHandler(logging.NullHandler())
        return _file_logger

    log_dir = Path("logs")
    log_dir.mkdir(exist_ok=True)

    _file_logger = logging.getLogger("guidepages.file")
    _file_logger.setLevel(logging.DEBUG)

    if not _file_logger.handlers:
        handler = RotatingFileHandler(
            log_dir / "guidepages.log",
            maxBytes=5 * 1024 * 1024,  # 5 MB
            backupCount=5,
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        _file_logger.addHandler(handler)

    return _file_logger


class GuideLogger:
    """
    Logger que escribe en la consola Rich y en el archivo rotativo.

    Los mensajes se escapan antes de pasar por Rich: los errores de
    git suelen traer corchetes que Rich interpretaría como markup.

    Args:
        name: Nombre del módulo (ej: "guidepages.deploy")
    """

    def __init__(self, name: str):
        self._name = name
        self._file = _setup_file_logger()

    def info(self, message: str) -> None:
        """Mensaje informativo (cyan)."""
        console.print(f"[info]i  {escape(message)}[/info]")
        self._file.info(f"[{self._name}] {message}")

    def success(self, message: str) -> None:
        """Mensaje de éxito (verde)."""
        console.print(f"[success]\\[OK] {escape(message)}[/success]")
        self._file.info(f"[{self._name}] OK: {message}")

    def warning(self, message: str) -> None:
        """Mensaje de advertencia (amarillo)."""
        console.print(f"[warning]\\[!] {escape(message)}[/warning]")
        self._file.warning(f"[{self._name}] {message}")

    def error(self, message: str) -> None:
        """Mensaje de error (rojo)."""
        console.print(f"[error]\\[X] {escape(message)}[/error]")
        self._file.error(f"[{self._name}] {message}")

    def step(self, number: int, total: int, message: str) -> None:
        """Mensaje de paso en un proceso."""
        console.print(f"[step]  \\[{number}/{total}] {escape(message)}[/step]")
        self._file.info(f"[{self._name}] [{number}/{total}] {message}")


def get_logger(name: str = "guidepages") -> GuideLogger:
    """
    Obtiene un logger para el módulo especificado.

    Args:
        name: Nombre del módulo.

    Returns:
        GuideLogger configurado.
    """
    return GuideLogger(name)
