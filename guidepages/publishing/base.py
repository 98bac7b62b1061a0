"""
base.py — Interfaz base para publicadores.

Un publicador toma un directorio fuente, una lista de patrones y un
mensaje de commit, y deja esos archivos en la rama de hosting.
El secuenciador de deploy.py solo conoce esta interfaz, así que en
los tests se sustituye por un publicador falso.

Uso:
    from guidepages.publishing.base import Publisher, PublishRequest

    class MyPublisher(Publisher):
        def publish(self, request):
            ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class PublishRequest:
    """
    Pedido de publicación. Se crea para cada llamada y no se guarda.

    Campos:
        source_dir: Directorio de donde salen los archivos.
        patterns: Globs relativos a source_dir, en orden.
        message: Mensaje del commit en la rama de hosting.
        add: Si es True, se agrega a lo ya publicado en vez de reemplazarlo.
    """

    source_dir: Path
    patterns: list[str]
    message: str
    add: bool = False


@dataclass
class PublishResult:
    """
    Resultado de una publicación exitosa.

    Campos:
        files: Rutas relativas publicadas.
        commit: Hash del commit, o None si no había cambios.
        pushed: Si se hizo push al remoto.
    """

    files: list[str] = field(default_factory=list)
    commit: str | None = None
    pushed: bool = False


class PublishError(Exception):
    """Falló una publicación. `cause` guarda el error original, si lo hay."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class Publisher(ABC):
    """Capacidad de publicar un directorio en la rama de hosting."""

    @abstractmethod
    def publish(self, request: PublishRequest) -> PublishResult:
        """
        Publica los archivos del pedido.

        Raises:
            PublishError: Si la publicación no se pudo completar.
        """
        ...
