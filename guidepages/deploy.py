"""
deploy.py — Secuenciador del despliegue a la rama de hosting.

Dos publicaciones en orden estricto:
    1. Documentación: docs/index.html, docs/css/**, docs/img/*
       (reemplaza lo publicado)
    2. Demo: README.md del repo (se agrega encima, add=True)

El paso 2 solo corre si el paso 1 salió bien. Cada resultado deja
exactamente una línea en el log: el mensaje fijo de éxito del paso o
el error que devolvió el publicador. Sin reintentos ni rollback: si un
paso falla, se registra y se termina.

Uso:
    from guidepages.deploy import build_plan, run_deployment
    report = run_deployment(publisher, build_plan(config))
    if not report.ok:
        sys.exit(1)
"""

from __future__ import annotations

from dataclasses import dataclass, field

from guidepages.config import AppConfig
from guidepages.publishing.base import PublishError, PublishRequest, Publisher
from guidepages.utils.logger import get_logger

logger = get_logger("guidepages.deploy")


@dataclass
class DeployStep:
    """Un paso del despliegue: qué publicar y qué decir si sale bien."""
    name: str
    request: PublishRequest
    success_message: str


@dataclass
class DeploymentReport:
    """
    Resumen de un despliegue.

    Campos:
        completed: Nombres de los pasos que terminaron bien, en orden.
        failed: Nombre del paso que falló, si alguno.
        error: El error de ese paso.
    """
    completed: list[str] = field(default_factory=list)
    failed: str | None = None
    error: PublishError | None = None

    @property
    def ok(self) -> bool:
        return self.failed is None


def build_plan(config: AppConfig) -> list[DeployStep]:
    """
    Arma los dos pasos del despliegue a partir de la configuración.

    Args:
        config: Configuración cargada con load_config().

    Returns:
        [paso de documentación, paso de demo], en ese orden.
    """
    message = config.git.commit_message
    return [
        DeployStep(
            name="documentation",
            request=PublishRequest(
                source_dir=config.resolve(config.docs.source_dir),
                patterns=list(config.docs.patterns),
                message=message,
                add=False,
            ),
            success_message=config.docs.success_message,
        ),
        DeployStep(
            name="demo",
            request=PublishRequest(
                source_dir=config.resolve(config.demo.source_dir),
                patterns=list(config.demo.patterns),
                message=message,
                add=True,
            ),
            success_message=config.demo.success_message,
        ),
    ]


def run_deployment(publisher: Publisher, steps: list[DeployStep]) -> DeploymentReport:
    """
    Ejecuta los pasos en orden, deteniéndose en el primer fallo.

    Los errores del publicador se registran y quedan en el reporte;
    nunca se relanzan.

    Args:
        publisher: Publicador a usar (real o falso en tests).
        steps: Pasos a ejecutar, normalmente los de build_plan().

    Returns:
        DeploymentReport con lo que se completó y lo que falló.
    """
    report = DeploymentReport()
    total = len(steps)

    for numero, step in enumerate(steps, start=1):
        logger.step(numero, total, f"Publicando {step.name}...")
        try:
            publisher.publish(step.request)
        except PublishError as e:
            logger.error(str(e))
            report.failed = step.name
            report.error = e
            return report

        logger.success(step.success_message)
        report.completed.append(step.name)

    return report
