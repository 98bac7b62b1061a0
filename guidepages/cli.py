"""
cli.py — Punto de entrada del despliegue.

Comandos disponibles:
    python -m guidepages                    → Despliega (igual que deploy)
    python -m guidepages deploy             → Publica docs y luego el README
    python -m guidepages deploy --dry-run   → Lista lo que se publicaría
    python -m guidepages config --show      → Muestra configuración
    python -m guidepages config --validate  → Valida configuración
    python -m guidepages clean              → Borra la caché del publicador

Sin subcomando se despliega directamente: el script de siempre no
recibía argumentos, y CI lo sigue llamando así.

Uso desde código (testing):
    from click.testing import CliRunner
    from guidepages.cli import main
    CliRunner().invoke(main, ["deploy", "--dry-run"])
"""

from __future__ import annotations

import sys

import click
import yaml
from rich.panel import Panel
from rich.table import Table

from guidepages import __version__
from guidepages.config import AppConfig, load_config, validate_config
from guidepages.deploy import build_plan, run_deployment
from guidepages.publishing.gh_pages import GhPagesPublisher
from guidepages.publishing.patterns import expand_patterns
from guidepages.utils.logger import get_logger, console as rich_console

logger = get_logger("guidepages.cli")


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="guidepages")
@click.pass_context
def main(ctx: click.Context):
    """Publica la guía de estilo en la rama gh-pages."""
    if ctx.invoked_subcommand is None:
        ctx.invoke(deploy)


@main.command()
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Muestra qué archivos se publicarían, sin tocar git",
)
def deploy(dry_run: bool = False):
    """Publica la documentación y, si sale bien, el README."""
    cfg = _load_or_exit()
    steps = build_plan(cfg)

    if dry_run:
        if not _show_dry_run(cfg, steps):
            sys.exit(1)
        return

    publisher = GhPagesPublisher(cfg.project_dir, cfg.git, cfg.github_token)
    report = run_deployment(publisher, steps)
    if not report.ok:
        sys.exit(1)


@main.command()
@click.option("--show", is_flag=True, help="Muestra la configuración actual")
@click.option("--validate", is_flag=True, help="Valida la configuración")
def config(show: bool, validate: bool):
    """Gestiona la configuración del despliegue."""
    cfg = _load_or_exit()

    if show:
        tabla = Table(title="Configuración de guidepages")
        tabla.add_column("Parámetro", style="cyan")
        tabla.add_column("Valor", style="green")

        tabla.add_row("Proyecto", cfg.project_dir)
        tabla.add_row("Docs", cfg.docs.source_dir)
        tabla.add_row("Patrones docs", ", ".join(cfg.docs.patterns))
        tabla.add_row("Demo", cfg.demo.source_dir)
        tabla.add_row("Patrones demo", ", ".join(cfg.demo.patterns))
        tabla.add_row("Rama", cfg.git.branch)
        tabla.add_row("Remoto", cfg.git.repo_url or cfg.git.remote)
        tabla.add_row("Mensaje", cfg.git.commit_message)
        tabla.add_row("Push", "Sí" if cfg.git.push else "No")
        tabla.add_row("GH_TOKEN", "Configurado" if cfg.github_token else "No configurado")

        rich_console.print(tabla)

    if validate:
        problemas = validate_config(cfg)
        if problemas:
            for p in problemas:
                logger.error(p)
            sys.exit(1)
        logger.success("Configuración válida")


@main.command()
def clean():
    """Borra la caché de clones que usa el publicador."""
    cfg = _load_or_exit()
    publisher = GhPagesPublisher(cfg.project_dir, cfg.git, cfg.github_token)
    if not publisher.clean_cache():
        logger.info("No había caché que borrar")


# ============================================================
# Funciones auxiliares (privadas)
# ============================================================

def _load_or_exit() -> AppConfig:
    """Carga la configuración o termina con código 1."""
    try:
        return load_config()
    except (yaml.YAMLError, ValueError) as e:
        logger.error(f"config.yaml inválido: {e}")
        sys.exit(1)
    except OSError as e:
        logger.error(f"No se pudo leer la configuración: {e}")
        sys.exit(1)


def _show_dry_run(cfg: AppConfig, steps) -> bool:
    """
    Muestra, por paso, los archivos que se publicarían.

    Returns:
        False si algún paso fallaría en un despliegue real.
    """
    todo_ok = True
    for numero, step in enumerate(steps, start=1):
        request = step.request
        try:
            files = expand_patterns(request.source_dir, request.patterns, cfg.git.dotfiles)
        except ValueError as e:
            logger.error(str(e))
            todo_ok = False
            continue

        tabla = Table(title=f"[{numero}/{len(steps)}] {step.name} → {cfg.git.branch}")
        tabla.add_column("Archivo", style="cyan")
        for relative in files:
            tabla.add_row(relative)
        rich_console.print(tabla)

        modo = "agrega" if request.add else "reemplaza"
        rich_console.print(Panel(
            f"[bold]Fuente:[/bold] {request.source_dir}\n"
            f"[bold]Archivos:[/bold] {len(files)}\n"
            f"[bold]Modo:[/bold] {modo}\n"
            f"[bold]Mensaje:[/bold] {request.message}",
            border_style="cyan",
        ))

        if not files:
            logger.warning(
                f"{step.name}: los patrones no coinciden con ningún archivo en "
                f"{request.source_dir}; el despliegue fallaría en este paso"
            )
            todo_ok = False

    return todo_ok


if __name__ == "__main__":
    main()
