"""
config.py — Carga y gestiona la configuración del despliegue.

Se encarga de:
1. Cargar config.yaml (qué se publica y a qué rama)
2. Cargar .env (secretos: token de GitHub, identidad de git en CI)
3. Resolver variables de entorno en los valores de config
4. Validar que la configuración tenga sentido antes de tocar git

¿Por qué separar config.yaml de .env?
    - config.yaml: Valores que SÍ se suben a Git (patrones, rama, mensaje)
    - .env: Valores que NUNCA se suben a Git (GH_TOKEN)

Sin config.yaml se usan los valores por defecto, que reproducen el
despliegue de siempre: docs/ a gh-pages y luego el README encima.

Uso:
    from guidepages.config import load_config
    config = load_config()
    print(config.git.branch)  # "gh-pages"
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv


# ============================================================
# Dataclasses de configuración
# ============================================================
# Cada sección de config.yaml tiene su propia dataclass.
# ============================================================

DEFAULT_COMMIT_MESSAGE = "Automatic deployment update"


@dataclass
class DocsConfig:
    """Primer paso: el sitio de documentación (HTML + CSS + imágenes)."""
    source_dir: str = "docs"
    patterns: list[str] = field(default_factory=lambda: [
        "index.html",
        "css/**/*",
        "img/*",
    ])
    success_message: str = "No error in the documentation deployment"


@dataclass
class DemoConfig:
    """Segundo paso: el README, agregado encima de lo ya publicado."""
    source_dir: str = "."
    patterns: list[str] = field(default_factory=lambda: ["README.md"])
    success_message: str = "No error in the demo website deployment"


@dataclass
class GitConfig:
    """Configuración de la rama de hosting."""
    branch: str = "gh-pages"
    remote: str = "origin"
    repo_url: str = ""
    dest: str = "."
    commit_message: str = DEFAULT_COMMIT_MESSAGE
    user_name: str = ""
    user_email: str = ""
    push: bool = True
    dotfiles: bool = False
    cache_dir: str = ".cache/guidepages"


@dataclass
class AppConfig:
    """Configuración completa de la aplicación."""
    docs: DocsConfig = field(default_factory=DocsConfig)
    demo: DemoConfig = field(default_factory=DemoConfig)
    git: GitConfig = field(default_factory=GitConfig)

    # Directorio dueño de config.yaml; las rutas relativas cuelgan de aquí
    project_dir: str = "."

    # Valores del .env (no están en config.yaml)
    github_token: str = ""

    def resolve(self, relative: str) -> Path:
        """Convierte una ruta de config en absoluta respecto al proyecto."""
        path = Path(relative)
        if path.is_absolute():
            return path
        return (Path(self.project_dir) / path).resolve()


# ============================================================
# Funciones de carga
# ============================================================

def _resolve_env_vars(value: str) -> str:
    """
    Resuelve variables de entorno en un string.

    Ejemplo:
        "${GIT_REMOTE_URL}" → "https://github.com/org/styleguide.git"

    Si la variable no existe se deja el placeholder tal cual.
    """
    patron = re.compile(r"\$\{(\w+)\}")

    def reemplazar(match: re.Match) -> str:
        nombre_var = match.group(1)
        return os.environ.get(nombre_var, match.group(0))

    return patron.sub(reemplazar, value)


def _resolve_env_recursive(data: Any) -> Any:
    """Resuelve variables de entorno recursivamente en un dict/list."""
    if isinstance(data, str):
        return _resolve_env_vars(data)
    elif isinstance(data, dict):
        return {k: _resolve_env_recursive(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [_resolve_env_recursive(item) for item in data]
    return data


def _dict_to_dataclass(data: dict, cls: type) -> Any:
    """
    Convierte un diccionario a una dataclass, ignorando keys desconocidas.

    El YAML podría tener keys que el código ya no usa; en vez de
    explotar, simplemente se ignoran.
    """
    campos_validos = {f.name for f in cls.__dataclass_fields__.values()}
    datos_filtrados = {k: v for k, v in data.items() if k in campos_validos}
    return cls(**datos_filtrados)


def _section(data: dict, name: str) -> dict:
    """
    Devuelve una sección de config.yaml como dict.

    Una sección vacía (`docs:` sin nada debajo) llega como None y
    equivale a usar los valores por defecto.
    """
    seccion = data.get(name) or {}
    if not isinstance(seccion, dict):
        raise ValueError(
            f"La sección '{name}' de config.yaml debe ser un mapeo, "
            f"no {type(seccion).__name__}"
        )
    return seccion


def _find_config_dir() -> Path:
    """
    Encuentra el directorio raíz del proyecto (donde está config.yaml).

    Busca hacia arriba desde el directorio actual. Si no lo encuentra,
    usa el directorio actual: el despliegue funciona sin config.yaml.
    """
    current = Path.cwd()
    for parent in [current] + list(current.parents):
        if (parent / "config.yaml").exists():
            return parent
    return current


def load_config(config_path: Path | None = None) -> AppConfig:
    """
    Carga la configuración completa del despliegue.

    Pasos:
    1. Carga .env para tener las variables de entorno disponibles
    2. Lee config.yaml
    3. Resuelve ${VARIABLES} en los valores del YAML
    4. Convierte cada sección a su dataclass correspondiente
    5. Agrega los valores del .env que no están en el YAML

    Args:
        config_path: Ruta al config.yaml. Si es None, busca automáticamente.

    Returns:
        AppConfig con toda la configuración lista para usar.

    Raises:
        yaml.YAMLError: Si config.yaml no es YAML válido.
        ValueError: Si config.yaml o alguna sección no es un mapeo.
        FileNotFoundError: Si config_path se indicó y no existe.
    """
    proyecto_dir = _find_config_dir()
    env_path = proyecto_dir / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    if config_path is None:
        config_path = proyecto_dir / "config.yaml"
    else:
        if not config_path.exists():
            raise FileNotFoundError(f"No existe el archivo de configuración: {config_path}")
        proyecto_dir = config_path.resolve().parent

    raw_config: dict = {}
    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            raw_config = yaml.safe_load(f) or {}

    if not isinstance(raw_config, dict):
        raise ValueError(
            f"{config_path}: se esperaba un mapeo de secciones, "
            f"no {type(raw_config).__name__}"
        )

    config_resuelto = _resolve_env_recursive(raw_config)

    app_config = AppConfig(
        docs=_dict_to_dataclass(_section(config_resuelto, "docs"), DocsConfig),
        demo=_dict_to_dataclass(_section(config_resuelto, "demo"), DemoConfig),
        git=_dict_to_dataclass(_section(config_resuelto, "git"), GitConfig),
        project_dir=str(proyecto_dir),
    )

    # Valores del .env
    app_config.github_token = os.environ.get(
        "GH_TOKEN", os.environ.get("GITHUB_TOKEN", "")
    )
    if os.environ.get("GIT_USER_NAME"):
        app_config.git.user_name = os.environ["GIT_USER_NAME"]
    if os.environ.get("GIT_USER_EMAIL"):
        app_config.git.user_email = os.environ["GIT_USER_EMAIL"]

    return app_config


def validate_config(config: AppConfig) -> list[str]:
    """
    Revisa la configuración y regresa la lista de problemas encontrados.

    Lista vacía significa que se puede desplegar.
    """
    problemas = []

    docs_dir = config.resolve(config.docs.source_dir)
    if not docs_dir.is_dir():
        problemas.append(f"No existe el directorio de documentación: {docs_dir}")
    if not config.docs.patterns:
        problemas.append("docs.patterns está vacío")
    if not config.demo.patterns:
        problemas.append("demo.patterns está vacío")
    if not config.git.branch.strip():
        problemas.append("git.branch no puede estar vacío")
    if not config.git.commit_message.strip():
        problemas.append("git.commit_message no puede estar vacío")

    return problemas
