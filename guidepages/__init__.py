"""
guidepages — Despliegue de la guía de estilo CSS/Sass a GitHub Pages.

Este paquete contiene:
- deploy.py     → Secuenciador: docs primero, README después
- publishing/   → Publicación en la rama de hosting (GitPython)
- config.py     → config.yaml + .env
- utils/        → Utilidades compartidas (logging)

Uso:
    python -m guidepages
    python -m guidepages deploy --dry-run
    python -m guidepages config --show
"""

__version__ = "1.0.0"
