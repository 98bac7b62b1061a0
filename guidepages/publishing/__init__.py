"""
publishing/ — Todo lo relacionado con publicar en la rama de hosting.

Módulos:
- base.py      → Interfaz Publisher, PublishRequest, PublishError
- patterns.py  → Expansión de globs contra el directorio fuente
- gh_pages.py  → Publicador real sobre GitPython
"""
