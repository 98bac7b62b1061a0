"""
__main__.py — Permite ejecutar guidepages como módulo.

    python -m guidepages
"""

from guidepages.cli import main

if __name__ == "__main__":
    main()
