"""
patterns.py — Expande los patrones de inclusión contra un directorio.

Los patrones son globs relativos ("index.html", "css/**/*", "img/*").
Un patrón que empieza con "!" saca de la lista lo que ya había entrado.

Uso:
    from guidepages.publishing.patterns import expand_patterns
    files = expand_patterns(Path("docs"), ["index.html", "css/**/*"])
    # ["index.html", "css/main.css", "css/themes/dark.css"]
"""

from __future__ import annotations

import re
from pathlib import Path, PurePosixPath


def _check_pattern(pattern: str) -> None:
    """Rechaza patrones que se saldrían del directorio fuente."""
    posix = PurePosixPath(pattern)
    if not pattern or posix.is_absolute() or pattern.startswith("\\"):
        raise ValueError(f"Patrón inválido (debe ser relativo): {pattern!r}")
    if ".." in posix.parts:
        raise ValueError(f"Patrón inválido (no se permite '..'): {pattern!r}")


def _is_hidden(relative: str) -> bool:
    return any(part.startswith(".") for part in relative.split("/"))


def _translate(pattern: str) -> re.Pattern:
    """
    Convierte un glob en regex anclada al directorio fuente.

    "*" y "?" no cruzan "/"; solo "**" baja por subdirectorios.
    Así "!img/*" excluye img/a.png pero no css/img/b.png.
    """
    partes = []
    i = 0
    while i < len(pattern):
        if pattern.startswith("**/", i):
            partes.append("(?:.*/)?")
            i += 3
        elif pattern.startswith("**", i):
            partes.append(".*")
            i += 2
        elif pattern[i] == "*":
            partes.append("[^/]*")
            i += 1
        elif pattern[i] == "?":
            partes.append("[^/]")
            i += 1
        else:
            partes.append(re.escape(pattern[i]))
            i += 1
    return re.compile("".join(partes))


def _matches(relative: str, pattern: str) -> bool:
    """Compara la ruta relativa completa contra un patrón de exclusión."""
    return _translate(pattern).fullmatch(relative) is not None


def expand_patterns(
    source_dir: Path,
    patterns: list[str],
    dotfiles: bool = False,
) -> list[str]:
    """
    Regresa los archivos de source_dir que coinciden con los patrones.

    El orden sigue al de los patrones (y dentro de cada patrón, orden
    alfabético), sin duplicados. Solo se incluyen archivos regulares.

    Args:
        source_dir: Directorio base.
        patterns: Globs relativos; los que empiezan con "!" excluyen.
        dotfiles: Si es False, se ignoran rutas con componentes ".algo".

    Returns:
        Rutas relativas en formato POSIX.

    Raises:
        ValueError: Si algún patrón es absoluto o contiene "..".
    """
    source_dir = Path(source_dir)
    encontrados: list[str] = []
    vistos: set[str] = set()

    for pattern in patterns:
        negado = pattern.startswith("!")
        glob = pattern[1:] if negado else pattern
        _check_pattern(glob)

        if negado:
            encontrados = [r for r in encontrados if not _matches(r, glob)]
            vistos = set(encontrados)
            continue

        for path in sorted(source_dir.glob(glob)):
            if not path.is_file():
                continue
            relative = path.relative_to(source_dir).as_posix()
            if not dotfiles and _is_hidden(relative):
                continue
            if relative not in vistos:
                vistos.add(relative)
                encontrados.append(relative)

    return encontrados
