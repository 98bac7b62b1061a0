"""
test_logger.py — Tests para el logger de consola.
"""

from __future__ import annotations

from guidepages.utils.logger import get_logger


class TestGuideLogger:
    def test_corchetes_se_muestran_tal_cual(self, capsys):
        """Los errores de git traen corchetes; Rich no debe comerlos."""
        logger = get_logger("guidepages.test")
        logger.error("! [remote rejected] gh-pages -> gh-pages [bold]")

        salida = capsys.readouterr().out
        assert "[remote rejected]" in salida
        assert "[bold]" in salida

    def test_prefijos_por_nivel(self, capsys):
        logger = get_logger("guidepages.test")
        logger.success("No error in the documentation deployment")
        logger.step(1, 2, "Publicando documentation...")

        salida = capsys.readouterr().out
        assert "[OK] No error in the documentation deployment" in salida
        assert "[1/2] Publicando documentation..." in salida

