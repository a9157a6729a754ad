"""Qt stylesheets for the light and dark themes, shipped as package data."""
from __future__ import annotations

from importlib.resources import files
import logging

from dimensionless.app.state import Theme

logger = logging.getLogger(__name__)

THEMES_PACKAGE = "dimensionless.resources.themes"


def load_stylesheet(theme: Theme | str) -> str:
    """Read the stylesheet of `theme`; a missing resource leaves the default Qt style."""
    qss = files(THEMES_PACKAGE).joinpath(f"{Theme(theme).value}.qss")
    if not qss.is_file():
        logger.warning(f"Stylesheet '{qss}' not found in {THEMES_PACKAGE}")
        return ""
    return qss.read_text(encoding="utf-8")
