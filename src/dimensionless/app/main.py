"""
Run with: python -m dimensionless
"""
from __future__ import annotations

import sys

from dimensionless.app.application import create_app, create_preferences
from dimensionless.logging_config import level_from_env, setup_logging
from dimensionless.view.main_window import MainWindow


def main() -> int:
    """Main entry point for the application."""
    setup_logging(level=level_from_env())
    app = create_app()
    preferences = create_preferences(app)
    win = MainWindow(preferences)
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
