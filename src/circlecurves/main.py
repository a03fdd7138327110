"""
Application Initialization
==========================
This module wires the puzzle together and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the Controller (which owns the PuzzleSession model).
2. Instantiates the Main Window (View), passing the controller in.
3. Prevents circular import errors by being the orchestrator.
"""
import sys

from circlecurves.app.application import create_app
from circlecurves.controller.puzzle import PuzzleController
from circlecurves.logging_config import setup_logging
from circlecurves.view.main_window import MainWindow


def main() -> None:
    # CIRCLECURVES_LOG_LEVEL=DEBUG shows every click during development
    setup_logging()

    app = create_app()

    controller = PuzzleController()
    window = MainWindow(controller)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
