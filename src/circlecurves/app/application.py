from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

import sys
import os

ORG_ID = "circlecurves"
APP_ID = "circle-curves"

VISIBLE_APP_NAME = "Circle Curves"


def create_app() -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)

    return app
