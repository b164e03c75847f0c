import os
import sys

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication


@pytest.fixture(scope="session", autouse=True)
def _qapp_session():
    # Keep a single QApplication alive for the whole run; module-scoped app
    # fixtures reuse it via QApplication.instance().
    app = QApplication.instance() or QApplication(sys.argv)
    yield app
