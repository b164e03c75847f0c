from __future__ import annotations
from PyQt6.QtCore import QObject, pyqtSignal


class AppLogger(QObject):
    message_logged = pyqtSignal(str, str)  # category, message

    def __init__(self, echo: bool = True, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.echo = echo

    def log(self, category: str, message: str) -> None:
        if self.echo:
            print(f"[{category}] {message}", flush=True)
        self.message_logged.emit(category, message)

    def schema(self, message: str) -> None:
        self.log("SCHEMA", message)

    def grid(self, message: str) -> None:
        self.log("GRID", message)

    def general(self, message: str) -> None:
        self.log("GENERAL", message)


_default_logger: AppLogger | None = None


def default_logger() -> AppLogger:
    """Shared logger for components constructed without one."""
    global _default_logger
    if _default_logger is None:
        _default_logger = AppLogger(echo=False)
    return _default_logger
