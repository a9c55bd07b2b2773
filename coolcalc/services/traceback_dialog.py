import sys
import traceback
from PyQt5.QtWidgets import QApplication, QDialog, QPushButton, QTextEdit, QVBoxLayout
from .logger import get_logger


class TracebackDialog(QDialog):
    def __init__(self, exc_type, exc_value, tb, parent=None):
        super().__init__(parent)
        self.setWindowTitle("An error occurred")
        self.resize(720, 420)

        layout = QVBoxLayout(self)
        self.text = QTextEdit(self)
        self.text.setReadOnly(True)
        self.text.setLineWrapMode(QTextEdit.NoWrap)
        self.text.setPlainText("".join(traceback.format_exception(exc_type, exc_value, tb)))
        layout.addWidget(self.text)

        btn = QPushButton("Close")
        btn.clicked.connect(self.accept)
        layout.addWidget(btn)


def install_excepthook():
    """Log unhandled exceptions; show them in a dialog while the GUI is up."""
    log = get_logger("excepthook")

    def handle(exc_type, exc, tb):
        log.error("Unhandled exception:", exc_info=(exc_type, exc, tb))
        if QApplication.instance() is None:
            traceback.print_exception(exc_type, exc, tb)
        else:
            TracebackDialog(exc_type, exc, tb).exec_()

    sys.excepthook = handle
    return handle
