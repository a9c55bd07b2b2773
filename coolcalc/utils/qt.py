from PyQt5.QtCore import QObject, pyqtSignal


class SessionSignals(QObject):
    """Centralized signals that the session can emit without circular deps."""
    # Emitted whenever the saved record list changes and should persist
    records_changed = pyqtSignal()
    # Emitted with the preference key ("darkMode" / "language") that changed
    preferences_changed = pyqtSignal(str)


signals = SessionSignals()
