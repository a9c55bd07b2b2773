import sys
from PyQt5.QtWidgets import QApplication
from coolcalc.services.session import CoolCalcSession
from coolcalc.services.settings import SettingsManager
from coolcalc.services.traceback_dialog import install_excepthook
from coolcalc.ui.main_window import MainWindow


def run():
    install_excepthook()
    app = QApplication(sys.argv)
    settings = SettingsManager()
    session = CoolCalcSession(settings)
    session.load()
    win = MainWindow(session)
    win.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    run()
