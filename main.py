# main.py
import logging
import sys
from pathlib import Path
from PyQt6.QtWidgets import QApplication
from PyQt6.QtGui import QIcon

from logging_config import setup_logging
from View.gui import CampusPathsGUI

def main():
    # logging.DEBUG shows every request and dropped stale response
    setup_logging(level=logging.INFO)

    app = QApplication(sys.argv)
    app.setApplicationName("Campus Paths")

    # Icon is optional - Resources/Icon.ico
    icon_path = Path(__file__).resolve().parent / "Resources" / "Icon.ico"
    if icon_path.exists():
        app.setWindowIcon(QIcon(str(icon_path)))

    win = CampusPathsGUI()
    win.resize(1400, 800)
    win.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
