from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QSplitter, QPushButton, QPlainTextEdit, QSpinBox, QComboBox,
    QSizePolicy, QMessageBox
)

import config
from Controller.canvas_controller import CanvasController
from .canvas_view import CanvasView
from .panel import Panel


class CampusPathsGUI(QWidget):
    def __init__(self, client=None):
        super().__init__()
        self.setWindowTitle("Campus Paths & Connect the Dots")
        self._init_ui()
        self.controller = CanvasController(self, client=client)

    def _init_ui(self):
        self.setAutoFillBackground(True)
        self.setMinimumSize(900, 600)

        # left: connect the dots, right: campus map
        mainSplitter = QSplitter(Qt.Orientation.Horizontal)

        self.dotsPanel = Panel("Connect the Dots!")
        self.campusPanel = Panel("Campus Paths")

        mainSplitter.addWidget(self.dotsPanel)
        mainSplitter.addWidget(self.campusPanel)
        mainSplitter.setStretchFactor(0, 1)
        mainSplitter.setStretchFactor(1, 2)  # the map needs more room

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(mainSplitter)

        self._setup_dots_panel()
        self._setup_campus_panel()

    # ------- Connect the Dots -------
    def _setup_dots_panel(self):
        self.gridSizeInput = QSpinBox()
        self.gridSizeInput.setRange(*config.GRID_SIZE_RANGE)
        self.gridSizeInput.setValue(config.DEFAULT_GRID_SIZE)
        self.dotsPanel.add_labeled_widget("Grid size", self.gridSizeInput)

        self.dotsPanel.add_toolbar_buttons({
            "Draw": self._btn("Draw"),
            "Clear": self._btn("Clear"),
        })
        self.dotsPanel.toolbarButtons["Draw"].setToolTip(
            "Draws the edges typed below. One edge per line, in the form: \n"
            "x1,y1 x2,y2 color \n"
            "If any line is invalid, nothing is drawn and all problems are listed.")
        self.dotsPanel.toolbarButtons["Clear"].setToolTip("Removes all drawn edges from the grid.")

        container = QWidget()
        v = QVBoxLayout(container)
        v.setContentsMargins(4, 2, 4, 4)
        v.setSpacing(4)

        self.dotsCanvas = CanvasView("Loading grid...")
        v.addWidget(self.dotsCanvas, 1)

        self.edgeInput = QPlainTextEdit()
        self.edgeInput.setPlaceholderText("Edges, e.g.\n0,0 1,1 red\n1,1 2,3 blue")
        self.edgeInput.setFixedHeight(110)
        self.edgeInput.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        v.addWidget(self.edgeInput)

        self.dotsPanel.set_content(container)

    # ------- Campus Paths -------
    def _setup_campus_panel(self):
        self.sourceSelect = QComboBox()
        self.destinationSelect = QComboBox()
        self.campusPanel.add_labeled_widget("From:", self.sourceSelect, min_width=100)
        self.campusPanel.add_labeled_widget("To:", self.destinationSelect, min_width=100)

        self.campusPanel.add_toolbar_buttons({
            "Go": self._btn("Go!"),
            "Clear": self._btn("Clear"),
        })
        self.campusPanel.toolbarButtons["Go"].setToolTip(
            "Asks the path server for the shortest path between the two buildings.")
        self.campusPanel.toolbarButtons["Clear"].setToolTip("Removes the path from the map.")

        self.campusCanvas = CanvasView("Loading campus map...")
        self.campusPanel.set_content(self.campusCanvas)

    def set_buildings(self, names):
        # keep the current selection if the building still exists
        for combo in (self.sourceSelect, self.destinationSelect):
            current = combo.currentText()
            combo.blockSignals(True)
            combo.clear()
            combo.addItems(list(names))
            idx = combo.findText(current)
            if idx >= 0:
                combo.setCurrentIndex(idx)
            combo.blockSignals(False)

    def show_error(self, message: str):
        # Blocking notification, like an alert()
        QMessageBox.warning(self, "Error", message)

    @staticmethod
    def _btn(text: str) -> QPushButton:
        btn = QPushButton(text)
        btn.setMinimumHeight(36)
        return btn
