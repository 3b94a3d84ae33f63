import sys
import logging
from typing import Optional

from PyQt5.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QLineEdit, QSlider, QCheckBox, QPlainTextEdit,
    QGroupBox, QMessageBox
)
from PyQt5.QtCore import Qt, QTimer
from PyQt5.QtGui import QFont, QKeySequence
from PyQt5.QtWidgets import QShortcut

from app_types import SearchConfig
from config import (
    ALG_HINT, CHEAP_MOVES_HINT, MAX_DEPTH_LIMIT, OUTPUT_REFRESH_MS, WINDOW_TITLE
)
from cube_solver import ReorientSolver
from themes import DARK_THEME

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class MainWindow(QMainWindow):
    def __init__(self, alg: str = "", config: Optional[SearchConfig] = None):
        super().__init__()
        self.solver = ReorientSolver()
        self._initial_alg = alg
        self._initial_config = config or SearchConfig()
        self._future = None

        self._setup_ui()
        self._connect_signals()

        # Output timer: the worker writes into the solver's buffer, the UI polls it
        self.timer = QTimer()
        self.timer.timeout.connect(self._refresh_output)
        self.timer.start(OUTPUT_REFRESH_MS)

    ### ----INITIALIZERS----

    def _setup_ui(self):
        """Setup the main UI"""
        self.setStyleSheet(DARK_THEME)
        self.setWindowTitle(WINDOW_TITLE)
        self.setGeometry(100, 100, 800, 600)

        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)

        layout = QVBoxLayout(self.central_widget)
        layout.setSpacing(10)
        layout.setContentsMargins(10, 10, 10, 10)

        layout.addWidget(self._create_input_group())
        layout.addWidget(self._create_output_group(), 1)

        self.status_label = QLabel("Status: Ready")
        self.status_label.setStyleSheet("font-weight: bold; color: #ffffff; background-color: #404040; padding: 5px; border-radius: 3px;")
        layout.addWidget(self.status_label)

    def _create_input_group(self) -> QGroupBox:
        """Create the algorithm / options group"""
        cfg = self._initial_config
        group = QGroupBox("Search")
        layout = QVBoxLayout(group)

        alg_row = QHBoxLayout()
        alg_row.addWidget(QLabel("Alg: "))
        self.alg_edit = QLineEdit(self._initial_alg)
        self.alg_edit.setPlaceholderText(ALG_HINT)
        alg_row.addWidget(self.alg_edit)
        layout.addLayout(alg_row)

        cheap_row = QHBoxLayout()
        cheap_row.addWidget(QLabel("Cheap moves: "))
        self.cheap_edit = QLineEdit(cfg.cheap_moves)
        self.cheap_edit.setPlaceholderText(CHEAP_MOVES_HINT)
        cheap_row.addWidget(self.cheap_edit)
        layout.addLayout(cheap_row)

        depth_row = QHBoxLayout()
        depth_row.addWidget(QLabel("Max depth: "))
        self.depth_slider = QSlider(Qt.Horizontal)
        self.depth_slider.setRange(0, MAX_DEPTH_LIMIT)
        self.depth_slider.setValue(cfg.max_depth)
        self.depth_value = QLabel(str(cfg.max_depth))
        self.depth_slider.valueChanged.connect(lambda v: self.depth_value.setText(str(v)))
        depth_row.addWidget(self.depth_slider)
        depth_row.addWidget(self.depth_value)
        layout.addLayout(depth_row)

        self.all_check = QCheckBox("Show all algs")
        self.all_check.setChecked(cfg.show_all)
        layout.addWidget(self.all_check)

        self.sticker_check = QCheckBox("Sticker notation (23I:...)")
        self.sticker_check.setChecked(cfg.sticker_notation)
        layout.addWidget(self.sticker_check)

        self.run_btn = QPushButton("Run")
        self.run_btn.clicked.connect(self._run_search)
        layout.addWidget(self.run_btn)

        return group

    def _create_output_group(self) -> QGroupBox:
        group = QGroupBox("Output")
        layout = QVBoxLayout(group)

        self.output_view = QPlainTextEdit()
        self.output_view.setReadOnly(True)
        self.output_view.setFont(QFont("Monospace", 10))
        layout.addWidget(self.output_view)

        return group

    def _connect_signals(self):
        """Connect keyboard shortcuts"""
        self.run_shortcut = QShortcut(QKeySequence("Ctrl+Return"), self)
        self.run_shortcut.activated.connect(self._run_search)

    ### ----------------

    def _current_config(self) -> SearchConfig:
        return SearchConfig(
            max_depth=self.depth_slider.value(),
            cheap_moves=self.cheap_edit.text(),
            sticker_notation=self.sticker_check.isChecked(),
            show_all=self.all_check.isChecked(),
        )

    def _run_search(self):
        try:
            config = self._current_config()
        except ValueError as e:
            QMessageBox.critical(self, "Error", f"Invalid options: {e}")
            return

        self._update_status("Searching...")
        self._future = self.solver.run_async(self.alg_edit.text(), config)
        self._future.add_done_callback(self._on_search_done)

    def _on_search_done(self, future):
        # Runs on the worker thread; only touch the log here, the timer repaints.
        exc = future.exception()
        if exc is not None:
            logger.error("Search failed: %s", exc)

    def _refresh_output(self):
        text = self.solver.output()
        if text != self.output_view.toPlainText():
            self.output_view.setPlainText(text)
            self.output_view.verticalScrollBar().setValue(self.output_view.verticalScrollBar().maximum())
        if self._future is not None and self._future.done():
            exc = self._future.exception()
            self._update_status("Done" if exc is None else f"Failed: {exc}")
            self._future = None

    def _update_status(self, message: str):
        self.status_label.setText(f"Status: {message}")

    def closeEvent(self, event):
        self.timer.stop()
        event.accept()


def run_gui(alg: str = "", config: Optional[SearchConfig] = None) -> int:
    app = QApplication(sys.argv)
    app.setStyle('Fusion')
    window = MainWindow(alg, config)
    window.show()
    return app.exec_()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    sys.exit(run_gui())
