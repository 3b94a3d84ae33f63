# Constants
DARK_THEME = """
    QMainWindow, QWidget {
        background-color: #2b2b2b;
        color: #ffffff;
    }

    QGroupBox {
        color: #ffffff;
        font-weight: bold;
        border: 2px solid #555555;
        border-radius: 5px;
        margin-top: 1ex;
        padding-top: 10px;
    }

    QGroupBox::title {
        subcontrol-origin: margin;
        left: 10px;
        padding: 0 5px 0 5px;
    }

    QLineEdit, QPlainTextEdit {
        background-color: #1a1a1a;
        color: #e0e0e0;
        border: 1px solid #555555;
        border-radius: 3px;
        padding: 3px;
        selection-background-color: #505050;
    }

    QPushButton {
        background-color: #404040;
        color: #ffffff;
        border: 1px solid #555555;
        border-radius: 3px;
        padding: 5px 10px;
        font-weight: bold;
        min-height: 20px;
    }

    QPushButton:hover {
        background-color: #505050;
        border: 1px solid #666666;
    }

    QPushButton:pressed {
        background-color: #606060;
    }

    QSlider::groove:horizontal {
        height: 6px;
        background: #404040;
        border-radius: 3px;
    }

    QSlider::handle:horizontal {
        background: #aaaaaa;
        width: 14px;
        margin: -4px 0;
        border-radius: 7px;
    }

    QCheckBox, QLabel {
        color: #ffffff;
    }
"""
