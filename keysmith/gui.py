# keysmith/gui.py
# KeySmith password form: length field, class checkboxes, generate/reset, copy with auto-clear

import sys
import typing
import logging
from functools import partial

from PySide6.QtCore import QTimer
from PySide6.QtGui import QClipboard
from PySide6.QtWidgets import (
    QApplication, QWidget, QHBoxLayout, QVBoxLayout, QLabel,
    QLineEdit, QPushButton, QCheckBox, QGroupBox, QGridLayout
)

from keysmith.config import load_config
from keysmith.errors import KeySmithError, ValidationError
from keysmith.generator import EmptyPoolPolicy, SamplingMode, generate
from keysmith.log import setup_logging
from keysmith.validation import MAX_LENGTH, MIN_LENGTH, build_request

log = logging.getLogger(__name__)

CFG = load_config()
DEFAULT_CLEAR_CLIP_SECONDS = int(CFG.get("clipboard_clear_seconds", 20))

# ---------------- UI building helpers ----------------

def make_form_group():
    box = QGroupBox("Password Generator")
    layout = QGridLayout()
    box.setLayout(layout)

    lbl_len = QLabel("Password Length:")
    input_len = QLineEdit()
    input_len.setPlaceholderText("Ex - 8")
    lbl_error = QLabel("")
    lbl_error.setStyleSheet("color: #FF0D10;")

    # unchecked by default, like the original form
    chk_lower = QCheckBox("Include lowercase")
    chk_upper = QCheckBox("Include uppercase")
    chk_digits = QCheckBox("Include digits")
    chk_symbols = QCheckBox("Include symbols")

    btn_generate = QPushButton("Generate Password")
    btn_reset = QPushButton("Reset")

    layout.addWidget(lbl_len, 0, 0)
    layout.addWidget(input_len, 0, 1)
    layout.addWidget(lbl_error, 1, 0, 1, 2)
    layout.addWidget(chk_lower, 2, 0, 1, 2)
    layout.addWidget(chk_upper, 3, 0, 1, 2)
    layout.addWidget(chk_digits, 4, 0, 1, 2)
    layout.addWidget(chk_symbols, 5, 0, 1, 2)
    layout.addWidget(btn_generate, 6, 0)
    layout.addWidget(btn_reset, 6, 1)

    return {
        "widget": box,
        "input_len": input_len,
        "lbl_error": lbl_error,
        "chk_lower": chk_lower,
        "chk_upper": chk_upper,
        "chk_digits": chk_digits,
        "chk_symbols": chk_symbols,
        "btn_generate": btn_generate,
        "btn_reset": btn_reset,
    }


def make_result_group():
    box = QGroupBox("Generated Password")
    layout = QVBoxLayout()
    box.setLayout(layout)

    txt_password = QLineEdit()
    txt_password.setReadOnly(True)
    btn_copy = QPushButton("Copy (auto-clear)")

    row = QHBoxLayout()
    row.addWidget(txt_password, 1)
    row.addWidget(btn_copy)
    layout.addLayout(row)
    box.setVisible(False)

    return {"widget": box, "txt_password": txt_password, "btn_copy": btn_copy}


class KeySmithGUI(QWidget):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("KeySmith — Password Generator")
        self.setMinimumSize(420, 320)
        self.clip_timer: typing.Optional[QTimer] = None

        self.cfg = load_config()
        self.clip_clear_seconds = int(self.cfg.get("clipboard_clear_seconds", DEFAULT_CLEAR_CLIP_SECONDS))

        main = QVBoxLayout()
        self.setLayout(main)

        form = make_form_group()
        result = make_result_group()
        main.addWidget(form["widget"])
        main.addWidget(result["widget"])

        form["input_len"].setToolTip(f"Between {MIN_LENGTH} and {MAX_LENGTH}")
        form["btn_generate"].clicked.connect(partial(self.on_generate_click, form, result))
        form["btn_reset"].clicked.connect(partial(self.on_reset_click, form, result))
        result["btn_copy"].clicked.connect(partial(self.on_copy_generated, result))

        self.form = form
        self.result = result

    # ----------------- Form actions -----------------
    def on_generate_click(self, form, result):
        form["lbl_error"].setText("")
        try:
            req = build_request(
                form["input_len"].text(),
                has_lower_case=form["chk_lower"].isChecked(),
                has_upper_case=form["chk_upper"].isChecked(),
                has_digit=form["chk_digits"].isChecked(),
                has_symbol=form["chk_symbols"].isChecked(),
            )
            pw = generate(
                req,
                sampling=SamplingMode(self.cfg.get("sampling", "uniform")),
                empty_pool=EmptyPoolPolicy(self.cfg.get("empty_pool", "empty")),
                secure=bool(self.cfg.get("secure_random", False)),
            )
        except ValidationError as e:
            form["lbl_error"].setText(e.message)
            return
        except KeySmithError as e:
            form["lbl_error"].setText(str(e))
            return
        result["txt_password"].setText(pw)
        result["widget"].setVisible(True)

    def on_reset_click(self, form, result):
        form["input_len"].clear()
        form["lbl_error"].setText("")
        for key in ("chk_lower", "chk_upper", "chk_digits", "chk_symbols"):
            form[key].setChecked(False)
        result["txt_password"].clear()
        result["widget"].setVisible(False)

    def on_copy_generated(self, result):
        pw = result["txt_password"].text()
        if not pw:
            return
        clipboard: QClipboard = QApplication.clipboard()
        clipboard.setText(pw, mode=QClipboard.Clipboard)
        if clipboard.supportsSelection():
            clipboard.setText(pw, mode=QClipboard.Selection)

        btn = result["btn_copy"]
        old_text = btn.text()
        btn.setText("Copied ✓")
        btn.setEnabled(False)
        QTimer.singleShot(1500, lambda: (btn.setText(old_text), btn.setEnabled(True)))

        self.start_clipboard_clear_timer(self.clip_clear_seconds)

    # ----------------- Clipboard -----------------
    def start_clipboard_clear_timer(self, seconds: int):
        if self.clip_timer and self.clip_timer.isActive():
            self.clip_timer.stop()
        self.clip_timer = QTimer(self)
        self.clip_timer.setSingleShot(True)
        self.clip_timer.timeout.connect(self.clear_clipboard)
        self.clip_timer.start(seconds * 1000)

    def clear_clipboard(self):
        clipboard: QClipboard = QApplication.clipboard()
        clipboard.setText("", mode=QClipboard.Clipboard)
        if clipboard.supportsSelection():
            clipboard.setText("", mode=QClipboard.Selection)
        log.debug("clipboard cleared")


def main():
    setup_logging(CFG.get("log_level", "WARNING"))
    app = QApplication(sys.argv)
    gui = KeySmithGUI()
    gui.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
