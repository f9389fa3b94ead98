from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QEvent, QObject, Qt, QTimer
from PySide6.QtGui import QCloseEvent, QFont, QFontDatabase, QKeyEvent
from PySide6.QtWidgets import (
    QApplication,
    QCheckBox,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from keytrainer.core.generator import MAX_DIFFICULTY, MIN_DIFFICULTY, TextGenerator
from keytrainer.core.keymap import KEYMAP, KeyId, KeyKind
from keytrainer.core.session import KeystrokeResult, PracticeSession
from keytrainer.core.settings import SettingsStore
from keytrainer.ui.colors import KeyColors
from keytrainer.ui.keyboard import KeyboardWidget
from keytrainer.ui.models import TypedTextView
from keytrainer.ui.qt_keys import key_id_from_event

logger = logging.getLogger(__name__)

class MainWindow(QMainWindow):
    """Practice window: settings row, target and typed text, stats, keyboard.

    Key events are caught with an application-wide event filter so that the
    keyboard highlights keys no matter which control has focus. While a session
    runs, every mapped key is consumed and fed to the ``PracticeSession``.
    """

    def __init__(self, generator: TextGenerator, settings_store: SettingsStore) -> None:
        super().__init__()
        self._settings_store = settings_store
        self._session = PracticeSession(generator, on_finished=self._on_session_finished)
        self._held_shifts: set[KeyId] = set()
        self._caps = False

        self._keyboard: Optional[KeyboardWidget] = None
        self._difficulty_slider: Optional[QSlider] = None
        self._difficulty_edit: Optional[QLineEdit] = None
        self._case_checkbox: Optional[QCheckBox] = None
        self._digits_checkbox: Optional[QCheckBox] = None
        self._symbols_checkbox: Optional[QCheckBox] = None
        self._start_button: Optional[QPushButton] = None
        self._stop_button: Optional[QPushButton] = None
        self._target_label: Optional[QLabel] = None
        self._typed_label: Optional[QLabel] = None
        self._fails_label: Optional[QLabel] = None
        self._speed_label: Optional[QLabel] = None

        self._build_ui()
        self._apply_settings()
        self._set_controls_enabled(True)

        app = QApplication.instance()
        if app is not None:
            app.installEventFilter(self)

    def _build_ui(self) -> None:
        self.setWindowTitle("Keyboard Trainer")
        self.setMinimumSize(1000, 600)
        self.setFocusPolicy(Qt.StrongFocus)

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)
        self.setCentralWidget(central)

        controls = QHBoxLayout()
        controls.addWidget(QLabel("Difficulty:"))
        self._difficulty_slider = QSlider(Qt.Horizontal)
        self._difficulty_slider.setRange(MIN_DIFFICULTY, MAX_DIFFICULTY)
        self._difficulty_slider.valueChanged.connect(self._on_slider_changed)
        controls.addWidget(self._difficulty_slider, 1)
        self._difficulty_edit = QLineEdit()
        self._difficulty_edit.setFixedWidth(48)
        controls.addWidget(self._difficulty_edit)

        self._case_checkbox = QCheckBox("Case sensitive")
        self._digits_checkbox = QCheckBox("Include digits")
        self._symbols_checkbox = QCheckBox("Include special characters")
        for checkbox in (self._case_checkbox, self._digits_checkbox, self._symbols_checkbox):
            controls.addWidget(checkbox)

        self._start_button = QPushButton("Start")
        self._start_button.clicked.connect(self._start)
        self._stop_button = QPushButton("Stop")
        self._stop_button.clicked.connect(self._stop)
        controls.addWidget(self._start_button)
        controls.addWidget(self._stop_button)
        layout.addLayout(controls)

        mono = QFontDatabase.systemFont(QFontDatabase.FixedFont)
        mono.setPointSize(18)

        self._target_label = QLabel()
        self._target_label.setFont(mono)
        self._target_label.setTextFormat(Qt.PlainText)
        self._target_label.setStyleSheet(f"color: {KeyColors.TEXT_TARGET};")
        layout.addWidget(self._target_label)

        self._typed_label = QLabel()
        self._typed_label.setFont(mono)
        self._typed_label.setTextFormat(Qt.RichText)
        layout.addWidget(self._typed_label)

        stats = QGridLayout()
        stats.addWidget(QLabel("Fails:"), 0, 0)
        self._fails_label = QLabel("0")
        stats.addWidget(self._fails_label, 0, 1)
        stats.addWidget(QLabel("Speed (chars/min):"), 0, 2)
        self._speed_label = QLabel("0")
        stats.addWidget(self._speed_label, 0, 3)
        stats.setColumnStretch(4, 1)
        bold = QFont()
        bold.setBold(True)
        self._fails_label.setFont(bold)
        self._speed_label.setFont(bold)
        layout.addLayout(stats)

        self._keyboard = KeyboardWidget()
        layout.addWidget(self._keyboard, 1)

    def _apply_settings(self) -> None:
        settings = self._settings_store.get()
        self._difficulty_slider.setValue(settings.difficulty)
        self._difficulty_edit.setText(str(settings.difficulty))
        self._case_checkbox.setChecked(settings.case_sensitive)
        self._digits_checkbox.setChecked(settings.include_digits)
        self._symbols_checkbox.setChecked(settings.include_symbols)

    def _on_slider_changed(self, value: int) -> None:
        self._difficulty_edit.setText(str(value))

    def _set_controls_enabled(self, enabled: bool) -> None:
        """Configuration controls are editable only while no session runs."""
        for widget in (
            self._difficulty_slider,
            self._difficulty_edit,
            self._case_checkbox,
            self._digits_checkbox,
            self._symbols_checkbox,
            self._start_button,
        ):
            widget.setEnabled(enabled)
        self._stop_button.setEnabled(not enabled)

    def _start(self) -> None:
        settings = self._settings_store.update(
            difficulty=self._difficulty_edit.text(),
            case_sensitive=self._case_checkbox.isChecked(),
            include_digits=self._digits_checkbox.isChecked(),
            include_symbols=self._symbols_checkbox.isChecked(),
        )
        result = self._session.start(
            settings.difficulty,
            settings.case_sensitive,
            include_digits=settings.include_digits,
            include_symbols=settings.include_symbols,
        )
        self._difficulty_edit.setText(str(self._session.difficulty))
        self._difficulty_slider.setValue(self._session.difficulty)
        self._set_controls_enabled(False)
        self._render(result)
        self.setFocus()

    def _stop(self) -> None:
        self._session.stop()
        self._set_controls_enabled(True)

    def _on_session_finished(self, result: KeystrokeResult) -> None:
        # Let the final keystroke render before the modal box opens.
        QTimer.singleShot(0, self._show_completion)

    def _show_completion(self) -> None:
        self._stop()
        QMessageBox.information(
            self, "Finished", "Congrats! You have successfully typed the whole text"
        )
        self._keyboard.clear_pressed()
        self._refresh_keyboard()

    def _render(self, result: KeystrokeResult) -> None:
        self._target_label.setText(result.target)
        self._typed_label.setText(TypedTextView.from_result(result).to_html())
        self._fails_label.setText(str(result.fails))
        self._speed_label.setText(str(result.speed))

    def _shift_active(self, event: Optional[QKeyEvent] = None) -> bool:
        if self._held_shifts:
            return True
        return event is not None and bool(event.modifiers() & Qt.ShiftModifier)

    def _refresh_keyboard(self) -> None:
        self._keyboard.refresh_glyphs(self._shift_active(), self._caps)

    def _sync_caps_from_text(self, event: QKeyEvent, key_id: KeyId) -> None:
        """Caps Lock has no portable query; infer it from the text of letter keys."""
        text = event.text()
        if KEYMAP[key_id].kind is not KeyKind.LETTER or not text.isalpha():
            return
        caps = text.isupper() != self._shift_active(event)
        if caps != self._caps:
            self._caps = caps
            self._refresh_keyboard()

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        """Route key events aimed at this window's focus widget."""
        if event.type() in (QEvent.Type.KeyPress, QEvent.Type.KeyRelease) and self._is_key_target(obj):
            if event.type() == QEvent.Type.KeyPress:
                return self._on_key_press(event)
            return self._on_key_release(event)
        return super().eventFilter(obj, event)

    def _is_key_target(self, obj: QObject) -> bool:
        focus = QApplication.focusWidget()
        return obj is (focus if focus is not None else self)

    def _on_key_press(self, event: QKeyEvent) -> bool:
        key_id = key_id_from_event(event)
        if key_id is None:
            logger.debug("Ignoring unmapped key %s", event.key())
            return False
        self._keyboard.set_pressed(key_id, True)

        if KEYMAP[key_id].is_modifier:
            if key_id is not KeyId.CAPS_LOCK:
                self._held_shifts.add(key_id)
            elif not event.isAutoRepeat():
                self._caps = not self._caps
            self._refresh_keyboard()
            return False

        if not self._session.is_running:
            return False

        self._sync_caps_from_text(event, key_id)
        result = self._session.press(key_id, shift=self._shift_active(event), caps=self._caps)
        if result.accepted:
            self._render(result)
        return True

    def _on_key_release(self, event: QKeyEvent) -> bool:
        key_id = key_id_from_event(event)
        if key_id is None:
            return False
        self._keyboard.set_pressed(key_id, False)
        if KEYMAP[key_id].is_modifier and key_id is not KeyId.CAPS_LOCK:
            self._held_shifts.discard(key_id)
            self._refresh_keyboard()
        return self._session.is_running

    def closeEvent(self, event: QCloseEvent) -> None:
        """Persist practice settings when closing the app."""
        app = QApplication.instance()
        if app is not None:
            app.removeEventFilter(self)
        self._settings_store.save()
        super().closeEvent(event)
