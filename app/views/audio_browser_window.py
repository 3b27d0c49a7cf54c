"""Main window of the audio browser: one row per bundled file."""

from __future__ import annotations

from PySide6.QtGui import QBrush, QColor
from PySide6.QtWidgets import QListWidget, QListWidgetItem, QMainWindow
from loguru import logger

from app.viewmodels.audio_vm import AudioBrowserVM, AudioRowVM
from app.views.constants import (
    ACTIVE_ROW_COLOR,
    AUDIO_WINDOW_TITLE,
    IDLE_ROW_COLOR,
    NAME_ROLE,
    ROW_PADDING_PX,
)


def _row_text(row: AudioRowVM) -> str:
    return f"{row.icon_text}  {row.name}"


class AudioBrowserWindow(QMainWindow):
    """List of files; clicking a row toggles its playback."""

    def __init__(self, vm: AudioBrowserVM) -> None:
        super().__init__()
        self.vm = vm
        self.setWindowTitle(AUDIO_WINDOW_TITLE)

        self.list_widget = QListWidget(self)
        self.list_widget.setStyleSheet(f"QListWidget::item {{ padding: {ROW_PADDING_PX}px; }}")
        self.list_widget.itemClicked.connect(self._on_item_clicked)
        self.setCentralWidget(self.list_widget)

        for row in self.vm.rows():
            item = QListWidgetItem(_row_text(row))
            item.setData(NAME_ROLE, row.name)
            self.list_widget.addItem(item)
        self.refresh()

    def _on_item_clicked(self, item: QListWidgetItem) -> None:
        name = item.data(NAME_ROLE)
        if not name:
            return
        try:
            active = self.vm.tap(str(name))
        except ValueError as ex:
            logger.error("Tap ignored: {}", ex)
            return
        self.refresh()
        if active:
            self.statusBar().showMessage(f"Playing {active}", 2000)
        else:
            self.statusBar().showMessage(f"Stopped {name}", 2000)

    def refresh(self) -> None:
        """Update row icons and colors from the active entry."""
        rows = {row.name: row for row in self.vm.rows()}
        for i in range(self.list_widget.count()):
            item = self.list_widget.item(i)
            row = rows.get(item.data(NAME_ROLE))
            if row is None:
                continue
            item.setText(_row_text(row))
            color = ACTIVE_ROW_COLOR if row.is_dimmed else IDLE_ROW_COLOR
            item.setForeground(QBrush(QColor(color)))
