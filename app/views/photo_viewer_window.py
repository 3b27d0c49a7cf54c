"""Main window of the photo metadata viewer."""

from __future__ import annotations

from PySide6.QtCore import QEvent, Qt, QUrl
from PySide6.QtGui import QDesktopServices, QPixmap
from PySide6.QtWidgets import (
    QFileDialog,
    QFrame,
    QLabel,
    QMainWindow,
    QPlainTextEdit,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)
from loguru import logger

from app.viewmodels.photo_vm import NO_LOCATION_TEXT, PhotoViewerVM
from app.views.constants import (
    IMAGE_MIN_HEIGHT_PX,
    MAP_PANEL_HEIGHT_PX,
    MAP_PANEL_WIDTH_PX,
    METADATA_MAX_HEIGHT_PX,
    METADATA_PLACEHOLDER,
    PHOTO_WINDOW_TITLE,
    SELECT_IMAGE_TEXT,
    SHOW_ON_MAP_TEXT,
)
from infrastructure.image_service import IMAGE_EXTENSIONS


def _image_name_filter() -> str:
    patterns = " ".join(f"*{ext}" for ext in IMAGE_EXTENSIONS)
    return f"Images ({patterns});;All files (*)"


class PhotoViewerWindow(QMainWindow):
    """Image on top, metadata text, location panel and the pick button."""

    def __init__(self, vm: PhotoViewerVM, start_dir: str = "") -> None:
        super().__init__()
        self.vm = vm
        self._start_dir = start_dir
        self._pixmap: QPixmap | None = None
        self.setWindowTitle(PHOTO_WINDOW_TITLE)

        central = QWidget(self)
        root = QVBoxLayout(central)

        self.image_label = QLabel()
        self.image_label.setAlignment(Qt.AlignCenter)
        self.image_label.setMinimumHeight(IMAGE_MIN_HEIGHT_PX)
        self.image_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.image_label.installEventFilter(self)
        root.addWidget(self.image_label, 1)

        self.metadata_edit = QPlainTextEdit()
        self.metadata_edit.setReadOnly(True)
        self.metadata_edit.setPlaceholderText(METADATA_PLACEHOLDER)
        self.metadata_edit.setMaximumHeight(METADATA_MAX_HEIGHT_PX)
        root.addWidget(self.metadata_edit)

        self.location_panel = QFrame()
        self.location_panel.setFrameShape(QFrame.StyledPanel)
        self.location_panel.setFixedSize(MAP_PANEL_WIDTH_PX, MAP_PANEL_HEIGHT_PX)
        panel_layout = QVBoxLayout(self.location_panel)
        self.coords_label = QLabel()
        self.coords_label.setAlignment(Qt.AlignCenter)
        self.coords_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        panel_layout.addWidget(self.coords_label)
        self.map_button = QPushButton(SHOW_ON_MAP_TEXT)
        self.map_button.clicked.connect(self._on_show_map)
        panel_layout.addWidget(self.map_button)
        root.addWidget(self.location_panel, 0, Qt.AlignHCenter)

        self.no_location_label = QLabel(NO_LOCATION_TEXT)
        self.no_location_label.setAlignment(Qt.AlignCenter)
        root.addWidget(self.no_location_label)

        self.select_button = QPushButton(SELECT_IMAGE_TEXT)
        self.select_button.clicked.connect(self._on_select_image)
        root.addWidget(self.select_button)

        self.setCentralWidget(central)
        self.refresh()

    # Event handlers
    def _on_select_image(self) -> None:
        self.vm.request_pick()
        path, _ = QFileDialog.getOpenFileName(
            self, SELECT_IMAGE_TEXT, self._start_dir, _image_name_filter()
        )
        if not path:
            self.vm.cancel_pick()
            return
        self.vm.apply_pick(path)
        self.refresh()
        if self.vm.has_image:
            self.statusBar().showMessage(path, 3000)

    def _on_show_map(self) -> None:
        url = self.vm.map_url()
        if url is None:
            return
        if not QDesktopServices.openUrl(QUrl(url)):
            logger.warning("Could not open map URL {}", url)

    def eventFilter(self, obj, event) -> bool:  # type: ignore[override]
        if obj is self.image_label and event.type() == QEvent.Resize:
            self._apply_scaled_pixmap()
        return super().eventFilter(obj, event)

    # Rendering
    def refresh(self) -> None:
        """Sync widgets with the view-model."""
        if self.vm.has_image:
            self._pixmap = QPixmap.fromImage(self.vm.image)
            self._apply_scaled_pixmap()
        else:
            self._pixmap = None
            self.image_label.clear()
            self.image_label.setText(self.vm.image_placeholder)

        self.metadata_edit.setPlainText(self.vm.metadata_text)

        has_location = self.vm.location is not None
        self.location_panel.setVisible(has_location)
        self.no_location_label.setVisible(not has_location)
        self.coords_label.setText(self.vm.location_text)

    def _apply_scaled_pixmap(self) -> None:
        if self._pixmap is None or self._pixmap.isNull():
            return
        self.image_label.setPixmap(
            self._pixmap.scaled(
                self.image_label.size(), Qt.KeepAspectRatio, Qt.SmoothTransformation
            )
        )
