"""
UI/view constants centralized for reuse across view modules.

Only magic numbers, colors and visible labels live here.
"""

from __future__ import annotations

from PySide6.QtCore import Qt

# Photo viewer
PHOTO_WINDOW_TITLE: str = "Photo Metadata"
SELECT_IMAGE_TEXT: str = "Select Image"
SHOW_ON_MAP_TEXT: str = "Show on Map"
METADATA_PLACEHOLDER: str = "Metadata"
MAP_PANEL_WIDTH_PX: int = 400
MAP_PANEL_HEIGHT_PX: int = 300
IMAGE_MIN_HEIGHT_PX: int = 200
METADATA_MAX_HEIGHT_PX: int = 160

# Audio browser
AUDIO_WINDOW_TITLE: str = "Mp3 Player"
ROW_PADDING_PX: int = 20
ACTIVE_ROW_COLOR: str = "gray"
IDLE_ROW_COLOR: str = "black"

# Data roles
NAME_ROLE: int = Qt.UserRole  # file name on list items
