"""Event handlers for IsoGridView.

This module maps Qt input events onto ViewportController operations:
mouse panning, wheel zoom, hover tracking, keyboard shortcuts and resize.
"""

from PySide6.QtCore import QEvent, Qt
from PySide6.QtGui import QKeyEvent, QMouseEvent, QResizeEvent, QWheelEvent


class IsoGridViewEventHandlers:
    """Mixin class for IsoGridView event handling.

    Handles:
    - Mouse panning (left or middle button drag)
    - Wheel zoom around the cursor
    - Hover cell tracking
    - Home key to reset the view
    - Window resize (camera viewport and overlay UI)
    """

    PAN_BUTTONS = (Qt.MouseButton.LeftButton, Qt.MouseButton.MiddleButton)

    def resizeEvent(self, event: QResizeEvent) -> None:
        """Handle resize event to update the camera viewport."""
        super().resizeEvent(event)  # type: ignore

        size = event.size()
        if size.width() > 0 and size.height() > 0:
            self.controller.resize(size.width(), size.height())  # type: ignore

        # Position center button in top-right corner
        margin = 10
        button_x = self.width() - self.center_button.width() - margin  # type: ignore
        self.center_button.move(button_x, margin)  # type: ignore
        self.update()  # type: ignore

    def mousePressEvent(self, event: QMouseEvent) -> None:
        """Handle mouse press events for panning."""
        if event.button() in self.PAN_BUTTONS:
            position = event.position()
            self.controller.start_pan(position.x(), position.y())  # type: ignore
            self.setCursor(Qt.CursorShape.ClosedHandCursor)  # type: ignore
            event.accept()
        else:
            super().mousePressEvent(event)  # type: ignore

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        """Handle mouse move events for panning and hover."""
        position = event.position()
        if self.controller.is_panning:  # type: ignore
            self.controller.update_pan(position.x(), position.y())  # type: ignore
        self._update_hover(position.x(), position.y())  # type: ignore
        self.update()  # type: ignore
        event.accept()

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        """Handle mouse release events for panning."""
        if event.button() in self.PAN_BUTTONS and self.controller.is_panning:  # type: ignore
            self.controller.end_pan()  # type: ignore
            self.setCursor(Qt.CursorShape.ArrowCursor)  # type: ignore
            event.accept()
        else:
            super().mouseReleaseEvent(event)  # type: ignore

    def wheelEvent(self, event: QWheelEvent) -> None:
        """Handle mouse wheel for zoom around the cursor."""
        delta = event.angleDelta().y()
        if delta == 0:
            event.ignore()
            return

        position = event.position()
        # Qt reports positive delta for wheel away from the user (zoom in)
        new_zoom = self.controller.zoom(-delta, position.x(), position.y())  # type: ignore
        self._update_hover(position.x(), position.y())  # type: ignore
        self.zoomChanged.emit(new_zoom)  # type: ignore
        self.update()  # type: ignore
        event.accept()

    def leaveEvent(self, event: QEvent) -> None:
        """Clear hover when the pointer leaves the view."""
        self.controller.clear_hover()  # type: ignore
        self.update()  # type: ignore
        super().leaveEvent(event)  # type: ignore

    def keyPressEvent(self, event: QKeyEvent) -> None:
        """Handle key press events for view control."""
        if event.key() == Qt.Key.Key_Home:
            self.reset_view()  # type: ignore
            event.accept()
        else:
            super().keyPressEvent(event)  # type: ignore
