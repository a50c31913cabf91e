"""Tests for the Qt host: renderer, input mapping and main window."""

import pytest
from PySide6.QtCore import QEvent, QPoint, QPointF, QSize, Qt
from PySide6.QtGui import QColor, QImage, QKeyEvent, QMouseEvent, QPainter, QResizeEvent, QWheelEvent

from isoview.gui.main_window import MainWindow
from isoview.view import Camera, GridTransform, IsoGridView, Point, QPainterRenderer, ViewportController


def _mouse(kind: QEvent.Type, x: float, y: float, button: Qt.MouseButton) -> QMouseEvent:
    buttons = Qt.MouseButton.NoButton if kind == QEvent.Type.MouseButtonRelease else button
    return QMouseEvent(
        kind, QPointF(x, y), QPointF(x, y), button, buttons, Qt.KeyboardModifier.NoModifier
    )


def _wheel(x: float, y: float, angle: int) -> QWheelEvent:
    return QWheelEvent(
        QPointF(x, y),
        QPointF(x, y),
        QPoint(0, 0),
        QPoint(0, angle),
        Qt.MouseButton.NoButton,
        Qt.KeyboardModifier.NoModifier,
        Qt.ScrollPhase.NoScrollPhase,
        False,
    )


@pytest.fixture
def view(qapp, settings) -> IsoGridView:
    widget = IsoGridView(settings)
    yield widget
    widget.deleteLater()


class TestQPainterRenderer:
    """Painting into an offscreen image."""

    def test_tile_painted(self, qapp) -> None:
        controller = ViewportController(GridTransform(64, 32), Camera(64, 32), grid_visible=False)
        image = QImage(64, 32, QImage.Format.Format_ARGB32)
        image.fill(QColor(0, 0, 0))

        painter = QPainter(image)
        try:
            drawn = controller.render(QPainterRenderer(painter, controller))
        finally:
            painter.end()

        assert drawn == 25
        # (4, 16) lies inside cell (0, 0)
        assert image.pixelColor(4, 16) == QPainterRenderer.STYLE_COLORS["tile"]

    def test_unknown_style_falls_back(self, qapp) -> None:
        controller = ViewportController(GridTransform(64, 32), Camera(64, 32))
        image = QImage(64, 32, QImage.Format.Format_ARGB32)
        image.fill(QColor(0, 0, 0))

        painter = QPainter(image)
        try:
            QPainterRenderer(painter, controller).draw_tile(0, 0, "mystery")
        finally:
            painter.end()

        assert image.pixelColor(0, 16) == QPainterRenderer.STYLE_COLORS["tile"]


class TestIsoGridView:
    """Input events mapped to controller operations."""

    def test_initial_state(self, view: IsoGridView) -> None:
        assert view.controller.camera.get_position() == Point(-400, -300)
        assert view.controller.get_grid_cell_at(400, 300).cell_x == 0

    def test_drag_pans(self, view: IsoGridView) -> None:
        view.mousePressEvent(_mouse(QEvent.Type.MouseButtonPress, 100, 100, Qt.MouseButton.LeftButton))
        assert view.controller.is_panning

        view.mouseMoveEvent(_mouse(QEvent.Type.MouseMove, 110, 120, Qt.MouseButton.LeftButton))
        assert view.controller.camera.get_position() == Point(-410, -320)

        view.mouseReleaseEvent(_mouse(QEvent.Type.MouseButtonRelease, 110, 120, Qt.MouseButton.LeftButton))
        assert not view.controller.is_panning

    def test_hover_emits_cell(self, view: IsoGridView) -> None:
        cells = []
        view.cellHovered.connect(lambda x, y: cells.append((x, y)))

        view.mouseMoveEvent(_mouse(QEvent.Type.MouseMove, 400, 310, Qt.MouseButton.NoButton))
        view.mouseMoveEvent(_mouse(QEvent.Type.MouseMove, 401, 311, Qt.MouseButton.NoButton))

        assert cells == [(0, 0)]
        assert view.controller.camera.get_position() == Point(-400, -300)

    def test_wheel_zooms_in_around_cursor(self, view: IsoGridView) -> None:
        zooms = []
        view.zoomChanged.connect(zooms.append)
        before = view.controller.camera.viewport_to_world(250, 200)

        view.wheelEvent(_wheel(250, 200, 120))

        assert zooms == [pytest.approx(1.1)]
        after = view.controller.camera.viewport_to_world(250, 200)
        assert after.x == pytest.approx(before.x)
        assert after.y == pytest.approx(before.y)

    def test_wheel_towards_user_zooms_out(self, view: IsoGridView) -> None:
        view.wheelEvent(_wheel(0, 0, -120))
        assert view.controller.camera.get_zoom() == pytest.approx(1 / 1.1)

    def test_home_key_resets(self, view: IsoGridView) -> None:
        view.controller.camera.pan(50, 50)
        view.controller.camera.set_zoom(3)

        view.keyPressEvent(QKeyEvent(QEvent.Type.KeyPress, Qt.Key.Key_Home, Qt.KeyboardModifier.NoModifier))

        assert view.controller.camera.get_zoom() == 1.0
        assert view.controller.camera.get_position() == Point(-400, -300)

    def test_resize_updates_camera(self, view: IsoGridView) -> None:
        view.resizeEvent(QResizeEvent(QSize(400, 300), QSize(800, 600)))
        assert view.controller.camera.viewport_width == 400
        assert view.controller.camera.viewport_height == 300
        assert view.controller.grid_to_viewport(0, 0) == Point(200, 150)

    def test_center_button_resets(self, view: IsoGridView) -> None:
        view.controller.camera.pan(50, 50)

        view.center_button.click()

        assert view.controller.camera.get_position() == Point(-400, -300)
        assert not view.center_button.icon().isNull()
        assert view.center_button.property("class") is None

    def test_grid_visibility_persisted(self, view: IsoGridView, settings) -> None:
        view.set_grid_visible(False)
        assert view.controller.grid_visible is False
        assert settings.view.grid_visible is False


class TestMainWindow:
    """Status bar readouts."""

    def test_status_labels(self, qapp, settings) -> None:
        window = MainWindow(settings)

        window.grid_view.cellHovered.emit(3, -2)
        window.grid_view.zoomChanged.emit(2.5)

        assert window.cell_label.text() == "Cell: 3, -2"
        assert window.zoom_label.text() == "Zoom: 250%"
        window.deleteLater()

    def test_origin_centered_when_shown(self, qapp, settings) -> None:
        window = MainWindow(settings)
        window.show()
        qapp.processEvents()

        view = window.grid_view
        origin = view.controller.grid_to_viewport(0, 0)
        assert (view.width(), view.height()) != IsoGridView.DEFAULT_SIZE
        assert origin.x == pytest.approx(view.width() / 2)
        assert origin.y == pytest.approx(view.height() / 2)

        window.close()
        window.deleteLater()
