"""2D viewport backed by VisPy."""

from __future__ import annotations

import numpy as np
from PySide6 import QtCore, QtWidgets
from vispy import app, scene

from .game_controller import FrameState
from .viz_utils import compute_bounds, polyline_or_empty, world_outline

app.use_app("pyside6")


BODY_COLORS = {
    "Earth": (0.35, 0.6, 1.0, 1.0),
    "Moon": (0.8, 0.8, 0.85, 1.0),
    "Craft": (1.0, 1.0, 1.0, 1.0),
}
TRAJECTORY_COLOR = (1.0, 1.0, 1.0, 0.3)
THRUST_COLOR = (1.0, 0.2, 0.2, 1.0)
# Thrust marker diameter in pixels.
THRUST_MARKER_SIZE = 12


class ViewportWidget(QtWidgets.QWidget):
    key_pressed = QtCore.Signal(str)

    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)

        self._canvas = scene.SceneCanvas(
            keys=None,
            bgcolor="#000000",
            size=(1200, 800),
        )
        self._view = self._canvas.central_widget.add_view()
        # World y grows downward, like screen coordinates.
        self._view.camera = scene.PanZoomCamera(aspect=1)
        self._view.camera.flip = (False, True, False)

        self._outlines: dict[str, scene.visuals.Line] = {}
        self._indicator = scene.visuals.Line(
            parent=self._view.scene, color="white", width=1.5
        )
        self._thrust = scene.visuals.Markers(parent=self._view.scene)
        self._thrust.visible = False
        self._trajectory = scene.visuals.Line(
            parent=self._view.scene, color=TRAJECTORY_COLOR, width=1.0
        )
        self._trajectory.set_gl_state("translucent", depth_test=False)
        self._trajectory.visible = False
        self._banner = scene.visuals.Text(
            "",
            color="white",
            font_size=24,
            parent=self._canvas.scene,
            anchor_x="center",
        )
        self._banner.visible = False
        self._canvas.events.key_press.connect(self._on_key_press)

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._canvas.native)

    def _on_key_press(self, event: object) -> None:
        text = getattr(event, "text", "") or ""
        if text:
            self.key_pressed.emit(text)

    @property
    def native_canvas(self) -> QtWidgets.QWidget:
        return self._canvas.native

    def frame_points(self, points: np.ndarray, margin: float = 1.15) -> None:
        center, radius = compute_bounds(points)
        if radius <= 0.0:
            return
        half = radius * margin
        self._view.camera.set_range(
            x=(float(center[0] - half), float(center[0] + half)),
            y=(float(center[1] - half), float(center[1] + half)),
            margin=0.0,
        )

    def set_frame(self, state: FrameState) -> None:
        for body in state.bodies:
            line = self._outlines.get(body.name)
            if line is None:
                color = BODY_COLORS.get(body.name, (0.7, 0.7, 0.7, 1.0))
                line = scene.visuals.Line(parent=self._view.scene, color=color, width=2.0)
                self._outlines[body.name] = line
            line.set_data(pos=world_outline(body.vertices, body.position, body.angle))

        ind = state.indicator
        self._indicator.set_data(pos=np.array([ind.nose, ind.tail], dtype=np.float32))
        if ind.thrusting:
            self._thrust.set_data(
                np.array([ind.tail], dtype=np.float32),
                face_color=(0.0, 0.0, 0.0, 0.0),
                edge_color=THRUST_COLOR,
                size=THRUST_MARKER_SIZE,
            )
        self._thrust.visible = ind.thrusting

        path = polyline_or_empty(state.trajectory.points)
        if path.shape[0] > 0:
            self._trajectory.set_data(pos=path)
        self._trajectory.visible = path.shape[0] > 0
        self._canvas.update()

    def show_banner(self, text: str) -> None:
        w, h = self._canvas.size
        self._banner.text = text
        self._banner.pos = (w / 2, h / 2)
        self._banner.visible = True
        self._canvas.update()

    def clear_banner(self) -> None:
        self._banner.visible = False
        self._canvas.update()
