"""Main window: two Qt timers drive the tick loop and the frame loop."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from PySide6 import QtCore, QtGui, QtWidgets

from ..core.world import Outcome
from ..io.config import GameConfig
from .controls import HELP_TEXT, Action, action_for_key
from .game_controller import GameController
from .viewport import ViewportWidget


# Display refresh, in ms.
FRAME_INTERVAL_MS = 16
SUCCESS_MESSAGE = "You made it!"


class MainWindow(QtWidgets.QMainWindow):
    objective_reached = QtCore.Signal()

    def __init__(self, config: GameConfig | None = None) -> None:
        super().__init__()
        self.resize(1200, 800)
        self.setWindowTitle("Moonshot")

        self._controller = GameController(config or GameConfig())
        self._announced = False

        self._tick_timer = QtCore.QTimer(self)
        self._tick_timer.setTimerType(QtCore.Qt.PreciseTimer)
        self._tick_timer.timeout.connect(self._on_tick)
        self._frame_timer = QtCore.QTimer(self)
        self._frame_timer.setInterval(FRAME_INTERVAL_MS)
        self._frame_timer.timeout.connect(self._on_frame)
        self._controller.tick_loop.on_stop = self._tick_timer.stop
        self._controller.frame_loop.on_stop = self._frame_timer.stop

        self._viewport = ViewportWidget(self)
        self._viewport.key_pressed.connect(self._on_key_text)
        self.setCentralWidget(self._viewport)

        self._help_label = QtWidgets.QLabel(HELP_TEXT, self)
        self.statusBar().addPermanentWidget(self._help_label)
        self.objective_reached.connect(self._on_objective_reached)

        self._build_menus()
        self._start_loops()
        self._frame_scene()
        self.statusBar().showMessage("Ready")

    def _build_menus(self) -> None:
        game_menu = self.menuBar().addMenu("&Game")

        load_action = QtGui.QAction("&Load Config...", self)
        load_action.setShortcut(QtGui.QKeySequence.Open)
        load_action.triggered.connect(self._on_load)
        game_menu.addAction(load_action)

        reset_action = QtGui.QAction("&Restart", self)
        reset_action.triggered.connect(self._on_reset)
        game_menu.addAction(reset_action)

        frame_action = QtGui.QAction("&Frame Bodies", self)
        frame_action.triggered.connect(self._frame_scene)
        game_menu.addAction(frame_action)

        game_menu.addSeparator()
        quit_action = QtGui.QAction("&Quit", self)
        quit_action.setShortcut(QtGui.QKeySequence.Quit)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(quit_action)

    def _start_loops(self) -> None:
        config = self._controller.config
        assert config is not None
        self._tick_timer.setInterval(max(1, int(round(1000.0 * config.physics.dt))))
        self._announced = False
        self._viewport.clear_banner()
        self._tick_timer.start()
        self._frame_timer.start()

    def _frame_scene(self) -> None:
        world = self._controller.world
        if world is None:
            return
        points = []
        for body in world.massive_bodies:
            points.append(body.position + body.radius)
            points.append(body.position - body.radius)
        self._viewport.frame_points(np.asarray(points))

    def _on_tick(self) -> None:
        self._controller.step_once()

    def _on_frame(self) -> None:
        state = self._controller.frame()
        if state is None:
            return
        self._viewport.set_frame(state)
        if state.outcome is Outcome.REACHED_TARGET and not self._announced:
            self._announced = True
            self.objective_reached.emit()
            return
        self._update_status()

    def _on_objective_reached(self) -> None:
        self._viewport.show_banner(SUCCESS_MESSAGE)
        self.statusBar().showMessage(SUCCESS_MESSAGE)

    def _on_key_text(self, text: str) -> None:
        action = action_for_key(text)
        if action is None:
            return
        if action is Action.RESET:
            self._on_reset()
            return
        self._controller.handle_action(action)

    def keyPressEvent(self, event: QtGui.QKeyEvent) -> None:  # noqa: N802
        if action_for_key(event.text()) is None:
            super().keyPressEvent(event)
            return
        self._on_key_text(event.text())

    def _on_reset(self) -> None:
        if self._controller.reset():
            self._start_loops()
            self.statusBar().showMessage("Restarted")

    def _on_load(self) -> None:
        path, _ = QtWidgets.QFileDialog.getOpenFileName(
            self, "Load Game Config", "", "Game config (*.json)"
        )
        if not path:
            return
        try:
            self._controller.load_file(Path(path))
        except (OSError, ValueError) as exc:
            QtWidgets.QMessageBox.critical(self, "Load failed", str(exc))
            return
        self._start_loops()
        self._frame_scene()
        self.statusBar().showMessage(f"Loaded {Path(path).name}")

    def _update_status(self) -> None:
        info = self._controller.diagnostics()
        msg = (
            f"t={float(info['time']):.1f}s | "
            f"speed={float(info['speed']):.1f} | "
            f"alt Earth={float(info['altitude_primary']):.0f} | "
            f"alt Moon={float(info['altitude_secondary']):.0f} | "
            f"thrust={'on' if info['thrust'] else 'off'}"
        )
        self.statusBar().showMessage(msg)
