from __future__ import annotations

from pathlib import Path

import numpy as np

from moonshot.app.controls import Action
from moonshot.app.game_controller import GameController
from moonshot.core.world import Outcome
from moonshot.io import GameConfig, default_definition


def _config_path() -> Path:
    return Path(__file__).resolve().parents[1] / "examples" / "configs" / "default.json"


def _teleport_to_target(controller: GameController) -> None:
    world = controller.world
    assert world is not None
    world.craft.handle.position = world.secondary.position + np.array([-100.0, 0.0])


def test_empty_controller_is_inert() -> None:
    controller = GameController()
    assert controller.world is None
    assert not controller.step_once()
    assert not controller.reset()
    assert controller.frame() is None
    assert len(controller.predict()) == 0
    assert controller.check_outcome() is Outcome.RUNNING
    assert not controller.handle_action(Action.TOGGLE_THRUST)
    assert controller.diagnostics() == {"tick": 0, "time": 0.0}


def test_load_file_builds_runtime() -> None:
    controller = GameController()
    controller.load_file(_config_path())
    assert controller.runtime is not None
    assert controller.config == GameConfig()
    assert controller.config_path == _config_path()
    assert controller.tick_loop.running
    assert controller.frame_loop.running


def test_load_definition() -> None:
    defn = default_definition()
    defn["craft"]["thrust"] = 35.0
    controller = GameController()
    controller.load_definition(defn)
    assert controller.world is not None
    assert controller.world.craft.spec.thrust == 35.0


def test_step_and_reset_are_deterministic() -> None:
    controller = GameController(GameConfig())
    initial = controller.world.craft.position.copy()

    controller.handle_action(Action.TOGGLE_THRUST)
    for _ in range(30):
        assert controller.step_once()
    first = controller.world.craft.position.copy()
    assert not np.array_equal(first, initial)

    assert controller.reset()
    assert np.array_equal(controller.world.craft.position, initial)
    assert controller.world.tick_count == 0
    assert not controller.world.craft.thrusting

    controller.handle_action(Action.TOGGLE_THRUST)
    for _ in range(30):
        controller.step_once()
    assert np.array_equal(controller.world.craft.position, first)


def test_actions_drive_craft() -> None:
    controller = GameController(GameConfig())
    craft = controller.world.craft
    assert controller.handle_action(Action.TOGGLE_THRUST)
    assert craft.thrusting
    assert controller.handle_action(Action.ROTATE_NEGATIVE)
    assert craft.rotation_rate == -craft.spec.rotation_rate
    assert controller.handle_action(Action.ROTATE_POSITIVE)
    assert craft.rotation_rate == craft.spec.rotation_rate
    assert controller.handle_action(Action.STOP_ROTATION)
    assert craft.rotation_rate == 0.0
    assert controller.handle_action(Action.TOGGLE_THRUST)
    assert not craft.thrusting

    info = controller.diagnostics()
    assert info["thrust"] == 0.0
    assert info["rotation_rate"] == 0.0


def test_frame_contents() -> None:
    controller = GameController(GameConfig())
    state = controller.frame()
    assert state is not None
    assert [b.name for b in state.bodies] == ["Earth", "Moon", "Craft"]
    assert [b.vertices.shape for b in state.bodies] == [(16, 2), (12, 2), (3, 2)]
    assert state.outcome is Outcome.RUNNING
    assert not state.indicator.thrusting
    assert len(state.trajectory) > 0
    assert state.trajectory.impact_body == 0


def test_reaching_target_halts_both_loops() -> None:
    controller = GameController(GameConfig())
    stopped: list[str] = []
    controller.tick_loop.on_stop = lambda: stopped.append("tick")
    controller.frame_loop.on_stop = lambda: stopped.append("frame")

    _teleport_to_target(controller)
    state = controller.frame()
    assert state is not None
    assert state.outcome is Outcome.REACHED_TARGET
    assert controller.outcome is Outcome.REACHED_TARGET
    assert sorted(stopped) == ["frame", "tick"]

    assert not controller.step_once()
    assert controller.frame() is None
    assert not controller.handle_action(Action.TOGGLE_THRUST)
    assert controller.diagnostics()["outcome"] == "reached_target"


def test_reset_after_win_restarts() -> None:
    controller = GameController(GameConfig())
    _teleport_to_target(controller)
    controller.frame()
    assert controller.outcome is Outcome.REACHED_TARGET

    assert controller.handle_action(Action.RESET)
    assert controller.outcome is Outcome.RUNNING
    assert controller.tick_loop.running
    assert controller.frame_loop.running
    assert controller.step_once()
