"""Game definition I/O and adapters.

A game definition is a JSON object with ``schema_version: 1``. Every other
section is optional and falls back to the defaults of the core dataclasses:

    {
      "schema_version": 1,
      "simulation": {"tick_rate": 60, "gravitational_constant": 300, "min_distance": 1},
      "prediction": {"tick_rate": 24, "horizon": 100, "integrator": "symplectic_euler"},
      "layout": {"primary_position": [0, 0], "secondary_offset": [1000, 0]},
      "bodies": {"primary": {...}, "secondary": {...}},
      "craft": {"radius": 20, "mass": 1, "thrust": 20, "rotation_rate": 0.42},
      "orbit": {"angular_step": -1e-05, "speed": 6}
    }
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field, replace
from pathlib import Path
from typing import Any

from ..core.bodies import EARTH, MOON, BodySpec
from ..core.craft import CraftSpec
from ..core.integrators import INTEGRATORS
from ..core.orbit import OrbitUpdate
from ..core.predictor import PredictionSettings
from ..core.world import PhysicsSettings, SimulationWorld, build_world


logger = logging.getLogger(__name__)

GameDefinition = dict[str, Any]

_BODY_KEYS = ("name", "radius", "mass", "edges", "influence_radius", "angular_velocity")
_CRAFT_KEYS = ("radius", "mass", "thrust", "rotation_rate", "spawn_clearance")
_SECTIONS = (
    "schema_version",
    "simulation",
    "prediction",
    "layout",
    "bodies",
    "craft",
    "orbit",
)


@dataclass(frozen=True, slots=True)
class GameConfig:
    physics: PhysicsSettings = field(default_factory=PhysicsSettings)
    prediction: PredictionSettings = field(default_factory=PredictionSettings)
    primary: BodySpec = EARTH
    secondary: BodySpec = MOON
    craft: CraftSpec = field(default_factory=CraftSpec)
    orbit: OrbitUpdate = field(default_factory=OrbitUpdate)
    primary_position: tuple[float, float] = (0.0, 0.0)
    secondary_offset: tuple[float, float] = (1000.0, 0.0)

    def build_world(self) -> SimulationWorld:
        return build_world(
            physics=self.physics,
            primary=self.primary,
            secondary=self.secondary,
            craft=self.craft,
            primary_position=self.primary_position,
            secondary_offset=self.secondary_offset,
        )


def default_definition() -> GameDefinition:
    return config_to_definition(GameConfig())


def load_definition(path: str | Path) -> GameDefinition:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    defn = validate_definition(data)
    logger.debug("loaded game definition from %s", path)
    return defn


def save_definition(path: str | Path, defn: GameDefinition) -> None:
    Path(path).write_text(
        json.dumps(defn, indent=2, sort_keys=True),
        encoding="utf-8",
    )


def load_config(path: str | Path) -> GameConfig:
    return definition_to_config(load_definition(path))


def config_to_definition(config: GameConfig) -> GameDefinition:
    return {
        "schema_version": 1,
        "simulation": asdict(config.physics),
        "prediction": asdict(config.prediction),
        "layout": {
            "primary_position": list(config.primary_position),
            "secondary_offset": list(config.secondary_offset),
        },
        "bodies": {
            "primary": asdict(config.primary),
            "secondary": asdict(config.secondary),
        },
        "craft": asdict(config.craft),
        "orbit": asdict(config.orbit),
    }


def definition_to_config(defn: GameDefinition) -> GameConfig:
    defn = validate_definition(defn)
    base = GameConfig()
    sim = defn.get("simulation", {})
    pred = defn.get("prediction", {})
    layout = defn.get("layout", {})
    bodies = defn.get("bodies", {})
    orbit = defn.get("orbit", {})
    return GameConfig(
        physics=replace(base.physics, **_floats(sim)),
        prediction=replace(
            base.prediction,
            **_floats({k: v for k, v in pred.items() if k != "integrator"}),
            **({"integrator": pred["integrator"]} if "integrator" in pred else {}),
        ),
        primary=_body_spec(base.primary, bodies.get("primary", {})),
        secondary=_body_spec(base.secondary, bodies.get("secondary", {})),
        craft=replace(base.craft, **_floats(defn.get("craft", {}))),
        orbit=replace(base.orbit, **_floats(orbit)),
        primary_position=_pair(layout.get("primary_position", base.primary_position)),
        secondary_offset=_pair(layout.get("secondary_offset", base.secondary_offset)),
    )


def _floats(section: dict[str, Any]) -> dict[str, float]:
    return {key: float(value) for key, value in section.items()}


def _pair(values: Any) -> tuple[float, float]:
    return (float(values[0]), float(values[1]))


def _body_spec(base: BodySpec, section: dict[str, Any]) -> BodySpec:
    kwargs: dict[str, Any] = {}
    for key, value in section.items():
        if key == "name":
            kwargs[key] = str(value)
        elif key == "edges":
            kwargs[key] = int(value)
        else:
            kwargs[key] = float(value)
    return replace(base, **kwargs)


def _require(obj: dict[str, Any], key: str, ctx: str) -> Any:
    if key not in obj:
        raise ValueError(f"missing required field: {ctx}.{key}")
    return obj[key]


def _section(data: dict[str, Any], key: str, allowed: tuple[str, ...]) -> dict[str, Any]:
    section = data.get(key, {})
    if not isinstance(section, dict):
        raise ValueError(f"{key} must be an object")
    for entry in section:
        if entry not in allowed:
            raise ValueError(f"unknown field: {key}.{entry}")
    return section


def _check_number(
    section: dict[str, Any],
    key: str,
    ctx: str,
    minimum: float | None = None,
    strict: bool = False,
) -> None:
    if key not in section:
        return
    value = section[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{ctx}.{key} must be a number")
    if minimum is None:
        return
    if strict and value <= minimum:
        raise ValueError(f"{ctx}.{key} must be > {minimum:g}")
    if not strict and value < minimum:
        raise ValueError(f"{ctx}.{key} must be >= {minimum:g}")


def _check_pair(section: dict[str, Any], key: str, ctx: str) -> None:
    if key not in section:
        return
    value = section[key]
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"{ctx}.{key} must have length 2")
    for item in value:
        if isinstance(item, bool) or not isinstance(item, (int, float)):
            raise ValueError(f"{ctx}.{key} must contain numbers")


def validate_definition(data: Any) -> GameDefinition:
    if not isinstance(data, dict):
        raise ValueError("game definition must be a JSON object")
    if _require(data, "schema_version", "definition") != 1:
        raise ValueError("schema_version must be 1")
    for key in data:
        if key not in _SECTIONS:
            raise ValueError(f"unknown field: {key}")

    sim = _section(data, "simulation", ("tick_rate", "gravitational_constant", "min_distance"))
    _check_number(sim, "tick_rate", "simulation", 0.0, strict=True)
    _check_number(sim, "gravitational_constant", "simulation", 0.0)
    _check_number(sim, "min_distance", "simulation", 0.0, strict=True)

    pred = _section(data, "prediction", ("tick_rate", "horizon", "integrator"))
    _check_number(pred, "tick_rate", "prediction", 0.0, strict=True)
    _check_number(pred, "horizon", "prediction", 0.0)
    if "integrator" in pred and pred["integrator"] not in INTEGRATORS:
        raise ValueError("prediction.integrator invalid")

    layout = _section(data, "layout", ("primary_position", "secondary_offset"))
    _check_pair(layout, "primary_position", "layout")
    _check_pair(layout, "secondary_offset", "layout")

    bodies = _section(data, "bodies", ("primary", "secondary"))
    for role, body in bodies.items():
        ctx = f"bodies.{role}"
        if not isinstance(body, dict):
            raise ValueError(f"{ctx} must be an object")
        for entry in body:
            if entry not in _BODY_KEYS:
                raise ValueError(f"unknown field: {ctx}.{entry}")
        if "name" in body and (not isinstance(body["name"], str) or not body["name"]):
            raise ValueError(f"{ctx}.name must be a non-empty string")
        _check_number(body, "radius", ctx, 0.0, strict=True)
        _check_number(body, "mass", ctx, 0.0, strict=True)
        _check_number(body, "influence_radius", ctx, 0.0)
        _check_number(body, "angular_velocity", ctx)
        if "edges" in body:
            edges = body["edges"]
            if isinstance(edges, bool) or not isinstance(edges, int) or edges < 3:
                raise ValueError(f"{ctx}.edges must be an integer >= 3")

    craft = _section(data, "craft", _CRAFT_KEYS)
    _check_number(craft, "radius", "craft", 0.0, strict=True)
    _check_number(craft, "mass", "craft", 0.0, strict=True)
    _check_number(craft, "thrust", "craft", 0.0)
    _check_number(craft, "rotation_rate", "craft", 0.0)
    _check_number(craft, "spawn_clearance", "craft")

    orbit = _section(data, "orbit", ("angular_step", "speed"))
    _check_number(orbit, "angular_step", "orbit")
    _check_number(orbit, "speed", "orbit", 0.0)

    return data
