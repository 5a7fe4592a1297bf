"""Physics and prediction core."""

from .bodies import EARTH, MOON, BodySpec, MassiveBody  # noqa: F401
from .craft import Craft, CraftSpec, Indicator  # noqa: F401
from .orbit import OrbitUpdate  # noqa: F401
from .outcome import LoopHandle, OutcomeCheck  # noqa: F401
from .predictor import PredictionSettings, Trajectory, TrajectoryPredictor  # noqa: F401
from .step import SimulationStep  # noqa: F401
from .world import Outcome, PhysicsSettings, SimulationWorld, build_world  # noqa: F401
