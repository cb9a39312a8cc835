"""
This initialization file exposes the public API of the gravsim package.

It re-exports the Body Store (Body, BodyView, Universe, UniverseSnapshot), the Force
Model (gravitational_force, pairwise_forces), the semi-implicit Euler Integrator, the
speed control pieces (SpeedController, Slider, SpeedControlChannel), the
SimulationClock and the NBodySimulation loop, together with the loader, report,
renderer, validation, diagnostics and initial-condition helpers that surround them.
"""

from .sim_config import SimConfig
from .constants import G

from .body import Body
from .body_view import BodyView
from .universe import Universe, UniverseSnapshot
from .forces import gravitational_force, pairwise_forces, pair_geometry
from .integrator import Integrator
from .speed_controller import SpeedController, Slider, scale, clamp
from .control_channel import SpeedControlChannel
from .clock import SimulationClock
from .simulation import NBodySimulation, LoopState

from .renderer import FrameSink, NullRenderer, TrajectoryRecorder, PanelRenderer, scale_to_panel
from .universe_loader import load_universe, parse_universe
from .report import format_report, report_frame, write_report_csv
from .simulation_validator import SimulationValidator
from .diagnostics import Diagnostics
from .physics_utils import remove_center_of_mass_velocity, circular_speed, orbital_period
from .generators import SpecializedGenerators




__all__ = [
    "SimConfig",
    "G",
    "Body",
    "BodyView",
    "Universe",
    "UniverseSnapshot",
    "gravitational_force",
    "pairwise_forces",
    "pair_geometry",
    "Integrator",
    "SpeedController",
    "Slider",
    "scale",
    "clamp",
    "SpeedControlChannel",
    "SimulationClock",
    "NBodySimulation",
    "LoopState",
    "FrameSink",
    "NullRenderer",
    "TrajectoryRecorder",
    "PanelRenderer",
    "scale_to_panel",
    "load_universe",
    "parse_universe",
    "format_report",
    "report_frame",
    "write_report_csv",
    "SimulationValidator",
    "Diagnostics",
    "remove_center_of_mass_velocity",
    "circular_speed",
    "orbital_period",
    "SpecializedGenerators",
]
