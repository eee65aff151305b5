from twostack.codec import decode, encode, load_machine, save_machine
from twostack.constants import BOTTOM, EPSILON, Verdict
from twostack.engine import EngineSettings, ExecutionEngine, RunResult, TraceStep
from twostack.models import Configuration, Transition
from twostack.validator import ConfigurationValidator

__all__ = [
    "BOTTOM",
    "EPSILON",
    "Configuration",
    "ConfigurationValidator",
    "EngineSettings",
    "ExecutionEngine",
    "RunResult",
    "TraceStep",
    "Transition",
    "Verdict",
    "decode",
    "encode",
    "load_machine",
    "save_machine",
]
