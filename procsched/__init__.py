"""CPU scheduling simulation: FCFS, Round Robin and non-preemptive Priority."""

from .errors import EmptyInputError, InvalidProcessError, SchedulingError
from .process import ProcessSpec, ProcessState
from .simulator import ExecSlice, Simulation, SimulationConfig, SimulationResult
from . import round_robin
from . import schedulers
from . import workload
from . import metrics
from . import evaluation

__all__ = [
	"ProcessSpec",
	"ProcessState",
	"ExecSlice",
	"Simulation",
	"SimulationConfig",
	"SimulationResult",
	"SchedulingError",
	"InvalidProcessError",
	"EmptyInputError",
	"round_robin",
	"schedulers",
	"workload",
	"metrics",
	"evaluation",
]
