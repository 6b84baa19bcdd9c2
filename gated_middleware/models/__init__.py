from .action_source import ActionSource as ActionSource
from .dispatched_action import DispatchedAction as DispatchedAction
from .gate_state import GateState as GateState
