from .action_gate import ActionGate as ActionGate
from .gate import Gate as Gate
from .projections import (
    to_control_action_map as to_control_action_map,
    to_state_map as to_state_map,
)
from .state_gate import StateGate as StateGate
