from .action_handler import ActionHandler as ActionHandler
from .after_reducer import AfterReducer as AfterReducer
from .effect_middleware import EffectMiddleware as EffectMiddleware
from .gateable import Gateable as Gateable
from .io import IO as IO
from .middleware import Middleware as Middleware
from .types import (
    ControlActionMap as ControlActionMap,
    FlagStateMap as FlagStateMap,
    GetState as GetState,
    Projection as Projection,
    StateMap as StateMap,
)
