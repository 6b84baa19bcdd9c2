from .gated_effect_middleware import GatedEffectMiddleware as GatedEffectMiddleware
from .gated_middleware import GatedMiddleware as GatedMiddleware
