"""Core state for wordmorph.

The parameter vector and its tables, typed configuration, the event
channel, the ParameterManager that animates the live vector, and the
MorphSession that ties a fusion engine to a manager.
"""

from .parameters import ParameterVector, DEFAULT_PARAMS, MORPH_SPEEDS  # noqa: F401
from .config import LayerWeights, ContextConfig, FusionConfig, MorphConfig  # noqa: F401
from .events import EventChannel, EventType, ChannelEvent  # noqa: F401
from .parameter_manager import ParameterManager, MorphState  # noqa: F401
from .session import MorphSession  # noqa: F401
