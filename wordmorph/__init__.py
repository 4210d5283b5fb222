"""wordmorph package.

Word-driven parameter morphing: free text in, a continuously evolving
vector of synthesis / visualization control values out.

LAYERS:
- Semantic:  keyword categories with base fragments and preferred scales
- Sentiment: valence / arousal lexicon with modifier words
- Phonetic:  supplied by the host through the PhoneticLayer interface
- Magic words: curated overrides with authored vectors

ENGINE:
- FusionEngine blends the layers with context memory and smoothing
- ParameterManager eases the live vector toward fused targets
- MorphSession wires both over one event channel
"""

__version__ = "1.0.0"
__build__ = "wordmorph_v1.0"

from .core import (  # noqa: F401
    EventChannel,
    EventType,
    FusionConfig,
    LayerWeights,
    ContextConfig,
    MorphConfig,
    MorphSession,
    ParameterManager,
    ParameterVector,
)
from .mapping import (  # noqa: F401
    ContextAccumulator,
    FusionEngine,
    FusionResult,
    MagicWordRegistry,
    SemanticClassifier,
    SentimentScorer,
    quick_analyze,
)

__all__ = ["core", "mapping"]
