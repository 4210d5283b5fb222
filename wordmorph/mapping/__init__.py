"""Text analysis and fusion for wordmorph.

Semantic and sentiment lookups over injected dictionaries, the phonetic
layer interface, magic word overrides, context memory and the fusion
engine that combines them.
"""

from .semantics import SemanticClassifier, SemanticDictionary  # noqa: F401
from .sentiment import SentimentScorer, SentimentLexicon, SentimentSample  # noqa: F401
from .phonetics import PhoneticLayer, NeutralPhoneticLayer, TablePhoneticLayer  # noqa: F401
from .magic_words import MAGIC_WORDS, MagicWordEntry, MagicWordRegistry  # noqa: F401
from .context import ContextAccumulator, WordRecord  # noqa: F401
from .fusion import FusionEngine, FusionResult, quick_analyze  # noqa: F401
