"""wordmorph Fusion Engine.

Combines the phonetic, semantic and sentiment layers (or a magic word
override) into one parameter vector per call, folds in accumulated
context, and smooths the result against the previous output.

PIPELINE (process_word):
------------------------
1. Magic word?  -> authored vector, context at a fixed light influence
2. Otherwise    -> phonetic + semantic lookup + sentiment, fused with
                   renormalized layer weights
3. Record the word in the context accumulator
4. Blend with immediate / short-term / long-term context
5. EMA against the previous output
6. Pick up to three scales

process_word is effectful: it writes to the context and to the
smoothing state. Use preview_word / preview_phrase for what-if
processing that leaves the engine untouched.

BUILD ID: fusion_v1.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional

import numpy as np

from ..core.config import FusionConfig, LayerWeights
from ..core.events import EventChannel, EventType
from ..core.parameters import DEFAULT_PARAMS, ParameterVector
from .context import (
    CONTEXT_FIELDS,
    ContextAccumulator,
    ContextSnapshot,
    WordRecord,
    blend_parameters,
)
from .magic_words import MagicWordEntry, MagicWordRegistry, normalize_word
from .phonetics import NeutralPhoneticLayer, PhoneticLayer, complete_phonetics
from .semantics import SemanticClassifier, SemanticMatch, neutral_fragment
from .sentiment import (
    EmotionalState,
    SentimentSample,
    SentimentScorer,
    emotional_state,
    map_to_synth_params,
)

logger = logging.getLogger(__name__)


# Short-term / long-term split of the context share
SHORT_TERM_SHARE = 0.6
LONG_TERM_SHARE = 0.4


# ============================================================================
# RESULT
# ============================================================================

@dataclass
class FusionResult:
    """Everything produced for one word or phrase.

    Attributes:
        text: The word or phrase processed.
        layers: Raw per-layer outputs (phonetic, semantic, sentiment).
        pre_context: Fused (or authored) vector before context and smoothing.
        parameters: Final fused, context-blended, smoothed vector.
        scales: Selected scales, at most three.
        context: Context snapshot taken after processing.
        is_magic_word: True when a magic word override was used.
        magic_description: Description of the magic word, if any.
        magic_entry: The magic word entry, if any.
        semantic: Semantic match (None for unknown words and magic words).
        sentiment: Sentiment sample of the text.
        emotional_state: Named emotion for the sentiment sample.
        words: Per-word results (phrases only).
    """
    text: str
    layers: Dict[str, Dict[str, float]]
    pre_context: ParameterVector
    parameters: ParameterVector
    scales: List[str]
    context: Optional[ContextSnapshot] = None
    is_magic_word: bool = False
    magic_description: Optional[str] = None
    magic_entry: Optional[MagicWordEntry] = None
    semantic: Optional[SemanticMatch] = None
    sentiment: Optional[SentimentSample] = None
    emotional_state: Optional[EmotionalState] = None
    words: List['FusionResult'] = field(default_factory=list)

    @property
    def is_phrase(self) -> bool:
        return bool(self.words)

    @property
    def is_apex_word(self) -> bool:
        return self.magic_entry is not None and self.magic_entry.is_apex_word


# ============================================================================
# ENGINE
# ============================================================================

class FusionEngine:
    """Multi-layer fusion with context memory and output smoothing.

    Parameters
    ----------
    config : FusionConfig, optional
        Weights, smoothing, magic-word influence and default scale.
    classifier : SemanticClassifier, optional
    scorer : SentimentScorer, optional
    phonetic : PhoneticLayer, optional
        External phonetic extractor (neutral texture when omitted).
    magic_words : MagicWordRegistry, optional
    context : ContextAccumulator, optional
        Built from ``config.context`` and ``clock`` when omitted.
    clock : callable, optional
        Seconds clock handed to a default-built context.
    channel : EventChannel, optional
        When given, each processed word is published as ``word:processed``.
    """

    def __init__(
        self,
        config: Optional[FusionConfig] = None,
        classifier: Optional[SemanticClassifier] = None,
        scorer: Optional[SentimentScorer] = None,
        phonetic: Optional[PhoneticLayer] = None,
        magic_words: Optional[MagicWordRegistry] = None,
        context: Optional[ContextAccumulator] = None,
        clock: Optional[Callable[[], float]] = None,
        channel: Optional[EventChannel] = None,
    ) -> None:
        self.config = config or FusionConfig()
        self.classifier = classifier or SemanticClassifier(default_scale=self.config.default_scale)
        self.scorer = scorer or SentimentScorer()
        self.phonetic = phonetic or NeutralPhoneticLayer()
        self.magic_words = magic_words if magic_words is not None else MagicWordRegistry()
        self.context = context or ContextAccumulator(self.config.context, clock)
        self.channel = channel
        self.previous_output: Optional[ParameterVector] = None

    @property
    def weights(self) -> LayerWeights:
        return self.config.weights

    def set_weights(self, **partial: float) -> None:
        """Replace some layer weights; the layer trio is renormalized on use.

        Raises ValueError for negative, non-finite or all-zero weights.
        """
        self.config = self.config.with_weights(**partial)
        logger.debug("Layer weights now %s", self.config.weights)

    # ---- Word processing ----------------------------------------------------

    def process_word(self, word: str) -> FusionResult:
        """Analyze one word and update context and smoothing state."""
        entry = self.magic_words.get(word)
        if entry is not None:
            result = self._process_magic_word(word, entry)
        else:
            result = self._process_regular_word(word)
        self._announce(result)
        return result

    def _process_regular_word(self, word: str) -> FusionResult:
        phonetic = complete_phonetics(self.phonetic.analyze(word))
        semantic = self.classifier.lookup_word(word)
        semantic_params = dict(semantic.parameters) if semantic else neutral_fragment()
        sentiment = self.scorer.analyze_sentiment(word)
        sentiment_params = map_to_synth_params(sentiment)

        fused = ParameterVector(self.fuse_parameters(phonetic, semantic_params, sentiment_params))

        self.context.add_word(WordRecord(
            word=word,
            parameters=fused.to_dict(),
            category=semantic.category if semantic else None,
            valence=sentiment.valence,
            arousal=sentiment.arousal,
            scales=tuple(semantic.scales) if semantic else (),
        ))

        contextual = self.apply_context(fused)
        smoothed = self.smooth_parameters(contextual)
        scales = self.select_scales(semantic, self.context)

        logger.debug("Fused %r: category=%s scales=%s", word,
                     semantic.category if semantic else None, scales)

        return FusionResult(
            text=word,
            layers={'phonetic': phonetic, 'semantic': semantic_params,
                    'sentiment': sentiment_params},
            pre_context=fused,
            parameters=smoothed,
            scales=scales,
            context=self.context.get_context(),
            semantic=semantic,
            sentiment=sentiment,
            emotional_state=emotional_state(sentiment.valence, sentiment.arousal),
        )

    def _process_magic_word(self, word: str, entry: MagicWordEntry) -> FusionResult:
        # Phonetic and sentiment only feed context bookkeeping here
        phonetic = complete_phonetics(self.phonetic.analyze(word))
        sentiment = self.scorer.analyze_sentiment(word)
        authored = entry.parameters.copy()

        self.context.add_word(WordRecord(
            word=normalize_word(word),
            parameters=authored.to_dict(),
            category=entry.category,
            valence=sentiment.valence,
            arousal=sentiment.arousal,
            scales=entry.scales,
            magic=True,
        ))

        contextual = self.apply_context(authored, self.config.magic_context_influence)
        smoothed = self.smooth_parameters(contextual)

        logger.info("Magic word %r (%s)", entry.word, entry.category)

        return FusionResult(
            text=word,
            layers={'phonetic': phonetic, 'semantic': authored.to_dict(), 'sentiment': {}},
            pre_context=authored,
            parameters=smoothed,
            scales=list(entry.scales),
            context=self.context.get_context(),
            is_magic_word=True,
            magic_description=entry.description,
            magic_entry=entry,
            sentiment=sentiment,
            emotional_state=emotional_state(sentiment.valence, sentiment.arousal),
        )

    def process_phrase(self, phrase: str) -> FusionResult:
        """Process every word, then re-fuse their mean with phrase-level layers.

        Each word goes through process_word (so context and smoothing
        advance once per word). The mean word vector takes the phonetic
        slot of the fusion formula; the phrase's blended semantics and
        its sentiment fill the other two.
        """
        word_results = [self.process_word(token) for token in phrase.split()]

        semantic = self.classifier.get_blended_parameters(phrase)
        sentiment = self.scorer.analyze_sentiment(phrase)
        sentiment_params = map_to_synth_params(sentiment)
        combined = self.combine_word_parameters(word_results)

        fused = ParameterVector(self.fuse_parameters(combined, semantic.parameters, sentiment_params))
        for key in ('drift', 'scale_index', 'root_note', 'octave'):
            fused[key] = combined[key]

        return FusionResult(
            text=phrase,
            layers={'phonetic': combined, 'semantic': dict(semantic.parameters),
                    'sentiment': sentiment_params},
            pre_context=fused.copy(),
            parameters=fused,
            scales=list(semantic.scales),
            context=self.context.get_context(),
            semantic=semantic,
            sentiment=sentiment,
            emotional_state=emotional_state(sentiment.valence, sentiment.arousal),
            words=word_results,
        )

    # ---- Fusion stages ------------------------------------------------------

    def fuse_parameters(self, phonetic: Mapping[str, float], semantic: Mapping[str, float],
                        sentiment: Mapping[str, float]) -> Dict[str, float]:
        """Per-field weighted fusion of the three layers.

        Texture fields come from the phonetic layer alone; motion and
        space get a fixed 0.5 in the phonetic slot; attack sharpness and
        release time split 50/50 between phonetic and sentiment.
        """
        wp, ws, wt = self.config.weights.normalized()
        ph = phonetic.get
        se = semantic.get
        st = sentiment.get

        return {
            # Texture
            'air_gain': ph('air_gain', 0.3),
            'attack_sharpness': ph('attack_sharpness', 0.5) * 0.5 + st('attack_sharpness', 0.5) * 0.5,
            'attack_time': ph('attack_time', 0.1),
            'graininess': ph('graininess', 0.2),

            # Tone
            'brilliance': ph('brilliance', 0.5) * wp + se('warmth', 0.5) * ws + st('brilliance', 0.5) * wt,
            'filter_resonance': ph('filter_resonance', 0.3),
            'filter_cutoff': st('filter_cutoff', 0.5),

            # Sustain
            'body_layer_sustain': ph('body_layer_sustain', 0.5),
            'release_time': ph('release_time', 0.3) * 0.5 + st('release_time', 0.3) * 0.5,

            # Space
            'motion': se('motion', 0.5) * ws + st('motion', 0.5) * wt + 0.5 * wp,
            'space': se('space', 0.5) * ws + st('space', 0.5) * wt + 0.5 * wp,
            'reverb_mix': st('reverb_mix', 0.3),

            # Harmony
            'harmonic_content': ph('harmonic_content', 0.5),
            'harmonic_density': st('harmonic_density', 0.5),
            'complexity': se('complexity', 0.5),

            # Time
            'tempo': st('tempo', 0.5),
            'drift_speed': st('drift_speed', 0.2),

            'warmth': se('warmth', 0.5),
        }

    def apply_context(self, params: ParameterVector,
                      influence: Optional[float] = None) -> ParameterVector:
        """Blend ``params`` with short- and long-term context.

        The context-tracked fields get weights {1 - i, 0.6 i, 0.4 i};
        harmonic density blends with the context's harmonic density by
        ``i``. Everything else passes through.
        """
        i = self.config.weights.context if influence is None else influence
        blended = blend_parameters(
            params,
            self.context.get_short_term_averages(),
            self.context.long_term,
            (1.0 - i, SHORT_TERM_SHARE * i, LONG_TERM_SHARE * i),
            CONTEXT_FIELDS,
        )

        adjusted = params.copy()
        adjusted.update(blended)
        adjusted['harmonic_density'] = (params['harmonic_density'] * (1.0 - i)
                                        + self.context.get_harmonic_density() * i)
        return adjusted

    def smooth_parameters(self, params: ParameterVector) -> ParameterVector:
        """EMA against the previous output; the first call passes through."""
        if self.previous_output is None:
            self.previous_output = params.copy()
            return params

        s = self.config.smoothing
        smoothed = params.copy()
        for key, value in params.items():
            if key in self.previous_output:
                smoothed[key] = self.previous_output[key] * s + value * (1.0 - s)
        self.previous_output = smoothed.copy()
        return smoothed

    def select_scales(self, semantic: Optional[SemanticMatch],
                      context: ContextAccumulator) -> List[str]:
        """Immediate scales first, then the dominant historical scale, max three."""
        scales = list(semantic.scales) if semantic else []
        dominant = context.get_dominant_scale()
        if dominant and dominant not in scales:
            scales.append(dominant)
        if not scales:
            scales.append(self.config.default_scale)
        return scales[:3]

    def combine_word_parameters(self, results: List[FusionResult]) -> Dict[str, float]:
        """Arithmetic mean of the per-word output vectors."""
        if not results:
            return dict(DEFAULT_PARAMS)
        keys = list(results[0].parameters.keys())
        matrix = np.array([[r.parameters[k] for k in keys] for r in results], dtype=np.float64)
        means = matrix.mean(axis=0)
        return {k: float(means[n]) for n, k in enumerate(keys)}

    # ---- Previews -----------------------------------------------------------

    def _fork(self) -> 'FusionEngine':
        """Disposable engine sharing lookups but not context or smoothing."""
        shadow = FusionEngine(
            config=self.config,
            classifier=self.classifier,
            scorer=self.scorer,
            phonetic=self.phonetic,
            magic_words=self.magic_words,
            context=self.context.clone(),
        )
        if self.previous_output is not None:
            shadow.previous_output = self.previous_output.copy()
        return shadow

    def preview_word(self, word: str) -> FusionResult:
        """process_word without touching this engine's state."""
        return self._fork().process_word(word)

    def preview_phrase(self, phrase: str) -> FusionResult:
        """process_phrase without touching this engine's state."""
        return self._fork().process_phrase(phrase)

    def preview(self, text: str) -> FusionResult:
        """Preview as a phrase when ``text`` has several words."""
        if len(text.split()) > 1:
            return self.preview_phrase(text)
        return self.preview_word(text)

    # ---- Session ------------------------------------------------------------

    def reset(self) -> None:
        self.context.reset()
        self.previous_output = None
        logger.info("Fusion engine reset")

    def get_stats(self) -> Dict[str, Any]:
        return self.context.get_session_stats()

    def _announce(self, result: FusionResult) -> None:
        if self.channel is not None:
            self.channel.publish(EventType.WORD_PROCESSED, result)


def quick_analyze(text: str, **engine_kwargs: Any) -> FusionResult:
    """One-shot analysis on a fresh engine (phrase when ``text`` has spaces)."""
    engine = FusionEngine(**engine_kwargs)
    if len(text.split()) > 1:
        return engine.process_phrase(text)
    return engine.process_word(text)
