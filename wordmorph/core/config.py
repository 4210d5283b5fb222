"""wordmorph Configuration.

Typed configuration records for every tunable part of the engine.
Each record validates itself on construction, so a bad value fails at
the point it is introduced rather than as NaN drifting through the
morph loop several frames later.

Records:
- LayerWeights:  phonetic / semantic / sentiment / context weights
- ContextConfig: short-term capacity and long-term decay rates
- FusionConfig:  layer weights, output smoothing, scale fallback
- MorphConfig:   momentum model, speeds, history, anticipation, blending

BUILD ID: config_v1.0
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, fields, asdict, replace
from typing import Any, Dict, Tuple

logger = logging.getLogger(__name__)


# ============================================================================
# VALIDATION HELPERS
# ============================================================================

def _check_finite(name: str, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value!r}")


def _check_range(name: str, value: float, low: float, high: float,
                 low_inclusive: bool = True, high_inclusive: bool = True) -> None:
    _check_finite(name, value)
    above = value >= low if low_inclusive else value > low
    below = value <= high if high_inclusive else value < high
    if not (above and below):
        lo = '[' if low_inclusive else '('
        hi = ']' if high_inclusive else ')'
        raise ValueError(f"{name} must be in {lo}{low}, {high}{hi}, got {value!r}")


def _known_kwargs(cls, data: Dict[str, Any]) -> Dict[str, Any]:
    """Filter ``data`` down to the dataclass fields of ``cls``."""
    names = {f.name for f in fields(cls)}
    unknown = sorted(set(data) - names)
    if unknown:
        logger.warning("Ignoring unknown %s options: %s", cls.__name__, ", ".join(unknown))
    return {k: v for k, v in data.items() if k in names}


# ============================================================================
# LAYER WEIGHTS
# ============================================================================

@dataclass(frozen=True)
class LayerWeights:
    """Relative weights of the analysis layers.

    The three layer weights are renormalized to sum to 1 before fusion,
    so only their ratios matter. ``context`` is an absolute influence
    in 0-1 used when blending with accumulated context.
    """
    phonetic: float = 0.25
    semantic: float = 0.35
    sentiment: float = 0.25
    context: float = 0.15

    def __post_init__(self) -> None:
        for name in ('phonetic', 'semantic', 'sentiment'):
            _check_range(f"weights.{name}", getattr(self, name), 0.0, math.inf,
                         high_inclusive=False)
        _check_range("weights.context", self.context, 0.0, 1.0)
        if self.phonetic + self.semantic + self.sentiment <= 0:
            raise ValueError("at least one layer weight must be positive")

    def normalized(self) -> Tuple[float, float, float]:
        """(phonetic, semantic, sentiment) scaled to sum to 1."""
        total = self.phonetic + self.semantic + self.sentiment
        return self.phonetic / total, self.semantic / total, self.sentiment / total

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LayerWeights':
        return cls(**_known_kwargs(cls, data))


# ============================================================================
# CONTEXT
# ============================================================================

@dataclass(frozen=True)
class ContextConfig:
    """Context accumulator tuning.

    Attributes:
        short_term_size: Number of recent words kept in short-term memory.
        long_term_decay: Per-second decay of long-term memory toward neutral.
        parameter_decay: EMA retention when blending a new word into long-term.
    """
    short_term_size: int = 5
    long_term_decay: float = 0.95
    parameter_decay: float = 0.9

    def __post_init__(self) -> None:
        if isinstance(self.short_term_size, bool) or not isinstance(self.short_term_size, int):
            raise ValueError(f"short_term_size must be an int, got {self.short_term_size!r}")
        if self.short_term_size < 1:
            raise ValueError(f"short_term_size must be >= 1, got {self.short_term_size}")
        _check_range("long_term_decay", self.long_term_decay, 0.0, 1.0, low_inclusive=False)
        _check_range("parameter_decay", self.parameter_decay, 0.0, 1.0)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ContextConfig':
        return cls(**_known_kwargs(cls, data))


# ============================================================================
# FUSION
# ============================================================================

@dataclass(frozen=True)
class FusionConfig:
    """Fusion engine tuning.

    Attributes:
        weights: Layer weights.
        smoothing: Retention of the previous output in the output EMA.
        magic_context_influence: Context influence used for magic words.
        default_scale: Scale used when nothing else suggests one.
        context: Settings for the engine's context accumulator.
    """
    weights: LayerWeights = field(default_factory=LayerWeights)
    smoothing: float = 0.3
    magic_context_influence: float = 0.3
    default_scale: str = 'pentatonic'
    context: ContextConfig = field(default_factory=ContextConfig)

    def __post_init__(self) -> None:
        _check_range("smoothing", self.smoothing, 0.0, 1.0, high_inclusive=False)
        _check_range("magic_context_influence", self.magic_context_influence, 0.0, 1.0)
        if not isinstance(self.default_scale, str) or not self.default_scale:
            raise ValueError("default_scale must be a non-empty string")

    def with_weights(self, **partial: float) -> 'FusionConfig':
        """Copy with some layer weights replaced."""
        return replace(self, weights=replace(self.weights, **partial))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FusionConfig':
        kwargs = _known_kwargs(cls, data)
        if isinstance(kwargs.get('weights'), dict):
            kwargs['weights'] = LayerWeights.from_dict(kwargs['weights'])
        if isinstance(kwargs.get('context'), dict):
            kwargs['context'] = ContextConfig.from_dict(kwargs['context'])
        return cls(**kwargs)


# ============================================================================
# MORPH
# ============================================================================

@dataclass(frozen=True)
class MorphConfig:
    """Parameter manager tuning.

    Attributes:
        momentum_decay: Velocity retention per tick.
        acceleration_factor: Pull strength toward the effective target.
        max_velocity: Velocity clamp (absolute).
        max_dt: Longest tick honoured, in seconds.
        speeds: Per-parameter speed overrides merged over MORPH_SPEEDS.
        max_history: History capacity.
        anticipation_timeout_ms: Anticipation auto-expiry.
        anticipation_influence: Default pull toward a predicted vector.
        blend_duration_ms: Default blend duration.
        settle_epsilon: Below this |diff| and |velocity| a parameter is settled.
    """
    momentum_decay: float = 0.85
    acceleration_factor: float = 0.15
    max_velocity: float = 2.0
    max_dt: float = 0.1
    speeds: Dict[str, float] = field(default_factory=dict)
    max_history: int = 50
    anticipation_timeout_ms: float = 1500.0
    anticipation_influence: float = 0.1
    blend_duration_ms: float = 300.0
    settle_epsilon: float = 1e-4

    def __post_init__(self) -> None:
        _check_range("momentum_decay", self.momentum_decay, 0.0, 1.0, high_inclusive=False)
        _check_range("acceleration_factor", self.acceleration_factor, 0.0, 1.0,
                     low_inclusive=False)
        _check_range("max_velocity", self.max_velocity, 0.0, math.inf,
                     low_inclusive=False, high_inclusive=False)
        _check_range("max_dt", self.max_dt, 0.0, math.inf,
                     low_inclusive=False, high_inclusive=False)
        for key, speed in self.speeds.items():
            _check_range(f"speeds[{key!r}]", speed, 0.0, math.inf,
                         low_inclusive=False, high_inclusive=False)
        if isinstance(self.max_history, bool) or not isinstance(self.max_history, int) \
                or self.max_history < 1:
            raise ValueError(f"max_history must be a positive int, got {self.max_history!r}")
        _check_range("anticipation_timeout_ms", self.anticipation_timeout_ms, 0.0, math.inf,
                     high_inclusive=False)
        _check_range("anticipation_influence", self.anticipation_influence, 0.0, 1.0)
        _check_range("blend_duration_ms", self.blend_duration_ms, 0.0, math.inf,
                     high_inclusive=False)
        _check_range("settle_epsilon", self.settle_epsilon, 0.0, 1.0, low_inclusive=False)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MorphConfig':
        return cls(**_known_kwargs(cls, data))
