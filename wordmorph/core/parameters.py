"""wordmorph Parameter Vector.

The canonical set of named control values shared by the fusion engine,
the context accumulator and the parameter manager. Downstream synthesis
and rendering collaborators read one of these every frame.

RANGE RULES:
------------
1. Every bounded parameter lives in 0.0-1.0 and is clamped on every write
2. ``scale_index``, ``root_note`` and ``octave`` are unconstrained
3. Reading a parameter nobody declared returns the neutral value 0.5

BUILD ID: parameters_v1.0
"""

from __future__ import annotations

import math
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union


# ============================================================================
# PARAMETER DEFINITIONS
# ============================================================================

NEUTRAL = 0.5

# Declared parameters and their resting values
DEFAULT_PARAMS: Dict[str, float] = {
    # Audio synthesis
    'air_gain': 0.3,
    'attack_sharpness': 0.5,
    'attack_time': 0.1,
    'graininess': 0.2,
    'brilliance': 0.5,
    'filter_resonance': 0.3,
    'filter_cutoff': 0.5,
    'body_layer_sustain': 0.5,
    'release_time': 0.3,
    'motion': 0.5,
    'space': 0.5,
    'reverb_mix': 0.3,
    'harmonic_content': 0.5,
    'harmonic_density': 0.5,
    'complexity': 0.5,
    'tempo': 0.5,
    'drift': 0.2,
    'drift_speed': 0.2,
    'warmth': 0.5,

    # Visual
    'hue': 0.5,
    'saturation': 0.6,
    'lightness': 0.5,
    'particle_speed': 0.5,
    'particle_size': 0.5,
    'glow_intensity': 0.3,
    'noise_amount': 0.2,
    'flow_speed': 0.3,
    'turbulence': 0.3,

    # Scale
    'scale_index': 0.0,
    'root_note': 60.0,
    'octave': 4.0,
}

# Fields exempt from 0-1 clamping
UNBOUNDED_PARAMS = frozenset({'scale_index', 'root_note', 'octave'})

PARAMETER_CATEGORIES: Dict[str, Tuple[str, ...]] = {
    'audio': (
        'brilliance', 'attack_sharpness', 'attack_time', 'filter_cutoff', 'graininess',
        'motion', 'warmth', 'harmonic_content', 'filter_resonance', 'tempo', 'complexity',
        'space', 'reverb_mix', 'release_time', 'body_layer_sustain', 'air_gain',
        'drift', 'drift_speed', 'harmonic_density',
    ),
    'visual': (
        'hue', 'saturation', 'lightness', 'particle_speed', 'particle_size',
        'glow_intensity', 'noise_amount', 'flow_speed', 'turbulence',
    ),
    'scale': ('scale_index', 'root_note', 'octave'),
}


# ============================================================================
# MORPH SPEEDS
# ============================================================================

# Per-parameter speed multipliers for the momentum model.
# Fast (2-3): immediate response. Medium (~1): gradual blending.
# Slow (0.5-0.6): needs time to develop. Very slow (0.25-0.3): subtle evolution.
MORPH_SPEEDS: Dict[str, float] = {
    # Fast
    'brilliance': 2.0,
    'attack_sharpness': 2.5,
    'attack_time': 3.0,
    'filter_cutoff': 2.0,
    'graininess': 2.5,

    # Medium
    'motion': 1.0,
    'warmth': 1.0,
    'harmonic_content': 1.2,
    'filter_resonance': 1.0,
    'tempo': 0.8,
    'complexity': 1.0,

    # Slow
    'space': 0.5,
    'reverb_mix': 0.5,
    'release_time': 0.6,
    'body_layer_sustain': 0.6,

    # Very slow
    'drift': 0.25,
    'drift_speed': 0.25,
    'harmonic_density': 0.3,

    # Visual
    'hue': 1.5,
    'saturation': 1.2,
    'lightness': 1.5,
    'particle_speed': 1.0,
    'particle_size': 1.2,
    'glow_intensity': 1.5,
}

DEFAULT_MORPH_SPEED = 1.0


# ============================================================================
# HELPERS
# ============================================================================

def clamp_unit(value: float) -> float:
    """Clamp to the 0-1 range."""
    return max(0.0, min(1.0, value))


def clamp_param(key: str, value: float) -> float:
    """Clamp ``value`` unless ``key`` is one of the unbounded fields."""
    value = float(value)
    if key in UNBOUNDED_PARAMS:
        return value
    return clamp_unit(value)


def is_number(value) -> bool:
    """True for real numbers (bools excluded)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# ============================================================================
# PARAMETER VECTOR
# ============================================================================

class ParameterVector:
    """A named set of continuous control values.

    Behaves like a ``dict`` of ``str -> float`` with three extra rules:
    declared keys are always present, missing keys read as 0.5, and
    bounded keys are clamped on every write.

    Parameters
    ----------
    values : mapping, optional
        Initial values. Non-numeric entries are ignored.
    fill_defaults : bool
        Start from DEFAULT_PARAMS before applying ``values`` (default True).
    """

    __slots__ = ('_values', '_frozen')

    def __init__(
        self,
        values: Optional[Union[Mapping[str, float], 'ParameterVector']] = None,
        fill_defaults: bool = True,
    ) -> None:
        self._frozen = False
        self._values: Dict[str, float] = dict(DEFAULT_PARAMS) if fill_defaults else {}
        if values is not None:
            self.update(values)

    # ---- Mapping protocol ---------------------------------------------------

    def __getitem__(self, key: str) -> float:
        return self._values.get(key, NEUTRAL)

    def __setitem__(self, key: str, value: float) -> None:
        if self._frozen:
            raise TypeError("ParameterVector is read-only")
        self._values[key] = clamp_param(key, value)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ParameterVector):
            return self._values == other._values
        if isinstance(other, Mapping):
            return self._values == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v:.3f}" for k, v in self._values.items())
        return f"ParameterVector({inner})"

    def get(self, key: str, default: Optional[float] = None) -> float:
        if key in self._values:
            return self._values[key]
        return NEUTRAL if default is None else default

    def keys(self):
        return self._values.keys()

    def values(self):
        return self._values.values()

    def items(self):
        return self._values.items()

    # ---- Mutation -----------------------------------------------------------

    def update(self, values: Union[Mapping[str, float], 'ParameterVector']) -> None:
        """Write every numeric entry of ``values`` (clamped)."""
        for key, value in values.items():
            if is_number(value) and not math.isnan(value):
                self[key] = value

    def freeze(self) -> 'ParameterVector':
        """Make this vector read-only and return it."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ---- Conversion ---------------------------------------------------------

    def copy(self) -> 'ParameterVector':
        """Mutable copy (even of a frozen vector)."""
        clone = ParameterVector(fill_defaults=False)
        clone._values = dict(self._values)
        return clone

    def to_dict(self) -> Dict[str, float]:
        return dict(self._values)

    def subset(self, keys: Iterable[str]) -> Dict[str, float]:
        """Values for ``keys`` that are present in this vector."""
        return {k: self._values[k] for k in keys if k in self._values}

    @classmethod
    def defaults(cls) -> 'ParameterVector':
        return cls()


def get_speed(key: str, speeds: Mapping[str, float]) -> float:
    """Morph speed for ``key`` from ``speeds``, falling back to 1.0."""
    return speeds.get(key, DEFAULT_MORPH_SPEED)


