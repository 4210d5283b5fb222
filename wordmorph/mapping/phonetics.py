"""wordmorph Phonetic Layer Interface.

The phonetic feature extractor lives outside this package. The fusion
engine only needs an object with ``analyze(word) -> dict`` returning
some or all of the PHONETIC_FIELDS; missing fields fall back to
PHONETIC_DEFAULTS.

BUILD ID: phonetics_v1.0
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Protocol, runtime_checkable

from ..core.parameters import is_number


PHONETIC_DEFAULTS: Dict[str, float] = {
    'air_gain': 0.3,
    'attack_sharpness': 0.5,
    'attack_time': 0.1,
    'brilliance': 0.5,
    'filter_resonance': 0.3,
    'body_layer_sustain': 0.5,
    'release_time': 0.3,
    'graininess': 0.2,
    'harmonic_content': 0.5,
}

PHONETIC_FIELDS = tuple(PHONETIC_DEFAULTS)


@runtime_checkable
class PhoneticLayer(Protocol):
    """Anything that maps a word to a partial phonetic parameter dict."""

    def analyze(self, word: str) -> Mapping[str, float]:
        ...


class NeutralPhoneticLayer:
    """Phonetic layer that reports the resting texture for every word."""

    def analyze(self, word: str) -> Dict[str, float]:
        return dict(PHONETIC_DEFAULTS)


class TablePhoneticLayer:
    """Phonetic layer backed by a per-word table.

    Words absent from the table get the neutral texture. Useful for
    hosts that precompute phonetic features offline.
    """

    def __init__(self, table: Mapping[str, Mapping[str, float]],
                 fallback: Optional[PhoneticLayer] = None) -> None:
        self._table = {word.lower(): dict(values) for word, values in table.items()}
        self._fallback = fallback or NeutralPhoneticLayer()

    def analyze(self, word: str) -> Dict[str, float]:
        values = self._table.get(word.lower())
        if values is None:
            return dict(self._fallback.analyze(word))
        return dict(values)


def complete_phonetics(partial: Mapping[str, float]) -> Dict[str, float]:
    """Fill the fields a phonetic layer left out with their defaults."""
    result = dict(PHONETIC_DEFAULTS)
    for key, value in partial.items():
        if is_number(value):
            result[key] = float(value)
    return result
