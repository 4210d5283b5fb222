"""wordmorph Magic Words.

Curated words that bypass layered analysis and produce a hand-authored
parameter vector, scale choice and visual hints. Apex words are the
most dramatic entries; some entries also ask the host for an AI image.

Raw entries live in MAGIC_WORDS as plain data. A MagicWordRegistry
turns them into immutable MagicWordEntry records with full, clamped
parameter vectors and answers lookups by normalized word.

BUILD ID: magic_words_v1.0
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..core.parameters import ParameterVector


# ============================================================================
# DEFAULT ENTRIES
# ============================================================================

MAGIC_WORDS: Dict[str, Dict[str, Any]] = {

    # CELESTIAL

    'cosmos': {
        'description': 'Vast, slowly evolving space with shimmering harmonics',
        'category': 'celestial',
        'scales': ['wholetone', 'lydian'],
        'parameters': {
            'brilliance': 0.6, 'motion': 0.2, 'space': 0.95, 'warmth': 0.4,
            'drift': 0.8, 'attack_sharpness': 0.08, 'attack_time': 0.6, 'air_gain': 0.55,
            'body_layer_sustain': 0.92, 'release_time': 3.5, 'filter_resonance': 0.35, 'harmonic_density': 0.75,
            'complexity': 0.6, 'graininess': 0.08, 'tempo': 0.15, 'drift_speed': 0.08,
            'reverb_mix': 0.85,
        },
        'color_hue': 280,
        'particle_density': 0.25,
        'trigger_ai_image': True,
        'is_apex_word': False,
    },
    'aurora': {
        'description': 'Dancing colors, shifting brightness, ethereal curtains of light',
        'category': 'celestial',
        'scales': ['major', 'lydian', 'wholetone'],
        'parameters': {
            'brilliance': 0.88, 'motion': 0.75, 'space': 0.78, 'warmth': 0.58,
            'drift': 0.65, 'attack_sharpness': 0.18, 'attack_time': 0.25, 'air_gain': 0.48,
            'body_layer_sustain': 0.78, 'release_time': 1.8, 'filter_resonance': 0.58, 'harmonic_density': 0.62,
            'complexity': 0.55, 'graininess': 0.04, 'tempo': 0.42, 'drift_speed': 0.35,
            'reverb_mix': 0.62,
        },
        'color_hue': 160,
        'particle_density': 0.7,
        'trigger_ai_image': True,
        'is_apex_word': False,
    },
    'nebula': {
        'description': 'Deep, mysterious, slowly swirling clouds of cosmic dust',
        'category': 'celestial',
        'scales': ['dorian', 'mixolydian'],
        'parameters': {
            'brilliance': 0.52, 'motion': 0.38, 'space': 0.92, 'warmth': 0.48,
            'drift': 0.72, 'attack_sharpness': 0.12, 'attack_time': 0.45, 'air_gain': 0.68,
            'body_layer_sustain': 0.88, 'release_time': 2.8, 'filter_resonance': 0.48, 'harmonic_density': 0.82,
            'complexity': 0.72, 'graininess': 0.22, 'tempo': 0.18, 'drift_speed': 0.15,
            'reverb_mix': 0.78,
        },
        'color_hue': 320,
        'particle_density': 0.45,
        'trigger_ai_image': True,
        'is_apex_word': False,
    },

    # ELEMENTAL

    'thunder': {
        'description': 'Powerful low end, sharp attack, rumbling decay',
        'category': 'elemental',
        'scales': ['phrygian', 'chromatic'],
        'parameters': {
            'brilliance': 0.35, 'motion': 0.85, 'space': 0.72, 'warmth': 0.28,
            'drift': 0.55, 'attack_sharpness': 0.98, 'attack_time': 0.001, 'air_gain': 0.25,
            'body_layer_sustain': 0.72, 'release_time': 1.8, 'filter_resonance': 0.75, 'harmonic_density': 0.95,
            'complexity': 0.85, 'graininess': 0.65, 'tempo': 0.75, 'drift_speed': 0.45,
            'reverb_mix': 0.65,
        },
        'color_hue': 45,
        'particle_density': 0.9,
        'trigger_ai_image': True,
        'is_apex_word': True,
    },
    'whisper': {
        'description': 'Extreme air layer, minimal body, intimate space',
        'category': 'elemental',
        'scales': ['pentatonic', 'suspended'],
        'parameters': {
            'brilliance': 0.28, 'motion': 0.15, 'space': 0.55, 'warmth': 0.62,
            'drift': 0.25, 'attack_sharpness': 0.04, 'attack_time': 0.35, 'air_gain': 0.92,
            'body_layer_sustain': 0.25, 'release_time': 0.9, 'filter_resonance': 0.18, 'harmonic_density': 0.15,
            'complexity': 0.18, 'graininess': 0.35, 'tempo': 0.25, 'drift_speed': 0.08,
            'reverb_mix': 0.38,
        },
        'color_hue': 200,
        'particle_density': 0.1,
        'trigger_ai_image': False,
        'is_apex_word': False,
    },
    'crystallize': {
        'description': 'Sharp attacks, high brilliance, sparse, precise geometric patterns',
        'category': 'elemental',
        'scales': ['lydian', 'wholetone'],
        'parameters': {
            'brilliance': 0.98, 'motion': 0.55, 'space': 0.48, 'warmth': 0.15,
            'drift': 0.28, 'attack_sharpness': 0.88, 'attack_time': 0.015, 'air_gain': 0.18,
            'body_layer_sustain': 0.58, 'release_time': 0.65, 'filter_resonance': 0.82, 'harmonic_density': 0.38,
            'complexity': 0.48, 'graininess': 0.02, 'tempo': 0.52, 'drift_speed': 0.18,
            'reverb_mix': 0.52,
        },
        'color_hue': 185,
        'particle_density': 0.35,
        'trigger_ai_image': True,
        'is_apex_word': False,
    },
    'volcano': {
        'description': 'Building intensity, explosive release, flowing heat',
        'category': 'elemental',
        'scales': ['harmonic', 'phrygian'],
        'parameters': {
            'brilliance': 0.48, 'motion': 0.92, 'space': 0.38, 'warmth': 0.92,
            'drift': 0.68, 'attack_sharpness': 0.95, 'attack_time': 0.008, 'air_gain': 0.38,
            'body_layer_sustain': 0.82, 'release_time': 2.2, 'filter_resonance': 0.85, 'harmonic_density': 0.98,
            'complexity': 0.92, 'graininess': 0.45, 'tempo': 0.82, 'drift_speed': 0.55,
            'reverb_mix': 0.48,
        },
        'color_hue': 15,
        'particle_density': 0.95,
        'trigger_ai_image': True,
        'is_apex_word': True,
    },

    # EMOTIONAL

    'melancholy': {
        'description': 'Rich warmth, slow drift, deep space, minor tonality',
        'category': 'emotional',
        'scales': ['minor', 'dorian'],
        'parameters': {
            'brilliance': 0.32, 'motion': 0.25, 'space': 0.82, 'warmth': 0.78,
            'drift': 0.58, 'attack_sharpness': 0.15, 'attack_time': 0.28, 'air_gain': 0.42,
            'body_layer_sustain': 0.75, 'release_time': 1.8, 'filter_resonance': 0.38, 'harmonic_density': 0.52,
            'complexity': 0.42, 'graininess': 0.12, 'tempo': 0.28, 'drift_speed': 0.12,
            'reverb_mix': 0.68,
        },
        'color_hue': 220,
        'particle_density': 0.3,
        'trigger_ai_image': True,
        'is_apex_word': False,
    },
    'euphoria': {
        'description': 'High brilliance, fast motion, major tonality, bright ascending waves',
        'category': 'emotional',
        'scales': ['major', 'lydian'],
        'parameters': {
            'brilliance': 0.95, 'motion': 0.88, 'space': 0.62, 'warmth': 0.82,
            'drift': 0.45, 'attack_sharpness': 0.42, 'attack_time': 0.04, 'air_gain': 0.28,
            'body_layer_sustain': 0.72, 'release_time': 1.0, 'filter_resonance': 0.52, 'harmonic_density': 0.75,
            'complexity': 0.65, 'graininess': 0.03, 'tempo': 0.75, 'drift_speed': 0.35,
            'reverb_mix': 0.55,
        },
        'color_hue': 50,
        'particle_density': 0.85,
        'trigger_ai_image': True,
        'is_apex_word': True,
    },
    'nostalgia': {
        'description': 'Warm, slightly detuned, medium space, distant echoes',
        'category': 'emotional',
        'scales': ['mixolydian', 'dorian'],
        'parameters': {
            'brilliance': 0.42, 'motion': 0.32, 'space': 0.72, 'warmth': 0.75,
            'drift': 0.48, 'attack_sharpness': 0.22, 'attack_time': 0.18, 'air_gain': 0.38,
            'body_layer_sustain': 0.78, 'release_time': 1.6, 'filter_resonance': 0.32, 'harmonic_density': 0.48,
            'complexity': 0.42, 'graininess': 0.18, 'tempo': 0.32, 'drift_speed': 0.12,
            'reverb_mix': 0.68,
        },
        'color_hue': 35,
        'particle_density': 0.35,
        'trigger_ai_image': True,
        'is_apex_word': False,
    },
    'serenity': {
        'description': 'Pure, minimal motion, wide space, suspended tranquility',
        'category': 'emotional',
        'scales': ['suspended', 'pentatonic'],
        'parameters': {
            'brilliance': 0.48, 'motion': 0.08, 'space': 0.88, 'warmth': 0.62,
            'drift': 0.35, 'attack_sharpness': 0.08, 'attack_time': 0.45, 'air_gain': 0.52,
            'body_layer_sustain': 0.85, 'release_time': 2.5, 'filter_resonance': 0.18, 'harmonic_density': 0.28,
            'complexity': 0.18, 'graininess': 0.02, 'tempo': 0.15, 'drift_speed': 0.04,
            'reverb_mix': 0.75,
        },
        'color_hue': 180,
        'particle_density': 0.2,
        'trigger_ai_image': True,
        'is_apex_word': False,
    },
    'anxiety': {
        'description': 'High motion, dissonant tendencies, tight claustrophobic space',
        'category': 'emotional',
        'scales': ['chromatic', 'phrygian'],
        'parameters': {
            'brilliance': 0.58, 'motion': 0.95, 'space': 0.25, 'warmth': 0.25,
            'drift': 0.72, 'attack_sharpness': 0.75, 'attack_time': 0.025, 'air_gain': 0.52,
            'body_layer_sustain': 0.38, 'release_time': 0.25, 'filter_resonance': 0.75, 'harmonic_density': 0.65,
            'complexity': 0.85, 'graininess': 0.45, 'tempo': 0.85, 'drift_speed': 0.65,
            'reverb_mix': 0.28,
        },
        'color_hue': 0,
        'particle_density': 0.8,
        'trigger_ai_image': False,
        'is_apex_word': False,
    },

    # TEMPORAL

    'eternal': {
        'description': 'Extremely slow drift, infinite sustain feel, time suspended',
        'category': 'temporal',
        'scales': ['suspended', 'wholetone'],
        'parameters': {
            'brilliance': 0.48, 'motion': 0.05, 'space': 0.98, 'warmth': 0.52,
            'drift': 0.15, 'attack_sharpness': 0.05, 'attack_time': 0.8, 'air_gain': 0.42,
            'body_layer_sustain': 1.0, 'release_time': 5.0, 'filter_resonance': 0.28, 'harmonic_density': 0.42,
            'complexity': 0.28, 'graininess': 0.03, 'tempo': 0.05, 'drift_speed': 0.02,
            'reverb_mix': 0.92,
        },
        'color_hue': 260,
        'particle_density': 0.15,
        'trigger_ai_image': True,
        'is_apex_word': False,
    },
    'fleeting': {
        'description': 'Fast attacks, quick decay, sparse and ephemeral',
        'category': 'temporal',
        'scales': ['pentatonic', 'major'],
        'parameters': {
            'brilliance': 0.72, 'motion': 0.75, 'space': 0.38, 'warmth': 0.48,
            'drift': 0.58, 'attack_sharpness': 0.68, 'attack_time': 0.008, 'air_gain': 0.28,
            'body_layer_sustain': 0.18, 'release_time': 0.08, 'filter_resonance': 0.42, 'harmonic_density': 0.28,
            'complexity': 0.28, 'graininess': 0.08, 'tempo': 0.85, 'drift_speed': 0.55,
            'reverb_mix': 0.28,
        },
        'color_hue': 60,
        'particle_density': 0.6,
        'trigger_ai_image': False,
        'is_apex_word': False,
    },
    'ancient': {
        'description': 'Deep, rich harmonics, slow ceremonial weight',
        'category': 'temporal',
        'scales': ['bhairav', 'insen'],
        'parameters': {
            'brilliance': 0.28, 'motion': 0.18, 'space': 0.82, 'warmth': 0.42,
            'drift': 0.42, 'attack_sharpness': 0.18, 'attack_time': 0.35, 'air_gain': 0.28,
            'body_layer_sustain': 0.85, 'release_time': 2.5, 'filter_resonance': 0.52, 'harmonic_density': 0.68,
            'complexity': 0.55, 'graininess': 0.28, 'tempo': 0.18, 'drift_speed': 0.08,
            'reverb_mix': 0.75,
        },
        'color_hue': 30,
        'particle_density': 0.25,
        'trigger_ai_image': True,
        'is_apex_word': False,
    },

    # NATURAL

    'bloom': {
        'description': 'Growing brightness, expanding space, organic unfolding',
        'category': 'natural',
        'scales': ['major', 'lydian'],
        'parameters': {
            'brilliance': 0.75, 'motion': 0.52, 'space': 0.68, 'warmth': 0.72,
            'drift': 0.45, 'attack_sharpness': 0.12, 'attack_time': 0.5, 'air_gain': 0.42,
            'body_layer_sustain': 0.72, 'release_time': 1.4, 'filter_resonance': 0.42, 'harmonic_density': 0.62,
            'complexity': 0.45, 'graininess': 0.08, 'tempo': 0.42, 'drift_speed': 0.22,
            'reverb_mix': 0.55,
        },
        'color_hue': 330,
        'particle_density': 0.55,
        'trigger_ai_image': True,
        'is_apex_word': False,
    },
    'decay': {
        'description': 'Falling energy, increasing warmth, graceful fading',
        'category': 'natural',
        'scales': ['minor', 'phrygian'],
        'parameters': {
            'brilliance': 0.25, 'motion': 0.28, 'space': 0.78, 'warmth': 0.68,
            'drift': 0.52, 'attack_sharpness': 0.18, 'attack_time': 0.22, 'air_gain': 0.55,
            'body_layer_sustain': 0.48, 'release_time': 2.8, 'filter_resonance': 0.38, 'harmonic_density': 0.42,
            'complexity': 0.42, 'graininess': 0.35, 'tempo': 0.22, 'drift_speed': 0.08,
            'reverb_mix': 0.72,
        },
        'color_hue': 25,
        'particle_density': 0.3,
        'trigger_ai_image': False,
        'is_apex_word': False,
    },
    'forest': {
        'description': 'Layered complexity, organic motion, living ecosystem',
        'category': 'natural',
        'scales': ['dorian', 'pentatonic'],
        'parameters': {
            'brilliance': 0.48, 'motion': 0.52, 'space': 0.72, 'warmth': 0.58,
            'drift': 0.55, 'attack_sharpness': 0.28, 'attack_time': 0.12, 'air_gain': 0.52,
            'body_layer_sustain': 0.62, 'release_time': 1.0, 'filter_resonance': 0.42, 'harmonic_density': 0.75,
            'complexity': 0.68, 'graininess': 0.22, 'tempo': 0.42, 'drift_speed': 0.28,
            'reverb_mix': 0.62,
        },
        'color_hue': 120,
        'particle_density': 0.65,
        'trigger_ai_image': True,
        'is_apex_word': False,
    },

    # MYSTICAL

    'ritual': {
        'description': 'Ceremonial, harmonic series, slow building sacred patterns',
        'category': 'mystical',
        'scales': ['bhairav', 'harmonic'],
        'parameters': {
            'brilliance': 0.38, 'motion': 0.38, 'space': 0.75, 'warmth': 0.48,
            'drift': 0.42, 'attack_sharpness': 0.38, 'attack_time': 0.12, 'air_gain': 0.28,
            'body_layer_sustain': 0.82, 'release_time': 1.8, 'filter_resonance': 0.62, 'harmonic_density': 0.75,
            'complexity': 0.62, 'graininess': 0.18, 'tempo': 0.32, 'drift_speed': 0.12,
            'reverb_mix': 0.68,
        },
        'color_hue': 300,
        'particle_density': 0.4,
        'trigger_ai_image': True,
        'is_apex_word': False,
    },
    'oracle': {
        'description': 'Mysterious, bhairav scale, questioning pronouncements',
        'category': 'mystical',
        'scales': ['bhairav', 'insen'],
        'parameters': {
            'brilliance': 0.52, 'motion': 0.32, 'space': 0.82, 'warmth': 0.38,
            'drift': 0.48, 'attack_sharpness': 0.22, 'attack_time': 0.28, 'air_gain': 0.48,
            'body_layer_sustain': 0.78, 'release_time': 1.6, 'filter_resonance': 0.58, 'harmonic_density': 0.58,
            'complexity': 0.58, 'graininess': 0.22, 'tempo': 0.28, 'drift_speed': 0.12,
            'reverb_mix': 0.72,
        },
        'color_hue': 275,
        'particle_density': 0.35,
        'trigger_ai_image': True,
        'is_apex_word': False,
    },
    'phantom': {
        'description': 'Ethereal, lots of air, ghostly barely-there presence',
        'category': 'mystical',
        'scales': ['phrygian', 'insen'],
        'parameters': {
            'brilliance': 0.32, 'motion': 0.22, 'space': 0.92, 'warmth': 0.28,
            'drift': 0.42, 'attack_sharpness': 0.08, 'attack_time': 0.4, 'air_gain': 0.78,
            'body_layer_sustain': 0.45, 'release_time': 2.2, 'filter_resonance': 0.28, 'harmonic_density': 0.28,
            'complexity': 0.38, 'graininess': 0.28, 'tempo': 0.18, 'drift_speed': 0.08,
            'reverb_mix': 0.85,
        },
        'color_hue': 240,
        'particle_density': 0.15,
        'trigger_ai_image': True,
        'is_apex_word': False,
    },

    # KINETIC

    'pulse': {
        'description': 'Strong rhythmic motion, clear attacks, steady heartbeat',
        'category': 'kinetic',
        'scales': ['minor', 'dorian'],
        'parameters': {
            'brilliance': 0.48, 'motion': 0.75, 'space': 0.38, 'warmth': 0.52,
            'drift': 0.35, 'attack_sharpness': 0.75, 'attack_time': 0.015, 'air_gain': 0.18,
            'body_layer_sustain': 0.52, 'release_time': 0.35, 'filter_resonance': 0.52, 'harmonic_density': 0.52,
            'complexity': 0.42, 'graininess': 0.12, 'tempo': 0.68, 'drift_speed': 0.28,
            'reverb_mix': 0.32,
        },
        'color_hue': 350,
        'particle_density': 0.7,
        'trigger_ai_image': False,
        'is_apex_word': False,
    },
    'cascade': {
        'description': 'Descending patterns, flowing waterfall motion',
        'category': 'kinetic',
        'scales': ['slendro', 'pentatonic'],
        'parameters': {
            'brilliance': 0.68, 'motion': 0.82, 'space': 0.58, 'warmth': 0.52,
            'drift': 0.55, 'attack_sharpness': 0.52, 'attack_time': 0.04, 'air_gain': 0.42,
            'body_layer_sustain': 0.62, 'release_time': 0.8, 'filter_resonance': 0.52, 'harmonic_density': 0.62,
            'complexity': 0.52, 'graininess': 0.08, 'tempo': 0.62, 'drift_speed': 0.42,
            'reverb_mix': 0.52,
        },
        'color_hue': 195,
        'particle_density': 0.75,
        'trigger_ai_image': True,
        'is_apex_word': False,
    },
    'spiral': {
        'description': 'Rotating modulation, building complexity, centripetal energy',
        'category': 'kinetic',
        'scales': ['chromatic', 'wholetone'],
        'parameters': {
            'brilliance': 0.58, 'motion': 0.78, 'space': 0.52, 'warmth': 0.45,
            'drift': 0.65, 'attack_sharpness': 0.48, 'attack_time': 0.06, 'air_gain': 0.32,
            'body_layer_sustain': 0.58, 'release_time': 0.7, 'filter_resonance': 0.58, 'harmonic_density': 0.58,
            'complexity': 0.68, 'graininess': 0.12, 'tempo': 0.58, 'drift_speed': 0.38,
            'reverb_mix': 0.48,
        },
        'color_hue': 290,
        'particle_density': 0.6,
        'trigger_ai_image': True,
        'is_apex_word': False,
    },

    # TEXTURAL

    'velvet': {
        'description': 'Maximum warmth, soft attacks, rich luxurious smoothness',
        'category': 'textural',
        'scales': ['major', 'mixolydian'],
        'parameters': {
            'brilliance': 0.42, 'motion': 0.28, 'space': 0.62, 'warmth': 0.95,
            'drift': 0.35, 'attack_sharpness': 0.12, 'attack_time': 0.25, 'air_gain': 0.22,
            'body_layer_sustain': 0.75, 'release_time': 1.2, 'filter_resonance': 0.22, 'harmonic_density': 0.52,
            'complexity': 0.32, 'graininess': 0.01, 'tempo': 0.32, 'drift_speed': 0.12,
            'reverb_mix': 0.52,
        },
        'color_hue': 340,
        'particle_density': 0.3,
        'trigger_ai_image': False,
        'is_apex_word': False,
    },
    'rust': {
        'description': 'Gritty harmonics, worn texture, weathered character',
        'category': 'textural',
        'scales': ['blues', 'dorian'],
        'parameters': {
            'brilliance': 0.32, 'motion': 0.32, 'space': 0.52, 'warmth': 0.38,
            'drift': 0.42, 'attack_sharpness': 0.38, 'attack_time': 0.1, 'air_gain': 0.42,
            'body_layer_sustain': 0.52, 'release_time': 0.9, 'filter_resonance': 0.48, 'harmonic_density': 0.52,
            'complexity': 0.48, 'graininess': 0.58, 'tempo': 0.32, 'drift_speed': 0.18,
            'reverb_mix': 0.42,
        },
        'color_hue': 20,
        'particle_density': 0.4,
        'trigger_ai_image': False,
        'is_apex_word': False,
    },
    'silk': {
        'description': 'Smooth, pure, flowing delicate continuity',
        'category': 'textural',
        'scales': ['pentatonic', 'lydian'],
        'parameters': {
            'brilliance': 0.68, 'motion': 0.42, 'space': 0.68, 'warmth': 0.62,
            'drift': 0.38, 'attack_sharpness': 0.08, 'attack_time': 0.28, 'air_gain': 0.35,
            'body_layer_sustain': 0.68, 'release_time': 1.3, 'filter_resonance': 0.18, 'harmonic_density': 0.32,
            'complexity': 0.28, 'graininess': 0.005, 'tempo': 0.38, 'drift_speed': 0.18,
            'reverb_mix': 0.58,
        },
        'color_hue': 45,
        'particle_density': 0.35,
        'trigger_ai_image': False,
        'is_apex_word': False,
    },

    # ABSTRACT

    'infinity': {
        'description': 'Endless sustain, no attack, pure boundless expansion',
        'category': 'abstract',
        'scales': ['wholetone', 'suspended'],
        'parameters': {
            'brilliance': 0.52, 'motion': 0.12, 'space': 1.0, 'warmth': 0.52,
            'drift': 0.25, 'attack_sharpness': 0.02, 'attack_time': 1.0, 'air_gain': 0.48,
            'body_layer_sustain': 0.98, 'release_time': 6.0, 'filter_resonance': 0.32, 'harmonic_density': 0.48,
            'complexity': 0.38, 'graininess': 0.02, 'tempo': 0.08, 'drift_speed': 0.03,
            'reverb_mix': 0.95,
        },
        'color_hue': 270,
        'particle_density': 0.2,
        'trigger_ai_image': True,
        'is_apex_word': True,
    },
    'void': {
        'description': 'Minimal everything, deep space, presence of absence',
        'category': 'abstract',
        'scales': ['insen', 'phrygian'],
        'parameters': {
            'brilliance': 0.15, 'motion': 0.05, 'space': 0.98, 'warmth': 0.18,
            'drift': 0.22, 'attack_sharpness': 0.03, 'attack_time': 0.5, 'air_gain': 0.65,
            'body_layer_sustain': 0.35, 'release_time': 3.0, 'filter_resonance': 0.15, 'harmonic_density': 0.12,
            'complexity': 0.15, 'graininess': 0.08, 'tempo': 0.05, 'drift_speed': 0.03,
            'reverb_mix': 0.88,
        },
        'color_hue': 250,
        'particle_density': 0.05,
        'trigger_ai_image': True,
        'is_apex_word': False,
    },
    'becoming': {
        'description': 'Constant evolution, never settling, perpetual transformation',
        'category': 'abstract',
        'scales': ['chromatic', 'wholetone'],
        'parameters': {
            'brilliance': 0.58, 'motion': 0.68, 'space': 0.72, 'warmth': 0.52,
            'drift': 0.85, 'attack_sharpness': 0.25, 'attack_time': 0.2, 'air_gain': 0.42,
            'body_layer_sustain': 0.68, 'release_time': 1.5, 'filter_resonance': 0.48, 'harmonic_density': 0.62,
            'complexity': 0.72, 'graininess': 0.15, 'tempo': 0.45, 'drift_speed': 0.48,
            'reverb_mix': 0.62,
        },
        'color_hue': 160,
        'particle_density': 0.55,
        'trigger_ai_image': True,
        'is_apex_word': False,
    },
}


# ============================================================================
# ENTRY
# ============================================================================

_NON_LETTERS = re.compile(r'[^a-z]')


def normalize_word(word: str) -> str:
    """Lowercase and strip everything but a-z."""
    return _NON_LETTERS.sub('', word.lower())


@dataclass(frozen=True)
class MagicWordEntry:
    """Immutable magic word record.

    ``parameters`` is a frozen ParameterVector holding every declared
    key; authored values outside 0-1 are clamped on the way in.
    """
    word: str
    description: str
    category: str
    scales: Tuple[str, ...]
    parameters: ParameterVector
    color_hue: float = 0.0
    particle_density: float = 0.5
    trigger_ai_image: bool = False
    is_apex_word: bool = False

    @classmethod
    def from_dict(cls, word: str, data: Mapping[str, Any]) -> 'MagicWordEntry':
        return cls(
            word=word,
            description=data.get('description', ''),
            category=data.get('category', ''),
            scales=tuple(data.get('scales', ())),
            parameters=ParameterVector(data.get('parameters', {})).freeze(),
            color_hue=data.get('color_hue', 0.0),
            particle_density=data.get('particle_density', 0.5),
            trigger_ai_image=bool(data.get('trigger_ai_image', False)),
            is_apex_word=bool(data.get('is_apex_word', False)),
        )

    @property
    def visual_hints(self) -> Dict[str, float]:
        return {'color_hue': self.color_hue, 'particle_density': self.particle_density}


# ============================================================================
# REGISTRY
# ============================================================================

class MagicWordRegistry:
    """Lookup table of magic words.

    Parameters
    ----------
    words : mapping, optional
        Raw entries keyed by word (MAGIC_WORDS when omitted).
    """

    def __init__(self, words: Optional[Mapping[str, Mapping[str, Any]]] = None) -> None:
        source = MAGIC_WORDS if words is None else words
        self._entries: Dict[str, MagicWordEntry] = {}
        for word, data in source.items():
            key = normalize_word(word)
            self._entries[key] = MagicWordEntry.from_dict(key, data)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and normalize_word(word) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries.values())

    def get(self, word: str) -> Optional[MagicWordEntry]:
        """Entry for ``word`` after normalization, or None."""
        return self._entries.get(normalize_word(word))

    def is_magic_word(self, word: str) -> bool:
        return word in self

    def all_words(self) -> List[str]:
        return list(self._entries)

    def words_by_category(self, category: str) -> List[str]:
        return [w for w, e in self._entries.items() if e.category == category]

    def categories(self) -> List[str]:
        seen: List[str] = []
        for entry in self._entries.values():
            if entry.category not in seen:
                seen.append(entry.category)
        return seen

    def apex_words(self) -> List[str]:
        return [w for w, e in self._entries.items() if e.is_apex_word]

    def ai_image_words(self) -> List[str]:
        return [w for w, e in self._entries.items() if e.trigger_ai_image]

    def stats(self) -> Dict[str, Any]:
        by_category: Dict[str, List[str]] = {}
        for word, entry in self._entries.items():
            by_category.setdefault(entry.category, []).append(word)
        return {
            'total_words': len(self._entries),
            'categories': by_category,
            'apex_words': self.apex_words(),
            'ai_image_words': self.ai_image_words(),
        }
