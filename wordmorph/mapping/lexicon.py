"""wordmorph Default Lexicon.

Built-in word data that lets the engine run out of the box:

- scale names (opaque labels attached to categories)
- semantic categories with keyword lists and base fragments
- the valence / arousal sentiment lexicon and its modifier words

Everything here is plain immutable data. Components take their own
dictionary at construction and only fall back to these tables when
nothing is passed in.

BUILD ID: lexicon_v1.0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Tuple


# ============================================================================
# SCALES
# ============================================================================

MAJOR = 'major'
MINOR = 'minor'
HARMONIC = 'harmonic'
SUSPENDED = 'suspended'
SLENDRO = 'slendro'
IN_SEN = 'insen'
BHAIRAV = 'bhairav'
PENTATONIC = 'pentatonic'
CHROMATIC = 'chromatic'
WHOLE_TONE = 'wholetone'
BLUES = 'blues'
PHRYGIAN = 'phrygian'
DORIAN = 'dorian'
LYDIAN = 'lydian'
MIXOLYDIAN = 'mixolydian'

SCALES: Tuple[str, ...] = (
    MAJOR, MINOR, HARMONIC, SUSPENDED, SLENDRO, IN_SEN, BHAIRAV, PENTATONIC,
    CHROMATIC, WHOLE_TONE, BLUES, PHRYGIAN, DORIAN, LYDIAN, MIXOLYDIAN,
)

DEFAULT_SCALE = PENTATONIC


# ============================================================================
# SEMANTIC CATEGORIES
# ============================================================================

@dataclass(frozen=True)
class SemanticCategory:
    """A keyword family with its preferred scales and base fragment.

    Attributes:
        name: Category name.
        scales: Preferred scales, most preferred first.
        keywords: Member words (a word may belong to several categories).
        parameters: Base {motion, space, complexity, warmth} fragment.
    """
    name: str
    scales: Tuple[str, ...]
    keywords: Tuple[str, ...]
    parameters: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'scales', tuple(self.scales))
        object.__setattr__(self, 'keywords', tuple(self.keywords))
        object.__setattr__(self, 'parameters', MappingProxyType(dict(self.parameters)))


SEMANTIC_FIELDS = ('motion', 'space', 'complexity', 'warmth')

_CATEGORIES = {
    # WATER - flowing, emotional, introspective
    'water': SemanticCategory(
        name='water',
        scales=(MINOR, SLENDRO, DORIAN),
        keywords=(
            # Primary water words
            'ocean', 'river', 'rain', 'flow', 'water', 'sea', 'wave', 'stream',
            'lake', 'pond', 'pool', 'flood', 'tide', 'current', 'ripple', 'splash',
            'drip', 'drop', 'mist', 'fog', 'dew', 'moisture', 'humid', 'wet',
            # Extended water concepts
            'tears', 'cry', 'weep', 'fluid', 'liquid', 'aqua', 'marine', 'nautical',
            'drift', 'float', 'swim', 'dive', 'submerge', 'drown', 'sink', 'surface',
            'shore', 'beach', 'coast', 'harbor', 'bay', 'cove', 'inlet', 'delta',
            # Metaphorical water
            'emotion', 'feeling', 'intuition', 'dream', 'sleep', 'rest', 'peace',
            'calm', 'serene', 'tranquil', 'still', 'quiet', 'gentle', 'soft',
        ),
        parameters={
            'motion': 0.4,
            'space': 0.7,
            'complexity': 0.5,
            'warmth': 0.4,
        },
    ),

    # FIRE - energetic, passionate, transformative
    'fire': SemanticCategory(
        name='fire',
        scales=(HARMONIC, PHRYGIAN, CHROMATIC),
        keywords=(
            # Primary fire words
            'fire', 'flame', 'burn', 'heat', 'energy', 'blaze', 'inferno', 'ember',
            'spark', 'ignite', 'torch', 'candle', 'bonfire', 'wildfire', 'furnace',
            # Heat and temperature
            'hot', 'warm', 'scorch', 'sear', 'sizzle', 'smolder', 'glow', 'radiant',
            # Passion and intensity
            'passion', 'desire', 'rage', 'anger', 'fury', 'wrath', 'fierce', 'intense',
            'wild', 'savage', 'powerful', 'strong', 'force', 'might', 'vigor', 'vital',
            # Transformation
            'transform', 'change', 'evolve', 'mutate', 'shift', 'convert', 'transmute',
            # Action and movement
            'rush', 'charge', 'attack', 'strike', 'fight', 'battle', 'war', 'conflict',
            'explode', 'burst', 'erupt', 'detonate', 'blast', 'boom', 'crash',
        ),
        parameters={
            'motion': 0.9,
            'space': 0.3,
            'complexity': 0.7,
            'warmth': 0.9,
        },
    ),

    # EARTH - grounded, stable, natural
    'earth': SemanticCategory(
        name='earth',
        scales=(SUSPENDED, PENTATONIC, MIXOLYDIAN),
        keywords=(
            # Primary earth words
            'earth', 'ground', 'stone', 'mountain', 'rock', 'soil', 'dirt', 'clay',
            'sand', 'mud', 'dust', 'gravel', 'pebble', 'boulder', 'cliff', 'canyon',
            # Nature and plants
            'tree', 'forest', 'wood', 'leaf', 'root', 'branch', 'trunk', 'bark',
            'grass', 'field', 'meadow', 'valley', 'hill', 'plain', 'prairie', 'desert',
            'flower', 'plant', 'seed', 'grow', 'bloom', 'blossom', 'garden', 'harvest',
            # Stability concepts
            'stable', 'solid', 'firm', 'steady', 'secure', 'safe', 'anchor', 'foundation',
            'base', 'core', 'center', 'balance', 'grounded', 'rooted', 'settled',
            # Materials
            'metal', 'iron', 'steel', 'copper', 'gold', 'silver', 'bronze', 'mineral',
            'crystal', 'gem', 'diamond', 'emerald', 'ruby', 'sapphire', 'jade',
        ),
        parameters={
            'motion': 0.3,
            'space': 0.5,
            'complexity': 0.4,
            'warmth': 0.5,
        },
    ),

    # LIGHT - uplifting, hopeful, clarity
    'light': SemanticCategory(
        name='light',
        scales=(MAJOR, LYDIAN, WHOLE_TONE),
        keywords=(
            # Primary light words
            'light', 'sun', 'bright', 'glow', 'shine', 'ray', 'beam', 'radiance',
            'luminous', 'brilliant', 'gleam', 'sparkle', 'glitter', 'shimmer', 'flash',
            # Celestial
            'star', 'moon', 'sky', 'heaven', 'celestial', 'cosmic', 'stellar', 'solar',
            'dawn', 'sunrise', 'morning', 'day', 'noon', 'afternoon', 'golden',
            # Positive emotions
            'joy', 'happy', 'bliss', 'delight', 'pleasure', 'cheer', 'merry', 'glad',
            'hope', 'faith', 'trust', 'believe', 'optimism', 'positive', 'uplift',
            # Clarity and truth
            'clear', 'pure', 'clean', 'truth', 'honest', 'open', 'transparent', 'visible',
            'see', 'vision', 'sight', 'view', 'reveal', 'illuminate', 'enlighten',
            # Life and energy
            'life', 'alive', 'living', 'birth', 'new', 'fresh', 'young', 'vibrant',
        ),
        parameters={
            'motion': 0.6,
            'space': 0.6,
            'complexity': 0.5,
            'warmth': 0.7,
        },
    ),

    # SHADOW - mysterious, introspective, depth
    'shadow': SemanticCategory(
        name='shadow',
        scales=(IN_SEN, BHAIRAV, PHRYGIAN),
        keywords=(
            # Primary shadow words
            'shadow', 'dark', 'night', 'void', 'deep', 'black', 'shade', 'dim',
            'murky', 'obscure', 'hidden', 'secret', 'mystery', 'unknown', 'invisible',
            # Night and darkness
            'midnight', 'dusk', 'twilight', 'evening', 'nightfall', 'eclipse', 'gloom',
            # Emotional depth
            'fear', 'afraid', 'terror', 'horror', 'dread', 'anxiety', 'worry', 'doubt',
            'lonely', 'alone', 'isolated', 'abandoned', 'forgotten', 'lost', 'wander',
            # Philosophical
            'death', 'end', 'fade', 'vanish', 'disappear', 'nothing', 'empty', 'hollow',
            'silence', 'quiet', 'still', 'pause', 'wait', 'watch', 'listen',
            # Mystical
            'spirit', 'ghost', 'phantom', 'specter', 'haunted', 'curse', 'spell', 'magic',
            'ancient', 'old', 'eternal', 'infinite', 'abyss', 'depths', 'below',
        ),
        parameters={
            'motion': 0.3,
            'space': 0.8,
            'complexity': 0.6,
            'warmth': 0.2,
        },
    ),

    # LOVE - warm, connected, tender
    'love': SemanticCategory(
        name='love',
        scales=(MAJOR, DORIAN, LYDIAN),
        keywords=(
            # Primary love words
            'love', 'heart', 'warm', 'embrace', 'hold', 'touch', 'kiss', 'hug',
            'care', 'cherish', 'adore', 'devotion', 'affection', 'fond', 'dear',
            # Relationships
            'friend', 'family', 'mother', 'father', 'child', 'baby', 'partner', 'soul',
            'together', 'unite', 'bond', 'connect', 'belong', 'home', 'comfort', 'safe',
            # Gentle emotions
            'gentle', 'kind', 'tender', 'soft', 'sweet', 'lovely', 'beautiful', 'grace',
            'compassion', 'mercy', 'forgive', 'accept', 'understand', 'empathy', 'sympathy',
            # Romance
            'romance', 'passion', 'desire', 'longing', 'yearn', 'miss', 'remember', 'memory',
            # Joy from love
            'smile', 'laugh', 'play', 'dance', 'sing', 'celebrate', 'gift', 'blessing',
        ),
        parameters={
            'motion': 0.5,
            'space': 0.5,
            'complexity': 0.4,
            'warmth': 0.8,
        },
    ),

    # LOSS - melancholic, reflective, poignant
    'loss': SemanticCategory(
        name='loss',
        scales=(MINOR, BLUES, PHRYGIAN),
        keywords=(
            # Primary loss words
            'loss', 'grief', 'tears', 'fade', 'gone', 'miss', 'mourn', 'sorrow',
            'sad', 'pain', 'hurt', 'ache', 'wound', 'broken', 'shatter', 'crack',
            # Endings
            'end', 'finish', 'close', 'final', 'last', 'goodbye', 'farewell', 'leave',
            'depart', 'abandon', 'forsake', 'betray', 'desert', 'reject', 'refuse',
            # Absence
            'empty', 'hollow', 'void', 'nothing', 'zero', 'none', 'lack', 'without',
            'alone', 'lonely', 'solitary', 'isolated', 'separate', 'apart', 'distant',
            # Decay
            'decay', 'rot', 'wither', 'wilt', 'die', 'death', 'dead', 'grave',
            'ash', 'dust', 'ruin', 'wreck', 'destroy', 'collapse', 'fall', 'fail',
            # Regret
            'regret', 'remorse', 'guilt', 'shame', 'sorry', 'mistake', 'wrong', 'fault',
        ),
        parameters={
            'motion': 0.3,
            'space': 0.7,
            'complexity': 0.5,
            'warmth': 0.3,
        },
    ),

    # AIR/WIND - movement, freedom, breath
    'air': SemanticCategory(
        name='air',
        scales=(WHOLE_TONE, LYDIAN, PENTATONIC),
        keywords=(
            'air', 'wind', 'breeze', 'gust', 'blow', 'breath', 'whisper', 'sigh',
            'fly', 'soar', 'glide', 'float', 'drift', 'hover', 'rise', 'ascend',
            'free', 'freedom', 'liberty', 'release', 'escape', 'open', 'vast', 'wide',
            'cloud', 'sky', 'atmosphere', 'space', 'above', 'high', 'altitude', 'summit',
            'bird', 'wing', 'feather', 'flight', 'angel', 'spirit', 'ethereal', 'light',
        ),
        parameters={
            'motion': 0.7,
            'space': 0.8,
            'complexity': 0.4,
            'warmth': 0.5,
        },
    ),

    # TIME - temporal, cyclical, eternal
    'time': SemanticCategory(
        name='time',
        scales=(DORIAN, MIXOLYDIAN, SUSPENDED),
        keywords=(
            'time', 'moment', 'now', 'present', 'past', 'future', 'history', 'memory',
            'clock', 'hour', 'minute', 'second', 'day', 'week', 'month', 'year',
            'season', 'spring', 'summer', 'autumn', 'winter', 'cycle', 'rhythm', 'pulse',
            'forever', 'eternal', 'infinite', 'endless', 'always', 'never', 'once', 'again',
            'begin', 'start', 'origin', 'source', 'end', 'finish', 'complete', 'whole',
        ),
        parameters={
            'motion': 0.5,
            'space': 0.6,
            'complexity': 0.5,
            'warmth': 0.5,
        },
    ),
}

# Iteration order is the tie-break order for dominant-category lookups
SEMANTIC_CATEGORIES: Mapping[str, SemanticCategory] = MappingProxyType(_CATEGORIES)


# ============================================================================
# SENTIMENT LEXICON
# ============================================================================

VALENCE_TIERS: Dict[str, Dict[str, float]] = {
    'positive': {'strong': 0.9, 'moderate': 0.7, 'mild': 0.55},
    'negative': {'strong': 0.1, 'moderate': 0.3, 'mild': 0.45},
}

AROUSAL_TIERS: Dict[str, Dict[str, float]] = {
    'high': {'strong': 0.9, 'moderate': 0.7},
    'low': {'strong': 0.1, 'moderate': 0.3},
}

# Valence tiers: positive / negative x strong / moderate / mild
VALENCE_WORDS: Dict[str, Dict[str, Tuple[str, ...]]] = {
    'positive': {
        'strong': (
            'amazing', 'wonderful', 'fantastic', 'excellent', 'brilliant', 'perfect',
            'beautiful', 'magnificent', 'glorious', 'spectacular', 'incredible', 'marvelous',
            'love', 'adore', 'cherish', 'treasure', 'bliss', 'ecstasy', 'euphoria',
            'triumph', 'victory', 'success', 'achieve', 'accomplish', 'conquer',
        ),
        'moderate': (
            'good', 'nice', 'pleasant', 'happy', 'glad', 'pleased', 'satisfied',
            'enjoy', 'like', 'appreciate', 'grateful', 'thankful', 'blessed',
            'hope', 'optimistic', 'positive', 'confident', 'sure', 'certain',
            'calm', 'peaceful', 'serene', 'tranquil', 'relaxed', 'comfortable',
            'bright', 'light', 'clear', 'fresh', 'clean', 'pure', 'true',
        ),
        'mild': (
            'okay', 'fine', 'alright', 'decent', 'fair', 'reasonable', 'acceptable',
            'steady', 'stable', 'balanced', 'neutral', 'normal', 'regular',
        ),
    },
    'negative': {
        'strong': (
            'terrible', 'horrible', 'awful', 'dreadful', 'appalling', 'atrocious',
            'hate', 'despise', 'loathe', 'detest', 'abhor', 'disgust', 'revolt',
            'agony', 'torment', 'torture', 'suffering', 'anguish', 'misery', 'despair',
            'destroy', 'devastate', 'annihilate', 'obliterate', 'ruin', 'wreck',
        ),
        'moderate': (
            'bad', 'poor', 'sad', 'unhappy', 'upset', 'disappointed', 'frustrated',
            'angry', 'mad', 'annoyed', 'irritated', 'bothered', 'troubled',
            'worried', 'anxious', 'nervous', 'afraid', 'scared', 'fearful',
            'lonely', 'alone', 'isolated', 'abandoned', 'rejected', 'forgotten',
            'dark', 'dim', 'dull', 'grey', 'bleak', 'gloomy', 'dreary',
        ),
        'mild': (
            'not', 'no', 'none', 'nothing', 'never', 'neither', 'without',
            'less', 'few', 'little', 'small', 'slight', 'minor', 'trivial',
        ),
    },
}

# Arousal tiers: high / low x strong / moderate
AROUSAL_WORDS: Dict[str, Dict[str, Tuple[str, ...]]] = {
    'high': {
        'strong': (
            'explode', 'burst', 'erupt', 'blast', 'boom', 'crash', 'smash',
            'rush', 'race', 'sprint', 'dash', 'fly', 'soar', 'zoom',
            'scream', 'shout', 'yell', 'roar', 'cry', 'shriek', 'wail',
            'rage', 'fury', 'wrath', 'frenzy', 'madness', 'chaos', 'storm',
            'fight', 'battle', 'war', 'attack', 'strike', 'hit', 'punch',
            'ecstasy', 'thrill', 'excitement', 'exhilaration', 'elation',
        ),
        'moderate': (
            'quick', 'fast', 'rapid', 'swift', 'speedy', 'hasty', 'hurry',
            'run', 'jump', 'leap', 'bounce', 'spring', 'climb', 'rise',
            'push', 'pull', 'grab', 'catch', 'throw', 'kick', 'spin',
            'loud', 'noisy', 'busy', 'active', 'lively', 'energetic', 'dynamic',
            'eager', 'keen', 'enthusiastic', 'passionate', 'intense', 'fierce',
            'bright', 'vivid', 'bold', 'sharp', 'strong', 'powerful', 'mighty',
        ),
    },
    'low': {
        'strong': (
            'sleep', 'slumber', 'dream', 'rest', 'doze', 'nap', 'hibernate',
            'dead', 'death', 'still', 'frozen', 'paralyzed', 'numb', 'empty',
            'silent', 'quiet', 'mute', 'hushed', 'muffled', 'faint', 'dim',
            'fade', 'vanish', 'disappear', 'dissolve', 'melt', 'evaporate',
        ),
        'moderate': (
            'slow', 'gentle', 'soft', 'mild', 'calm', 'peaceful', 'tranquil',
            'walk', 'stroll', 'wander', 'drift', 'float', 'glide', 'sway',
            'sit', 'stand', 'stay', 'wait', 'pause', 'stop', 'rest',
            'breathe', 'sigh', 'whisper', 'murmur', 'hum', 'lull', 'soothe',
            'relax', 'ease', 'comfort', 'settle', 'steady', 'stable', 'still',
            'pale', 'faded', 'muted', 'subtle', 'delicate', 'light', 'airy',
        ),
    },
}

# Single-token modifiers. Checked in this order, so a word listed twice
# acts as the first kind it appears under.
AMPLIFIERS: Tuple[str, ...] = (
    'very', 'really', 'extremely', 'incredibly', 'absolutely', 'totally',
    'completely', 'utterly', 'entirely', 'thoroughly', 'deeply', 'highly',
    'so', 'too', 'such', 'much', 'most', 'more', 'super', 'ultra',
)

DIMINISHERS: Tuple[str, ...] = (
    'slightly', 'somewhat', 'fairly', 'rather', 'quite',
    'barely', 'hardly', 'scarcely', 'almost', 'nearly',
)

NEGATORS: Tuple[str, ...] = (
    'not', 'no', 'never', 'neither', 'nor', 'none', 'nothing',
    'hardly', 'barely', 'scarcely', 'without', 'lack',
)

AMPLIFIER_FACTOR = 1.5
DIMINISHER_FACTOR = 0.5
