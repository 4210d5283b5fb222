"""
Tests for the context accumulator
"""

import pytest

from wordmorph.core.config import ContextConfig
from wordmorph.mapping.context import ContextAccumulator, WordRecord, blend_parameters


def record(word='w', category=None, valence=None, arousal=None, scales=(), **params):
    return WordRecord(word=word, parameters=params, category=category,
                      valence=valence, arousal=arousal, scales=scales)


@pytest.fixture
def ctx(clock):
    return ContextAccumulator(clock=clock)


class TestDecay:
    def test_exact_decay_between_words(self, ctx, clock):
        ctx.add_word(record(motion=1.0))
        first = ctx.long_term['motion']
        assert first == pytest.approx(0.5 * 0.9 + 1.0 * 0.1)

        clock.advance(3.0)
        ctx.add_word(record())  # carries no motion, so only decay applies
        distance = ctx.long_term['motion'] - 0.5
        assert distance == pytest.approx((first - 0.5) * 0.95 ** 3.0)

    def test_decay_then_blend(self, ctx, clock):
        ctx.add_word(record(warmth=0.0))
        before = ctx.long_term['warmth']
        clock.advance(2.0)
        ctx.add_word(record(warmth=1.0))
        decayed = 0.5 + (before - 0.5) * 0.95 ** 2.0
        assert ctx.long_term['warmth'] == pytest.approx(decayed * 0.9 + 1.0 * 0.1)

    def test_category_weights_decay(self, ctx, clock):
        ctx.add_word(record(category='water'))
        clock.advance(10.0)
        ctx.add_word(record(category='fire'))
        assert ctx.category_weights['water'] == pytest.approx(0.95 ** 10.0)
        assert ctx.category_weights['fire'] == 1.0

    def test_no_elapsed_time_no_decay(self, ctx):
        ctx.add_word(record(space=1.0))
        value = ctx.long_term['space']
        ctx.add_word(record())
        assert ctx.long_term['space'] == value


class TestShortTerm:
    def test_fifo_capacity(self, clock):
        ctx = ContextAccumulator(ContextConfig(short_term_size=3), clock)
        for n in range(5):
            ctx.add_word(record(word=str(n)))
        assert [r.word for r in ctx.short_term] == ['2', '3', '4']
        assert ctx.immediate.word == '4'

    def test_averages(self, ctx):
        assert ctx.get_short_term_averages()['motion'] == 0.5
        ctx.add_word(record(motion=0.2))
        ctx.add_word(record(motion=0.6))
        assert ctx.get_short_term_averages()['motion'] == pytest.approx(0.4)
        # fields a record lacks count as neutral
        assert ctx.get_short_term_averages()['space'] == 0.5


class TestHistories:
    def test_sentiment_history_capped(self, ctx):
        for _ in range(120):
            ctx.add_word(record(valence=0.6, arousal=0.4))
        assert len(ctx.sentiment_history) == 100

    def test_scale_history_capped(self, ctx):
        for _ in range(60):
            ctx.add_word(record(scales=('minor', 'dorian')))
        assert len(ctx.scale_history) == 50
        assert set(ctx.scale_history) == {'minor'}

    def test_sentiment_trend(self, ctx):
        assert ctx.get_sentiment_trend().stability == 1
        for v in (0.2, 0.2, 0.8, 0.8):
            ctx.add_word(record(valence=v, arousal=0.5))
        trend = ctx.get_sentiment_trend()
        assert trend.valence_direction == pytest.approx(0.6)
        assert trend.arousal_direction == pytest.approx(0.0)
        # population stdev of (.2, .2, .8, .8) is 0.3
        assert trend.stability == pytest.approx(0.4)


class TestDominance:
    def test_empty(self, ctx):
        assert ctx.get_dominant_category() is None
        assert ctx.get_dominant_scale() is None

    def test_dominant_category_and_scale(self, ctx):
        ctx.add_word(record(category='fire', scales=('harmonic',)))
        ctx.add_word(record(category='water', scales=('minor',)))
        ctx.add_word(record(category='water', scales=('minor',)))
        assert ctx.get_dominant_category() == 'water'
        assert ctx.get_dominant_scale() == 'minor'

    def test_scale_tie_first_seen(self, ctx):
        ctx.add_word(record(scales=('lydian',)))
        ctx.add_word(record(scales=('major',)))
        assert ctx.get_dominant_scale() == 'lydian'


class TestHarmonicDensity:
    def test_empty(self, ctx):
        assert ctx.get_harmonic_density() == pytest.approx(0.5 * 0.4)

    def test_formula(self, ctx):
        ctx.add_word(record(category='water', complexity=1.0))
        ctx.add_word(record(category='fire', complexity=0.0))
        expected = 0.5 * 0.4 + (2 / 5) * 0.3 + (2 / 5) * 0.3
        assert ctx.get_harmonic_density() == pytest.approx(expected)


class TestLifecycle:
    def test_reset(self, ctx, clock):
        ctx.add_word(record(category='water', motion=1.0, scales=('minor',)))
        clock.advance(5)
        ctx.reset()
        assert ctx.immediate is None
        assert not ctx.short_term
        assert ctx.long_term['motion'] == 0.5
        assert ctx.category_weights == {}
        assert ctx.total_words == 0
        assert ctx.last_update_time == clock()

    def test_clone_is_independent(self, ctx):
        ctx.add_word(record(category='water', motion=1.0))
        clone = ctx.clone()
        clone.add_word(record(category='fire', motion=0.0))
        assert ctx.total_words == 1
        assert clone.total_words == 2
        assert 'fire' not in ctx.category_weights
        assert len(ctx.short_term) == 1

    def test_session_stats(self, ctx, clock):
        ctx.add_word(record())
        clock.advance(30)
        stats = ctx.get_session_stats()
        assert stats['total_words'] == 1
        assert stats['duration'] == 30
        assert stats['words_per_minute'] == pytest.approx(2.0)

    def test_snapshot_is_a_copy(self, ctx):
        ctx.add_word(record(category='water'))
        snap = ctx.get_context()
        ctx.add_word(record(category='fire'))
        assert snap.total_words == 1
        assert 'fire' not in snap.category_weights


class TestBlendParameters:
    def test_weights_renormalized(self):
        out = blend_parameters({'motion': 1.0}, {'motion': 0.0}, {'motion': 0.5}, (2, 1, 1),
                               keys=('motion',))
        assert out['motion'] == pytest.approx(0.5 * 1.0 + 0.25 * 0.0 + 0.25 * 0.5)
