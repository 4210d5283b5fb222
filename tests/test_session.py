"""
Tests for MorphSession, the engine and manager wired together
"""

import pytest

from wordmorph.core.events import EventType
from wordmorph.core.parameters import DEFAULT_PARAMS
from wordmorph.core.session import MorphSession


@pytest.fixture
def session(clock):
    return MorphSession(clock=clock)


def settle(session, limit=5000):
    for _ in range(limit):
        if not session.tick(1.0 / 60):
            return True
    return False


class TestSubmit:
    def test_word_retargets_and_commits(self, session):
        result = session.submit("ocean")
        assert session.manager.get_target() == result.parameters.to_dict()
        assert len(session.manager.history) == 1
        assert session.engine.context.total_words == 1

    def test_phrase(self, session):
        result = session.submit("quiet ocean rain")
        assert result.is_phrase
        assert session.engine.context.total_words == 3
        assert session.manager.get_target() == result.parameters.to_dict()

    def test_blank_text(self, session):
        assert session.submit("   ") is None
        assert session.manager.history == []

    def test_events_published(self, session):
        session.submit("ocean")
        assert len(session.channel.recent(EventType.WORD_PROCESSED)) == 1
        assert len(session.channel.recent(EventType.WORD_SUBMITTED)) == 1
        assert session.channel.recent(EventType.TARGETS_SET)

    def test_tick_converges(self, session):
        result = session.submit("thunder")
        assert settle(session)
        current = session.current()
        for key, value in result.parameters.items():
            assert current[key] == pytest.approx(value, abs=1e-2)


class TestAnticipate:
    def test_preview_does_not_commit(self, session):
        preview = session.anticipate("fire")
        assert preview.semantic.category == 'fire'
        assert session.manager.anticipation.active
        assert session.engine.context.total_words == 0
        assert session.manager.history == []

    def test_blank_text_ends(self, session):
        session.anticipate("fire")
        assert session.anticipate("") is None
        assert not session.manager.anticipation.active

    def test_custom_influence(self, session):
        session.anticipate("fire", influence=0.4)
        assert session.manager.anticipation.influence == 0.4

    def test_submit_clears_anticipation(self, session):
        session.anticipate("fire")
        session.submit("fire")
        assert not session.manager.anticipation.active


class TestNavigation:
    def test_back_and_forward(self, session):
        session.submit("ocean")
        session.submit("fire")
        session.back()
        assert session.manager.history_index == 0
        assert session.manager.blend.active
        session.forward()
        assert session.manager.history_index == 1

    def test_submit_during_history_blend(self, session):
        session.submit("ocean")
        session.submit("fire")
        session.back()
        session.tick(1.0 / 60)
        result = session.submit("river")
        assert settle(session)
        assert session.manager.get_target() == result.parameters.to_dict()
        for key, value in result.parameters.items():
            assert session.current()[key] == pytest.approx(value, abs=1e-2)

    def test_reset(self, session):
        session.submit("ocean")
        settle(session)
        session.reset()
        assert session.engine.context.total_words == 0
        assert session.engine.previous_output is None
        assert session.manager.history == []
        assert session.current() == DEFAULT_PARAMS


class TestIsolation:
    def test_sessions_do_not_share_state(self, clock):
        first = MorphSession(clock=clock)
        second = MorphSession(clock=clock)
        first.submit("fire")
        first.anticipate("ocean")
        assert second.engine.context.total_words == 0
        assert second.manager.history == []
        assert not second.manager.anticipation.active
        assert second.manager.get_target() == DEFAULT_PARAMS
