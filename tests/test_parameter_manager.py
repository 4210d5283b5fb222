"""
Tests for the momentum-smoothed parameter manager
"""

import pytest

from wordmorph.core.config import MorphConfig
from wordmorph.core.events import EventType
from wordmorph.core.parameter_manager import ParameterManager, ease_in_out_cubic
from wordmorph.core.parameters import DEFAULT_PARAMS

DT = 1.0 / 60


@pytest.fixture
def manager(clock, channel):
    return ParameterManager(channel=channel, clock=clock)


def run(manager, ticks, dt=DT):
    moved = False
    for _ in range(ticks):
        moved = manager.update(dt)
    return moved


def types(events):
    return [e.event_type for e in events]


class TestEasing:
    def test_endpoints_and_midpoint(self):
        assert ease_in_out_cubic(0.0) == 0.0
        assert ease_in_out_cubic(0.5) == pytest.approx(0.5)
        assert ease_in_out_cubic(1.0) == 1.0

    def test_monotonic(self):
        samples = [ease_in_out_cubic(i / 100) for i in range(101)]
        assert samples == sorted(samples)


class TestMomentum:
    def test_converges_monotonically(self, manager):
        manager.jump_to({'motion': 0.0})
        manager.set_targets({'motion': 1.0})
        previous = manager.current['motion']
        for _ in range(1000):
            manager.update(DT)
            value = manager.current['motion']
            assert 0.0 <= value <= 1.0
            assert value >= previous
            previous = value
        assert manager.current['motion'] == pytest.approx(1.0, abs=1e-3)

    def test_settled_manager_reports_no_change(self, manager):
        assert manager.update(DT) is False
        manager.set_targets({'motion': 0.9})
        assert manager.update(DT) is True
        run(manager, 2000)
        assert manager.update(DT) is False

    def test_faster_parameter_moves_further(self, manager):
        manager.jump_to({'attack_time': 0.0, 'drift': 0.0})
        manager.set_targets({'attack_time': 1.0, 'drift': 1.0})
        run(manager, 10)
        assert manager.current['attack_time'] > manager.current['drift']

    def test_dt_is_clamped(self, clock):
        fast = ParameterManager(clock=clock)
        slow = ParameterManager(clock=clock)
        for m in (fast, slow):
            m.jump_to({'motion': 0.0})
            m.set_targets({'motion': 1.0})
        fast.update(5.0)
        slow.update(MorphConfig().max_dt)
        assert fast.current['motion'] == pytest.approx(slow.current['motion'])

    def test_negative_dt_does_not_move(self, manager):
        manager.jump_to({'motion': 0.0})
        manager.set_targets({'motion': 1.0})
        manager.update(-1.0)
        assert manager.current['motion'] == 0.0

    def test_velocity_clamped(self):
        manager = ParameterManager(MorphConfig(max_velocity=0.05))
        manager.jump_to({'motion': 0.0})
        manager.set_targets({'motion': 1.0})
        run(manager, 50)
        assert abs(manager.get_velocity()['motion']) <= 0.05

    def test_updates_are_published(self, manager, recorder):
        manager.set_targets({'motion': 0.9})
        manager.update(DT)
        updates = [e for e in recorder if e.event_type == EventType.PARAMETERS_UPDATED]
        assert len(updates) == 1
        assert set(updates[0].data) == {'current', 'target', 'velocity'}


class TestTargets:
    def test_targets_are_clamped(self, manager):
        manager.set_targets({'motion': 5.0, 'space': -2.0})
        assert manager.target['motion'] == 1.0
        assert manager.target['space'] == 0.0

    def test_unseen_key_starts_at_target(self, manager):
        manager.set_targets({'shimmer': 0.7})
        assert manager.current['shimmer'] == 0.7
        assert manager.get_velocity()['shimmer'] == 0.0

    def test_non_numeric_ignored(self, manager):
        manager.set_targets({'motion': 'fast', 'space': 0.2})
        assert manager.target['motion'] == DEFAULT_PARAMS['motion']
        assert manager.target['space'] == 0.2

    def test_jump_to(self, manager, recorder):
        manager.set_targets({'motion': 0.1})
        run(manager, 5)
        manager.jump_to({'motion': 0.8})
        assert manager.current['motion'] == 0.8
        assert manager.target['motion'] == 0.8
        assert manager.get_velocity()['motion'] == 0.0
        assert EventType.PARAMETERS_JUMPED in types(recorder)

    def test_set_targets_cancels_blend(self, manager):
        manager.blend_to({'motion': 0.1})
        manager.update(DT)
        manager.set_targets({'motion': 0.9})
        assert not manager.blend.active
        run(manager, 30)
        assert manager.target['motion'] == 0.9

    def test_jump_cancels_blend(self, manager):
        manager.blend_to({'brilliance': 0.1})
        manager.jump_to({'brilliance': 0.9})
        assert not manager.blend.active
        run(manager, 120)
        assert manager.current['brilliance'] == 0.9
        assert manager.target['brilliance'] == 0.9


class TestBlend:
    def test_blend_boundaries(self, manager, clock, recorder):
        manager.jump_to({'motion': 0.5})
        manager.blend_to({'motion': 1.0}, duration_ms=300)

        manager.update(0.0)
        assert manager.target['motion'] == pytest.approx(0.5)

        clock.advance_ms(150)
        manager.update(0.0)
        assert manager.target['motion'] == pytest.approx(0.75)
        assert manager.blend.active

        clock.advance_ms(160)
        manager.update(0.0)
        assert manager.target['motion'] == 1.0
        assert not manager.blend.active
        assert types(recorder).count(EventType.BLEND_COMPLETE) == 1

    def test_progress_never_goes_backwards(self, manager, clock):
        manager.blend_to({'motion': 1.0}, duration_ms=300)
        clock.advance_ms(200)
        manager.update(0.0)
        reached = manager.blend.progress
        clock.advance_ms(-100)
        manager.update(0.0)
        assert manager.blend.progress == reached

    def test_zero_duration_completes_on_next_tick(self, manager):
        manager.blend_to({'warmth': 0.2}, duration_ms=0)
        manager.update(DT)
        assert manager.target['warmth'] == 0.2
        assert not manager.blend.active

    def test_default_duration(self, manager):
        manager.blend_to({'warmth': 0.2})
        assert manager.blend.duration_ms == 300.0

    def test_invalid_duration(self, manager):
        with pytest.raises(ValueError):
            manager.blend_to({'warmth': 0.2}, duration_ms=-5)

    def test_start_event(self, manager, recorder):
        manager.blend_to({'warmth': 0.2}, duration_ms=100)
        start = [e for e in recorder if e.event_type == EventType.BLEND_START][0]
        assert start.data['target'] == {'warmth': 0.2}
        assert start.data['duration_ms'] == 100.0


class TestAnticipation:
    def test_pulls_toward_prediction(self, manager):
        manager.set_anticipation({'motion': 1.0}, influence=0.5)
        run(manager, 10)
        assert manager.current['motion'] > 0.5
        assert manager.target['motion'] == 0.5

    def test_expires(self, manager, clock, recorder):
        manager.set_anticipation({'motion': 1.0})
        clock.advance_ms(1499)
        manager.update(DT)
        assert manager.anticipation.active
        clock.advance_ms(2)
        manager.update(DT)
        assert not manager.anticipation.active
        assert EventType.ANTICIPATION_CLEARED in types(recorder)

    def test_refresh_extends_deadline(self, manager, clock):
        manager.set_anticipation({'motion': 1.0})
        clock.advance_ms(1000)
        manager.set_anticipation({'motion': 1.0})
        clock.advance_ms(1000)
        manager.update(DT)
        assert manager.anticipation.active

    def test_clear_is_idempotent(self, manager):
        manager.clear_anticipation()
        manager.clear_anticipation()
        assert not manager.anticipation.active

    def test_cancelled_anticipation_does_not_animate(self, manager):
        manager.set_anticipation({'motion': 1.0})
        manager.clear_anticipation()
        assert manager.update(DT) is False

    def test_invalid_influence(self, manager):
        with pytest.raises(ValueError):
            manager.set_anticipation({'motion': 1.0}, influence=1.5)


class TestHistory:
    def test_back_and_forward(self, manager, recorder):
        for value in (0.1, 0.2, 0.3):
            manager.commit({'motion': value})
        assert manager.history_index == 2
        assert manager.history_back()
        assert manager.history_index == 1
        assert manager.blend.target == {'motion': 0.2}
        assert manager.history_forward()
        assert manager.history_index == 2
        assert not manager.history_forward()
        assert EventType.HISTORY_NAVIGATED in types(recorder)

    def test_commit_behind_tip_discards_forward(self, manager):
        for value in (0.1, 0.2, 0.3):
            manager.commit({'motion': value})
        manager.history_back()
        manager.history_back()
        manager.commit({'motion': 0.9})
        assert [e.parameters['motion'] for e in manager.history] == [0.1, 0.9]
        assert manager.history_index == 1

    def test_capped(self, clock):
        manager = ParameterManager(MorphConfig(max_history=3), clock=clock)
        for n in range(5):
            manager.commit({'motion': n / 10})
        assert len(manager.history) == 3
        assert manager.history[0].parameters['motion'] == 0.2
        assert manager.history_index == 2

    def test_out_of_range(self, manager):
        assert not manager.history_back()
        assert not manager.go_to_history(5)


class TestQueries:
    def test_progress(self, manager):
        assert manager.get_progress() == 1.0
        manager.jump_to({'motion': 0.0})
        manager.set_targets({'motion': 1.0})
        assert manager.get_progress() == pytest.approx(1.0 - 1.0 / len(manager.target))

    def test_is_animating(self, manager):
        assert not manager.is_animating()
        manager.set_targets({'motion': 0.9})
        assert manager.is_animating()
        manager.jump_to({'motion': 0.9})
        assert not manager.is_animating()
        manager.blend_to({'motion': 0.9})
        assert manager.is_animating()

    def test_category_views(self, manager):
        visual = manager.get_visual_params()
        assert visual['saturation'] == 0.6
        assert len(visual) == 9
        assert 'hue' not in manager.get_audio_params()
        assert manager.get_scale_params() == {'scale_index': 0.0, 'root_note': 60.0, 'octave': 4.0}
        assert 'motion' in manager.get_audio_params()
        assert 'root_note' not in manager.get_audio_params()

    def test_state_is_a_copy(self, manager):
        state = manager.get_state()
        state.current['motion'] = 0.0
        state.anticipation.predicted['x'] = 1.0
        assert manager.current['motion'] == 0.5
        assert manager.anticipation.predicted == {}


class TestSpeeds:
    def test_config_overrides(self):
        manager = ParameterManager(MorphConfig(speeds={'motion': 3.0}))
        assert manager.speeds['motion'] == 3.0
        assert manager.speeds['space'] == 0.5

    def test_set_speed(self, manager):
        manager.set_speeds({'motion': 2.0, 'shimmer': 0.4})
        assert manager.speeds['motion'] == 2.0
        assert manager.speeds['shimmer'] == 0.4
        with pytest.raises(ValueError):
            manager.set_speed('motion', 0)


class TestLifecycle:
    def test_reset(self, manager, recorder):
        manager.set_targets({'motion': 0.9})
        manager.commit({'motion': 0.9})
        manager.set_anticipation({'space': 1.0})
        run(manager, 5)
        manager.reset()
        assert manager.get_current() == DEFAULT_PARAMS
        assert manager.get_target() == DEFAULT_PARAMS
        assert manager.history == []
        assert manager.history_index == -1
        assert not manager.anticipation.active
        assert EventType.PARAMETERS_RESET in types(recorder)

    def test_snapshot_restore(self, manager, clock):
        manager.set_targets({'motion': 0.9})
        manager.commit({'motion': 0.9})
        run(manager, 5)
        state = manager.snapshot()

        other = ParameterManager(clock=clock)
        other.restore(state)
        assert other.get_current() == manager.get_current()
        assert other.get_target() == manager.get_target()
        assert other.history_index == 0
        assert other.history[0].parameters == {'motion': 0.9}
        assert all(v == 0.0 for v in other.get_velocity().values())

    def test_restore_drops_anticipation_and_blend(self, manager):
        state = manager.snapshot()
        manager.set_anticipation({'motion': 1.0})
        manager.blend_to({'warmth': 0.1})
        manager.restore(state)
        assert not manager.anticipation.active
        assert not manager.blend.active
        assert manager.update(DT) is False


class TestChannelCommands:
    def test_word_submitted(self, manager, channel):
        manager.set_anticipation({'motion': 1.0})
        channel.publish(EventType.WORD_SUBMITTED, {'parameters': {'motion': 0.9}})
        assert manager.target['motion'] == 0.9
        assert len(manager.history) == 1
        assert not manager.anticipation.active

    def test_anticipation_start_and_end(self, manager, channel):
        channel.publish(EventType.ANTICIPATION_START,
                        {'predicted': {'motion': 1.0}, 'influence': 0.2})
        assert manager.anticipation.active
        assert manager.anticipation.influence == 0.2
        channel.publish(EventType.ANTICIPATION_END)
        assert not manager.anticipation.active

    def test_constellation_select_blends(self, manager, channel):
        channel.publish(EventType.CONSTELLATION_SELECT, {'parameters': {'warmth': 0.1}})
        assert manager.blend.active
        assert manager.blend.target == {'warmth': 0.1}

    def test_history_and_reset(self, manager, channel):
        manager.commit({'motion': 0.1})
        manager.commit({'motion': 0.2})
        channel.publish(EventType.HISTORY_BACK)
        assert manager.history_index == 0
        channel.publish(EventType.HISTORY_FORWARD)
        assert manager.history_index == 1
        channel.publish(EventType.RESET)
        assert manager.history == []

    def test_malformed_payload_ignored(self, manager, channel):
        channel.publish(EventType.WORD_SUBMITTED, {'nothing': 1})
        channel.publish(EventType.WORD_SUBMITTED)
        assert manager.history == []

    def test_detach(self, manager, channel):
        manager.detach()
        channel.publish(EventType.WORD_SUBMITTED, {'parameters': {'motion': 0.9}})
        assert manager.target['motion'] == 0.5
