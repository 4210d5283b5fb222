"""wordmorph Parameter Manager.

Owns the live parameter vector that downstream synthesis and rendering
read every frame, and moves it smoothly toward fused targets.

MOMENTUM MODEL (per parameter, per tick):
-----------------------------------------
    effective = anticipating ? current + (predicted - current) * influence
                             : target
    diff      = effective - current
    accel     = diff * acceleration_factor
    velocity  = clamp(velocity * momentum_decay + accel, +-max_velocity)
    current  += velocity * dt * speed[param]

A parameter whose |diff| and |velocity| are both under the settle
epsilon is skipped, so a fully settled manager reports "no changes".

STATES:
-------
    Idle --blend_to--> Blending --progress >= 1--> Idle
                       Blending --set_targets / jump_to--> Idle

Anticipation is an independent flag with a deadline checked on each
tick against the injected clock. History is capped, and committing
behind the tip discards the forward entries.

BUILD ID: parameter_manager_v1.0
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional

from .config import MorphConfig
from .events import ChannelEvent, EventChannel, EventType
from .parameters import (
    MORPH_SPEEDS,
    PARAMETER_CATEGORIES,
    ParameterVector,
    get_speed,
    is_number,
)

logger = logging.getLogger(__name__)

# Thresholds for is_animating()
ANIMATING_EPSILON = 1e-3


def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    return 1 - ((-2 * t + 2) ** 3) / 2


def _numeric_items(values: Mapping[str, Any]) -> Dict[str, float]:
    return {k: float(v) for k, v in values.items() if is_number(v) and not math.isnan(v)}


def _payload_parameters(data: Any, key: str = 'parameters') -> Optional[Mapping[str, float]]:
    """Pull a parameter mapping out of an event payload.

    Accepts a mapping with ``key`` or any object with a ``parameters``
    attribute (a FusionResult, for example).
    """
    if data is None:
        return None
    if isinstance(data, Mapping):
        value = data.get(key)
    else:
        value = getattr(data, key, None)
    if isinstance(value, (Mapping, ParameterVector)):
        return value
    return None


# ============================================================================
# STATE RECORDS
# ============================================================================

@dataclass
class AnticipationState:
    active: bool = False
    predicted: Dict[str, float] = field(default_factory=dict)
    influence: float = 0.1
    expires_at: Optional[float] = None


@dataclass
class BlendState:
    active: bool = False
    source: Dict[str, float] = field(default_factory=dict)
    target: Dict[str, float] = field(default_factory=dict)
    progress: float = 0.0
    duration_ms: float = 300.0
    start_time: float = 0.0


@dataclass
class HistoryEntry:
    parameters: Dict[str, float]
    timestamp: float


@dataclass
class MorphState:
    """Copy of the manager's full state at one instant."""
    current: Dict[str, float]
    target: Dict[str, float]
    velocity: Dict[str, float]
    acceleration: Dict[str, float]
    anticipation: AnticipationState
    blend: BlendState
    history: List[HistoryEntry]
    history_index: int


# ============================================================================
# MANAGER
# ============================================================================

class ParameterManager:
    """Momentum-smoothed live parameter vector.

    Parameters
    ----------
    config : MorphConfig, optional
        Momentum, speed, history and timing settings.
    channel : EventChannel, optional
        Channel for inbound commands and outbound notifications. A
        private channel is created when omitted.
    clock : callable, optional
        Zero-argument callable returning seconds (``time.monotonic``
        by default). Drives blend progress and anticipation expiry.
    """

    def __init__(self, config: Optional[MorphConfig] = None,
                 channel: Optional[EventChannel] = None,
                 clock: Optional[Callable[[], float]] = None) -> None:
        self.config = config or MorphConfig()
        self._clock = clock or time.monotonic
        self.channel = channel if channel is not None else EventChannel(clock=self._clock)

        self.current = ParameterVector()
        self.target = ParameterVector()
        self.velocity: Dict[str, float] = {k: 0.0 for k in self.target}
        self.acceleration: Dict[str, float] = {k: 0.0 for k in self.target}

        self.speeds: Dict[str, float] = dict(MORPH_SPEEDS)
        self.speeds.update(self.config.speeds)

        self.anticipation = AnticipationState(influence=self.config.anticipation_influence)
        self.blend = BlendState(duration_ms=self.config.blend_duration_ms)

        self.history: List[HistoryEntry] = []
        self.history_index = -1

        self._unsubscribers: List[Callable[[], None]] = []
        self._setup_event_handlers()

    # ---- Channel wiring -----------------------------------------------------

    def _setup_event_handlers(self) -> None:
        handlers = {
            EventType.WORD_SUBMITTED: self._on_word_submitted,
            EventType.ANTICIPATION_START: self._on_anticipation_start,
            EventType.ANTICIPATION_END: lambda event: self.clear_anticipation(),
            EventType.CONSTELLATION_SELECT: self._on_constellation_select,
            EventType.HISTORY_BACK: lambda event: self.history_back(),
            EventType.HISTORY_FORWARD: lambda event: self.history_forward(),
            EventType.RESET: lambda event: self.reset(),
        }
        for event_type, handler in handlers.items():
            self._unsubscribers.append(self.channel.subscribe(handler, event_type))

    def detach(self) -> None:
        """Stop listening to the channel."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

    def _on_word_submitted(self, event: ChannelEvent) -> None:
        params = _payload_parameters(event.data)
        if params is None:
            return
        self.set_targets(params)
        self.commit(params)
        self.clear_anticipation()

    def _on_anticipation_start(self, event: ChannelEvent) -> None:
        predicted = _payload_parameters(event.data, 'predicted')
        if predicted is None:
            predicted = _payload_parameters(event.data)
        if predicted is None:
            return
        influence = None
        if isinstance(event.data, Mapping):
            influence = event.data.get('influence')
        self.set_anticipation(predicted, influence)

    def _on_constellation_select(self, event: ChannelEvent) -> None:
        params = _payload_parameters(event.data)
        if params is not None:
            self.blend_to(params)

    def _emit(self, event_type: str, data: Any = None) -> None:
        self.channel.publish(event_type, data)

    # ---- Tick ---------------------------------------------------------------

    def update(self, dt: float) -> bool:
        """Advance one frame of ``dt`` seconds; returns whether anything moved."""
        dt = max(0.0, min(dt, self.config.max_dt))
        changed = False

        if self.anticipation.active and self.anticipation.expires_at is not None \
                and self._clock() >= self.anticipation.expires_at:
            self.clear_anticipation()

        if self.blend.active:
            self._update_blend()
            changed = True

        cfg = self.config
        eps = cfg.settle_epsilon
        anticipating = self.anticipation.active
        predicted = self.anticipation.predicted
        influence = self.anticipation.influence

        for key in list(self.target.keys()):
            current = self.current[key]
            effective = self.target[key]
            if anticipating and key in predicted:
                effective = current + (predicted[key] - current) * influence

            diff = effective - current
            velocity = self.velocity.get(key, 0.0)
            if abs(diff) < eps and abs(velocity) < eps:
                continue
            changed = True

            accel = diff * cfg.acceleration_factor
            velocity = velocity * cfg.momentum_decay + accel
            velocity = max(-cfg.max_velocity, min(cfg.max_velocity, velocity))

            self.acceleration[key] = accel
            self.velocity[key] = velocity
            self.current[key] = current + velocity * dt * get_speed(key, self.speeds)

        if changed:
            self._emit(EventType.PARAMETERS_UPDATED, {
                'current': self.get_current(),
                'target': self.get_target(),
                'velocity': self.get_velocity(),
            })
        return changed

    def _update_blend(self) -> None:
        blend = self.blend
        if blend.duration_ms <= 0:
            progress = 1.0
        else:
            elapsed_ms = (self._clock() - blend.start_time) * 1000.0
            progress = min(1.0, max(blend.progress, elapsed_ms / blend.duration_ms))
        blend.progress = progress

        if progress >= 1.0:
            for key, value in blend.target.items():
                if key in blend.source:
                    self.target[key] = value
            blend.active = False
            self._emit(EventType.BLEND_COMPLETE)
            return

        eased = ease_in_out_cubic(progress)
        for key, value in blend.target.items():
            if key in blend.source:
                source = blend.source[key]
                self.target[key] = source + (value - source) * eased

    # ---- Targets ------------------------------------------------------------

    def set_targets(self, params: Mapping[str, float]) -> None:
        """Set new targets; unseen keys start at their target value.

        Stops a running blend so it cannot overwrite the new targets.
        """
        values = _numeric_items(params)
        if self.blend.active:
            self.blend.active = False
        for key, value in values.items():
            if key not in self.target:
                self.current[key] = value
                self.velocity[key] = 0.0
                self.acceleration[key] = 0.0
            self.target[key] = value
        self._emit(EventType.TARGETS_SET, values)

    def jump_to(self, params: Mapping[str, float]) -> None:
        """Set current and target at once with zero velocity.

        Cancels a running blend so nothing pulls the new values away.
        """
        values = _numeric_items(params)
        if self.blend.active:
            self.blend.active = False
        for key, value in values.items():
            self.current[key] = value
            self.target[key] = value
            self.velocity[key] = 0.0
            self.acceleration[key] = 0.0
        self._emit(EventType.PARAMETERS_JUMPED, values)

    def blend_to(self, params: Mapping[str, float], duration_ms: Optional[float] = None) -> None:
        """Ease committed targets from where they are now to ``params``."""
        if duration_ms is None:
            duration_ms = self.config.blend_duration_ms
        if not is_number(duration_ms) or not math.isfinite(duration_ms) or duration_ms < 0:
            raise ValueError(f"duration_ms must be a finite number >= 0, got {duration_ms!r}")
        self.blend = BlendState(
            active=True,
            source=self.target.to_dict(),
            target=_numeric_items(params),
            progress=0.0,
            duration_ms=float(duration_ms),
            start_time=self._clock(),
        )
        self._emit(EventType.BLEND_START, {
            'source': dict(self.blend.source),
            'target': dict(self.blend.target),
            'duration_ms': self.blend.duration_ms,
        })

    # ---- Anticipation -------------------------------------------------------

    def set_anticipation(self, predicted: Mapping[str, float],
                         influence: Optional[float] = None) -> None:
        """Pull live values a fraction of the way toward ``predicted``.

        Expires on its own ``anticipation_timeout_ms`` after the last call.
        """
        if influence is None:
            influence = self.config.anticipation_influence
        if not is_number(influence) or not 0.0 <= influence <= 1.0:
            raise ValueError(f"influence must be in [0, 1], got {influence!r}")
        self.anticipation = AnticipationState(
            active=True,
            predicted=_numeric_items(predicted),
            influence=float(influence),
            expires_at=self._clock() + self.config.anticipation_timeout_ms / 1000.0,
        )
        self._emit(EventType.ANTICIPATION_ACTIVE, {
            'predicted': dict(self.anticipation.predicted),
            'influence': self.anticipation.influence,
        })

    def clear_anticipation(self) -> None:
        """Drop the anticipation pull. Safe to call at any time."""
        self.anticipation = AnticipationState(influence=self.config.anticipation_influence)
        self._emit(EventType.ANTICIPATION_CLEARED)

    # ---- History ------------------------------------------------------------

    def commit(self, params: Mapping[str, float]) -> None:
        """Append ``params`` to history, discarding any forward entries."""
        if self.history_index < len(self.history) - 1:
            del self.history[self.history_index + 1:]
        self.history.append(HistoryEntry(dict(_numeric_items(params)), self._clock()))
        if len(self.history) > self.config.max_history:
            del self.history[0]
        self.history_index = len(self.history) - 1

    def go_to_history(self, index: int) -> bool:
        """Blend to history entry ``index``; False when out of range."""
        if not 0 <= index < len(self.history):
            return False
        self.history_index = index
        entry = self.history[index]
        self.blend_to(entry.parameters)
        logger.info("History -> %d/%d", index + 1, len(self.history))
        self._emit(EventType.HISTORY_NAVIGATED, {
            'index': index,
            'total': len(self.history),
            'parameters': dict(entry.parameters),
        })
        return True

    def history_back(self) -> bool:
        return self.go_to_history(self.history_index - 1)

    def history_forward(self) -> bool:
        return self.go_to_history(self.history_index + 1)

    # ---- Queries ------------------------------------------------------------

    def get_current(self) -> Dict[str, float]:
        return self.current.to_dict()

    def get_target(self) -> Dict[str, float]:
        return self.target.to_dict()

    def get_velocity(self) -> Dict[str, float]:
        return dict(self.velocity)

    def _category(self, name: str) -> Dict[str, float]:
        return self.current.subset(PARAMETER_CATEGORIES[name])

    def get_audio_params(self) -> Dict[str, float]:
        return self._category('audio')

    def get_visual_params(self) -> Dict[str, float]:
        return self._category('visual')

    def get_scale_params(self) -> Dict[str, float]:
        return self._category('scale')

    def get_progress(self) -> float:
        """1 - mean |target - current|, floored at 0."""
        keys = list(self.target.keys())
        if not keys:
            return 1.0
        total = sum(abs(self.target[k] - self.current[k]) for k in keys)
        return max(0.0, 1.0 - total / len(keys))

    def is_animating(self) -> bool:
        for key in self.target.keys():
            if abs(self.target[key] - self.current[key]) > ANIMATING_EPSILON:
                return True
            if abs(self.velocity.get(key, 0.0)) > ANIMATING_EPSILON:
                return True
        return self.blend.active

    def get_state(self) -> MorphState:
        return MorphState(
            current=self.get_current(),
            target=self.get_target(),
            velocity=dict(self.velocity),
            acceleration=dict(self.acceleration),
            anticipation=AnticipationState(
                active=self.anticipation.active,
                predicted=dict(self.anticipation.predicted),
                influence=self.anticipation.influence,
                expires_at=self.anticipation.expires_at,
            ),
            blend=BlendState(
                active=self.blend.active,
                source=dict(self.blend.source),
                target=dict(self.blend.target),
                progress=self.blend.progress,
                duration_ms=self.blend.duration_ms,
                start_time=self.blend.start_time,
            ),
            history=[HistoryEntry(dict(e.parameters), e.timestamp) for e in self.history],
            history_index=self.history_index,
        )

    # ---- Speeds -------------------------------------------------------------

    def set_speed(self, key: str, speed: float) -> None:
        if not is_number(speed) or not math.isfinite(speed) or speed <= 0:
            raise ValueError(f"speed for {key!r} must be a positive number, got {speed!r}")
        self.speeds[key] = float(speed)

    def set_speeds(self, speeds: Mapping[str, float]) -> None:
        for key, speed in speeds.items():
            self.set_speed(key, speed)

    # ---- Lifecycle ----------------------------------------------------------

    def reset(self) -> None:
        """Back to defaults: no motion, no anticipation, no blend, no history."""
        self.current = ParameterVector()
        self.target = ParameterVector()
        self.velocity = {k: 0.0 for k in self.target}
        self.acceleration = {k: 0.0 for k in self.target}
        self.clear_anticipation()
        self.blend = BlendState(duration_ms=self.config.blend_duration_ms)
        self.history = []
        self.history_index = -1
        logger.info("Parameter manager reset")
        self._emit(EventType.PARAMETERS_RESET)

    def snapshot(self) -> Dict[str, Any]:
        """In-memory copy of current, target and history."""
        return {
            'current': self.get_current(),
            'target': self.get_target(),
            'history': [{'parameters': dict(e.parameters), 'timestamp': e.timestamp}
                        for e in self.history],
            'history_index': self.history_index,
        }

    def restore(self, state: Mapping[str, Any]) -> None:
        """Load a snapshot() result; velocities restart at zero.

        Any running blend or anticipation is dropped.
        """
        if 'current' in state:
            self.current = ParameterVector(state['current'])
        if 'target' in state:
            self.target = ParameterVector(state['target'])
        if 'history' in state:
            self.history = [HistoryEntry(dict(e['parameters']), e.get('timestamp', 0.0))
                            for e in state['history']][-self.config.max_history:]
        if 'history_index' in state:
            self.history_index = min(int(state['history_index']), len(self.history) - 1)
        self.velocity = {k: 0.0 for k in self.target}
        self.acceleration = {k: 0.0 for k in self.target}
        self.blend = BlendState(duration_ms=self.config.blend_duration_ms)
        self.clear_anticipation()
