"""wordmorph Morph Session.

One FusionEngine and one ParameterManager talking over a private event
channel. The host submits text, optionally sends partial text while
the user types, and ticks once per frame.

    session = MorphSession()
    session.submit("ocean")
    while session.tick(1 / 60):
        render(session.current())

BUILD ID: session_v1.0
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Dict, Optional

from .config import FusionConfig, MorphConfig
from .events import EventChannel, EventType
from .parameter_manager import ParameterManager

logger = logging.getLogger(__name__)


class MorphSession:
    """Text in, smoothly morphing parameters out.

    Parameters
    ----------
    fusion_config : FusionConfig, optional
    morph_config : MorphConfig, optional
    clock : callable, optional
        Seconds clock shared by the context, the manager and the channel.
    phonetic : PhoneticLayer, optional
        External phonetic extractor handed to the engine.
    """

    def __init__(self, fusion_config: Optional[FusionConfig] = None,
                 morph_config: Optional[MorphConfig] = None,
                 clock: Optional[Callable[[], float]] = None,
                 phonetic=None) -> None:
        # Deferred import: mapping depends on core, not the other way round
        from ..mapping.fusion import FusionEngine

        self.clock = clock or time.monotonic
        self.channel = EventChannel(clock=self.clock)
        self.engine = FusionEngine(config=fusion_config, phonetic=phonetic,
                                   clock=self.clock, channel=self.channel)
        self.manager = ParameterManager(config=morph_config, channel=self.channel,
                                        clock=self.clock)

    def submit(self, text: str):
        """Process ``text`` for real and retarget the live vector.

        Multi-word text goes through process_phrase. Returns the
        FusionResult, or None for blank text.
        """
        if not text.strip():
            return None
        if len(text.split()) > 1:
            result = self.engine.process_phrase(text)
        else:
            result = self.engine.process_word(text)
        logger.debug("Submitted %r -> scales %s", text, result.scales)
        self.channel.publish(EventType.WORD_SUBMITTED, result)
        return result

    def anticipate(self, partial_text: str, influence: Optional[float] = None):
        """Lean toward what ``partial_text`` would produce, without committing.

        Blank text ends anticipation. Returns the preview FusionResult
        or None.
        """
        if not partial_text.strip():
            self.channel.publish(EventType.ANTICIPATION_END)
            return None
        preview = self.engine.preview(partial_text)
        self.channel.publish(EventType.ANTICIPATION_START, {
            'predicted': preview.parameters,
            'influence': influence,
        })
        return preview

    def tick(self, dt: float) -> bool:
        return self.manager.update(dt)

    def current(self) -> Dict[str, float]:
        return self.manager.get_current()

    def back(self) -> None:
        self.channel.publish(EventType.HISTORY_BACK)

    def forward(self) -> None:
        self.channel.publish(EventType.HISTORY_FORWARD)

    def reset(self) -> None:
        """Forget all context and return the live vector to defaults."""
        self.engine.reset()
        self.channel.publish(EventType.RESET)
