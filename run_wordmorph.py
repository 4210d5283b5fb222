#!/usr/bin/env python3
"""wordmorph - words in, morphing parameters out.

Feeds text through a MorphSession and prints how the live parameter
vector settles after each submission.

Usage:
    python run_wordmorph.py ocean thunder "quiet rain"
    python run_wordmorph.py --frames 120 --keys motion,space ocean
    echo "burning sky" | python run_wordmorph.py -
    python run_wordmorph.py --verbose ocean

BUILD ID: launcher_v1.0
"""

import sys
import os
import argparse
import logging

# Ensure the project root is on the path
HERE = os.path.dirname(os.path.abspath(__file__))
if HERE not in sys.path:
    sys.path.insert(0, HERE)

from wordmorph import MorphSession  # noqa: E402
from wordmorph.core.config import FusionConfig, LayerWeights, MorphConfig  # noqa: E402

DEFAULT_KEYS = ('brilliance', 'motion', 'space', 'warmth', 'complexity', 'tempo')


class FrameClock:
    """Clock advanced by the launcher one frame at a time."""

    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def _read_inputs(items):
    if items == ['-']:
        return [line.strip() for line in sys.stdin if line.strip()]
    return items


def _format_row(label, values, keys):
    cells = "  ".join(f"{k}={values.get(k, 0.5):.3f}" for k in keys)
    return f"{label:>18s}  {cells}"


def run(texts, frames, fps, keys, fusion_config, morph_config):
    clock = FrameClock()
    session = MorphSession(fusion_config=fusion_config, morph_config=morph_config, clock=clock)
    dt = 1.0 / fps

    for text in texts:
        result = session.submit(text)
        if result is None:
            continue
        tag = " *magic*" if result.is_magic_word else ""
        print(f"\n> {text}{tag}")
        if result.magic_description:
            print(f"  {result.magic_description}")
        print(f"  scales: {', '.join(result.scales)}")
        if result.emotional_state is not None:
            state = result.emotional_state
            print(f"  emotion: {state.emotion} ({state.quadrant}, {state.intensity:.2f})")
        print(_format_row("target", result.parameters, keys))

        ticks = 0
        for ticks in range(1, frames + 1):
            clock.now += dt
            if not session.tick(dt):
                break
        print(_format_row(f"after {ticks} frames", session.current(), keys))
        print(f"  progress: {session.manager.get_progress():.3f}")

    stats = session.engine.get_stats()
    print()
    print(f"words: {stats['total_words']}  "
          f"dominant category: {stats['dominant_category']}  "
          f"dominant scale: {stats['dominant_scale']}")


# ── CLI ────────────────────────────────────────────────────────────────

def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="wordmorph",
        description="wordmorph - map words to a morphing parameter vector",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("text", nargs="+", help="Words or phrases to submit ('-' reads stdin)")
    parser.add_argument("--frames", type=int, default=90, help="Frames to run per submission")
    parser.add_argument("--fps", type=float, default=60.0, help="Frame rate")
    parser.add_argument("--keys", default=",".join(DEFAULT_KEYS),
                        help="Comma-separated parameters to print")
    parser.add_argument("--smoothing", type=float, default=0.3, help="Engine output smoothing")
    parser.add_argument("--context", type=float, default=0.15, help="Context influence")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        fusion_config = FusionConfig(weights=LayerWeights(context=args.context),
                                     smoothing=args.smoothing)
        morph_config = MorphConfig()
    except ValueError as exc:
        parser.error(str(exc))

    if args.fps <= 0:
        parser.error("--fps must be positive")

    keys = [k.strip() for k in args.keys.split(",") if k.strip()]
    run(_read_inputs(args.text), max(0, args.frames), args.fps, keys,
        fusion_config, morph_config)


if __name__ == "__main__":
    main()
