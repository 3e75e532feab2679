from __future__ import annotations

import argparse
import json
import logging
import sys

from ..services.nlp.lexicon_loader import load_lexicon
from ..services.nlp.scorer import score_text_with_context
from ..services.nlp.signal_mapper import map_signals


def score_lines(
    lines: list[str],
    lexicon_base: str | None = None,
    with_signal: bool = False,
    typing_energy: float = 0.0,
) -> list[dict]:
    state = load_lexicon(lexicon_base)
    rows: list[dict] = []
    for line in lines:
        result = score_text_with_context(line, state.lexicon, state.phrases)
        row = {"text": line, **result.to_dict()}
        if with_signal:
            targets = map_signals(result, typing_energy)
            row["speed"] = round(targets.speed, 4)
            row["amplitude"] = round(targets.amplitude, 4)
            row["color"] = [round(c, 4) for c in targets.color]
        rows.append(row)
    return rows


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Score text against the anger/joy/sad emotion lexicon.")
    parser.add_argument("text", nargs="*", help="Text to score. Reads one text per stdin line when omitted.")
    parser.add_argument("--lexicon-base", default=None, help="Directory or http(s) base holding emotion_words.json.")
    parser.add_argument("--signal", action="store_true", help="Also print mapped speed/amplitude/color targets.")
    parser.add_argument("--typing-energy", type=float, default=0.0, help="Typing activity in [0, 1] for --signal.")
    parser.add_argument("--verbose", action="store_true", help="Log lexicon loading details.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)
    if args.text:
        lines = [" ".join(args.text)]
    else:
        lines = [line.rstrip("\n") for line in sys.stdin if line.strip()]
    typing_energy = min(max(args.typing_energy, 0.0), 1.0)
    for row in score_lines(lines, args.lexicon_base, with_signal=args.signal, typing_energy=typing_energy):
        print(json.dumps(row, ensure_ascii=True))


if __name__ == "__main__":
    main()
