"""Run a batch of riddle submissions through the matcher and report each decision."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

from riddle_answer_match.matcher import AnswerMatcher

# (submission, canonical answer, alternates, expected decision)
SMOKE_CASES = [
    ("needle", "A needle", ["pin"], True),
    ("needles", "needle", [], True),
    ("ecco", "echo", [], True),
    ("7", "seven", [], True),
    ("an echo that repeats", "echo", [], True),
    ("fxxtstxps", "footsteps", [], True),
    ("fxxxstxps", "footsteps", [], False),
    ("completely unrelated phrase", "echo", [], False),
]


def pretty(data: object) -> str:
    """Return deterministic pretty JSON string."""
    return json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False)


async def run(matcher: AnswerMatcher) -> int:
    failures = 0
    for submission, answer, alternates, expected in SMOKE_CASES:
        decision = await matcher.check(submission, answer, alternates)
        marker = "✓" if decision["accepted"] == expected else "✗"
        if decision["accepted"] != expected:
            failures += 1
        print(f"{marker} {submission!r} vs {answer!r}")
        print(pretty(decision))
    return failures


def main() -> int:
    parser = argparse.ArgumentParser(description="Smoke test for the riddle answer matcher.")
    parser.add_argument(
        "--semantic",
        action="store_true",
        help="Also ask the embedding model when the rules reject (downloads the model).",
    )
    args = parser.parse_args()

    matcher = AnswerMatcher(semantic_enabled=args.semantic)
    failures = asyncio.run(run(matcher))

    if failures:
        print(f"\n✗ {failures} case(s) did not match expectations", file=sys.stderr)
        return 1

    print(f"\n✓ All {len(SMOKE_CASES)} cases matched expectations")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
