"""CLI for trying riddle answers against the matcher."""

import asyncio
import logging
import sys

import typer

from riddle_answer_match.config import settings

# Initialize logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Create Typer app
app = typer.Typer(
    name="riddle-answer-match",
    help="Riddle Answer Match CLI",
    add_completion=False,
)


@app.command()
def check(
    answer: str = typer.Option(..., "--answer", "-a", help="Submitted answer"),
    expected: str = typer.Option(..., "--expected", "-e", help="Canonical answer"),
    alt: list[str] = typer.Option(None, "--alt", help="Alternate accepted answer (repeatable)"),
    semantic: bool = typer.Option(
        False,
        "--semantic/--no-semantic",
        help="Ask the embedding model when the rules reject",
    ),
) -> None:
    """
    Check a submission against a riddle's answers.

    Example:
        riddle-answer-match check --answer "needles" --expected "A needle" --alt "pin"
    """
    from riddle_answer_match.matcher import AnswerMatcher

    try:
        matcher = AnswerMatcher(semantic_enabled=semantic)
        decision = asyncio.run(matcher.check(answer, expected, alt or []))

        if decision["accepted"]:
            print("✓ Accepted")
            print(f"  Candidate: {decision['candidate']}")
            print(f"  Rule: {decision['rule']}")
        else:
            print("✗ Rejected")
    except Exception as e:
        logger.error(f"Error checking answer: {e}")
        sys.exit(1)


@app.command()
def similarity(
    text_a: str = typer.Argument(..., help="First text"),
    text_b: str = typer.Argument(..., help="Second text"),
) -> None:
    """Print the embedding similarity of two texts."""
    from riddle_answer_match.semantic import SemanticSimilarityService

    try:
        service = SemanticSimilarityService()
        score = asyncio.run(service.get_semantic_similarity(text_a, text_b))

        if score is None:
            print("Similarity: unknown")
        else:
            print(f"Similarity: {score:.3f}")
            print(f"Threshold: {settings.semantic_threshold:.2f}")
    except Exception as e:
        logger.error(f"Error computing similarity: {e}")
        sys.exit(1)


@app.command()
def info() -> None:
    """Display configuration information."""
    print(f"Embed provider: {settings.embed_provider}")
    if settings.embed_provider == "titan":
        print(f"Embed model: {settings.titan_embed_model}")
        print(f"AWS region: {settings.aws_region}")
    else:
        print(f"Embed model: {settings.embed_model_name}")
    print(f"Semantic enabled: {settings.semantic_enabled}")
    print(f"Semantic threshold: {settings.semantic_threshold}")
    print(f"Min AI input length: {settings.min_ai_input_length}")


if __name__ == "__main__":
    app()
