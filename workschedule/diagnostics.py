from __future__ import annotations

from typing import Sequence

SUCCESS_MESSAGE = "✅ Schedule generated successfully!"

PROBABLE_CAUSES = (
    "too many exclusions",
    'imbalance between "can only" and "cannot" restrictions',
    "not enough available workers",
    "rest-period conflicts",
)


def generate_status_message(unfilled: Sequence[str]) -> str:
    """
    Human-facing status for a finished run.

    Presentational only: callers must not branch on the text.
    """
    if not unfilled:
        return SUCCESS_MESSAGE
    causes = "\n".join(f"• {cause}" for cause in PROBABLE_CAUSES)
    noun = "shift" if len(unfilled) == 1 else "shifts"
    return (
        "⚠️ Could not build a complete schedule!\n"
        "\n"
        f"{len(unfilled)} {noun} could not be filled, probably because of:\n"
        f"{causes}\n"
        "\n"
        "The schedule was created with gaps - fill them in manually. ✏️"
    )
