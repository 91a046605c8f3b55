from __future__ import annotations

import logging

from bowling.models import MAX_FRAMES, Frame
from bowling.rolls import MAX_PINS, Roll, roll_value
from bowling.schemas import FrameScores
from bowling.validators import validate_stored_frame

logger = logging.getLogger(__name__)


def _is_strike(rolls: list[Roll]) -> bool:
    return rolls[0].is_strike


def _is_spare(rolls: list[Roll]) -> bool:
    return len(rolls) > 1 and rolls[1].is_spare


def _roll_at(rolls: list[Roll], index: int) -> Roll | None:
    return rolls[index] if index < len(rolls) else None


def _strike_bonus(next_rolls: list[Roll]) -> int:
    # Only the following frame is consulted; a strike there leaves the second slot at 0.
    return roll_value(_roll_at(next_rolls, 0)) + roll_value(_roll_at(next_rolls, 1))


def _spare_bonus(next_rolls: list[Roll]) -> int:
    return roll_value(_roll_at(next_rolls, 0))


def _tenth_frame_score(rolls: list[Roll]) -> int:
    score = 0
    for index, roll in enumerate(rolls):
        score += roll.value
        if roll.is_spare and index == 1:
            score += roll_value(_roll_at(rolls, 2))
            break
    return score


def frame_score(frame_id: int, rolls: list[Roll]) -> int:
    """Points a frame earns on its own, before any bonus from later frames."""
    if frame_id == MAX_FRAMES:
        return _tenth_frame_score(rolls)
    if _is_strike(rolls) or _is_spare(rolls):
        return MAX_PINS
    return rolls[0].value + roll_value(_roll_at(rolls, 1))


def score_frames(previous: Frame | None, current: Frame) -> FrameScores:
    """Resolve the bonus owed to ``previous`` and score ``current``.

    Both frames are validated before anything is computed, so an illegal
    frame raises InvalidFrame without producing partial results. The
    returned previous cumulative score replaces the one stored on
    ``previous``; the caller writes both values back.
    """
    current_rolls = validate_stored_frame(current)

    previous_cumulative = 0
    if previous is not None:
        previous_rolls = validate_stored_frame(previous)
        previous_cumulative = previous.cumulative_score
        if _is_strike(previous_rolls):
            previous_cumulative += _strike_bonus(current_rolls)
        elif _is_spare(previous_rolls):
            previous_cumulative += _spare_bonus(current_rolls)

    current_cumulative = previous_cumulative + frame_score(current.frame_id, current_rolls)
    logger.debug(
        "Scored frame %s %s: previous=%s current=%s",
        current.frame_id,
        current.rolls,
        previous_cumulative,
        current_cumulative,
    )
    return FrameScores(
        previous_cumulative_score=previous_cumulative,
        current_cumulative_score=current_cumulative,
    )
