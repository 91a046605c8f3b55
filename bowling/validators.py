import logging
from uuid import UUID

from bowling.errors import InvalidFrame, InvalidIdentifier, InvalidRoll
from bowling.models import MAX_FRAMES, Frame
from bowling.rolls import MAX_PINS, Roll, parse_roll

logger = logging.getLogger(__name__)

MAX_TENTH_FRAME_SCORE = 30


def parse_rolls(frame_id: int, tokens: list[str]) -> list[Roll]:
    rolls = []
    for token in tokens:
        try:
            rolls.append(parse_roll(token))
        except InvalidRoll as exc:
            raise InvalidRoll(exc.token, frame_id=frame_id) from exc
    return rolls


def _validate_spares(frame_id: int, tokens: list[str], rolls: list[Roll]) -> None:
    for index, roll in enumerate(rolls):
        if not roll.is_spare:
            continue
        if index != 1 or not rolls[0].is_pins:
            raise InvalidFrame(
                "Spare (/) must be the second roll and preceded by a number",
                frame_id=frame_id,
                rolls=tokens,
            )


def _validate_tenth_frame(tokens: list[str], rolls: list[Roll]) -> None:
    if len(rolls) < 2 or len(rolls) > 3:
        raise InvalidFrame("10th frame must have 2 or 3 rolls", frame_id=MAX_FRAMES, rolls=tokens)
    if sum(r.value for r in rolls) > MAX_TENTH_FRAME_SCORE:
        raise InvalidFrame(
            f"10th frame total score cannot exceed {MAX_TENTH_FRAME_SCORE}",
            frame_id=MAX_FRAMES,
            rolls=tokens,
        )


def _validate_standard_frame(frame_id: int, tokens: list[str], rolls: list[Roll]) -> None:
    first = rolls[0]
    if first.is_strike:
        if len(rolls) != 1:
            raise InvalidFrame("Strike frame must have only 1 roll", frame_id=frame_id, rolls=tokens)
        return

    is_spare = len(rolls) > 1 and rolls[1].is_spare
    if len(rolls) != 2:
        kind = "Spare" if is_spare else "Normal"
        raise InvalidFrame(f"{kind} frame must have exactly 2 rolls", frame_id=frame_id, rolls=tokens)
    if not is_spare and first.value + rolls[1].value > MAX_PINS:
        raise InvalidFrame(f"Frame total score cannot exceed {MAX_PINS}", frame_id=frame_id, rolls=tokens)


def validate_frame(frame_id: int, tokens: list[str]) -> list[Roll]:
    """Check that ``tokens`` form a legal frame at position ``frame_id``.

    Returns the parsed rolls. Raises InvalidFrame (or its subclass
    InvalidRoll) on the first rule that fails.
    """
    if not 1 <= frame_id <= MAX_FRAMES:
        raise InvalidFrame(f"Frame ID must be between 1 and {MAX_FRAMES}", frame_id=frame_id, rolls=tokens)
    if not tokens:
        raise InvalidFrame("Frame must have at least one roll", frame_id=frame_id, rolls=tokens)

    rolls = parse_rolls(frame_id, tokens)
    _validate_spares(frame_id, tokens, rolls)
    if frame_id == MAX_FRAMES:
        _validate_tenth_frame(tokens, rolls)
    else:
        _validate_standard_frame(frame_id, tokens, rolls)
    return rolls


def validate_stored_frame(frame: Frame) -> list[Roll]:
    return validate_frame(frame.frame_id, frame.rolls)


def parse_identifier(kind: str, value: str | UUID) -> UUID:
    if isinstance(value, UUID):
        return value
    try:
        return UUID(value)
    except (AttributeError, TypeError, ValueError) as exc:
        logger.debug("Rejected %s identifier %r", kind, value)
        raise InvalidIdentifier(kind, str(value)) from exc
