from __future__ import annotations

import logging

from bowling.errors import FrameLimitExceeded
from bowling.frame_scoring import score_frames
from bowling.models import MAX_FRAMES, Frame, Player

logger = logging.getLogger(__name__)


def submit_frame(player: Player, rolls: list[str]) -> Frame:
    """Score the player's next frame and record it.

    The previous frame's cumulative score is patched with the bonus the new
    rolls resolve. Nothing on ``player`` changes unless scoring succeeds.
    """
    if player.on_frame >= MAX_FRAMES:
        raise FrameLimitExceeded(player.player_name)

    frame_id = player.on_frame + 1
    previous = player.get_frame(player.on_frame) if player.on_frame else None
    current = Frame(frame_id=frame_id, rolls=list(rolls))

    scores = score_frames(previous, current)

    if previous is not None:
        previous.cumulative_score = scores.previous_cumulative_score
    current.cumulative_score = scores.current_cumulative_score
    player.frames.append(current)
    player.total_score = current.cumulative_score
    player.on_frame = frame_id
    return current
