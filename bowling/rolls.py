from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from bowling.errors import InvalidRoll

STRIKE_SYMBOL = "X"
SPARE_SYMBOL = "/"
MAX_PINS = 10


class RollKind(str, Enum):
    strike = "strike"
    spare = "spare"
    pins = "pins"


@dataclass(frozen=True)
class Roll:
    kind: RollKind
    pins: int = 0

    def __post_init__(self) -> None:
        if self.kind == RollKind.pins and not 0 <= self.pins <= MAX_PINS - 1:
            raise InvalidRoll(self.pins)

    @property
    def value(self) -> int:
        if self.kind in (RollKind.strike, RollKind.spare):
            return MAX_PINS
        return self.pins

    @property
    def is_strike(self) -> bool:
        return self.kind == RollKind.strike

    @property
    def is_spare(self) -> bool:
        return self.kind == RollKind.spare

    @property
    def is_pins(self) -> bool:
        return self.kind == RollKind.pins


STRIKE = Roll(RollKind.strike)
SPARE = Roll(RollKind.spare)


def parse_roll(token: str) -> Roll:
    if not isinstance(token, str):
        raise InvalidRoll(token)
    if token.upper() == STRIKE_SYMBOL:
        return STRIKE
    if token == SPARE_SYMBOL:
        return SPARE
    # str.isdigit also accepts non-ASCII digits such as "²"
    if len(token) == 1 and token in "0123456789":
        return Roll(RollKind.pins, int(token))
    raise InvalidRoll(token)


def roll_value(roll: Roll | None) -> int:
    """Face value of a roll; a missing roll counts as 0."""
    return roll.value if roll is not None else 0
