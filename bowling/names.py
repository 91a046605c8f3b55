from __future__ import annotations

import random

ADJECTIVES = ["Fast", "Fierce", "Epic", "Legendary", "Mighty", "Dynamic"]
NOUNS = ["Battle", "Strike", "Bowl", "Showdown", "Challenge", "Arena"]


def generate_game_name(rng: random.Random | None = None) -> str:
    """Random display name such as "Epic Bowl #2345"."""
    rng = rng or random
    return f"{rng.choice(ADJECTIVES)} {rng.choice(NOUNS)} #{rng.randint(1000, 9999)}"
