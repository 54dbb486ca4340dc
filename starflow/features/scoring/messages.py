"""
Flavor text pools.

Purely cosmetic: nothing in here may influence a star total. Every picker
takes the random source explicitly so tests can seed it.
"""

import random
from typing import Optional, Sequence

REENTRY_MESSAGES = (
    "Welcome back. The sky kept your place.",
    "Returning is its own kind of light.",
    "A star after the dark shines brighter.",
)

PRESENCE_MESSAGES = (
    "Fully here. That glow is yours.",
    "Presence turns minutes into starlight.",
    "You showed up with your whole self.",
)

PLAIN_MESSAGES = (
    "Another star placed.",
    "Small lights, vast sky.",
    "Every moment of movement is a star placed.",
)

ENCOURAGEMENTS = (
    "The stars remember every step you take.",
    "Consistency is its own constellation.",
    "Small lights, vast sky.",
    "Your body is a universe unfolding.",
    "Rest is part of the cosmos.",
    "Growth isn't always visible, like stars at dawn.",
    "You're weaving something luminous.",
    "Gentle with yourself tonight.",
    "Every moment of movement is a star placed.",
    "This is quiet healing in motion.",
)


def _pick(pool: Sequence[str], rng: Optional[random.Random]) -> str:
    return (rng or random).choice(pool)


def session_message(missed_days: int, presence_bonus: float, rng: Optional[random.Random] = None) -> str:
    """Reentry beats presence beats plain."""
    if missed_days >= 1:
        return _pick(REENTRY_MESSAGES, rng)
    if presence_bonus > 0:
        return _pick(PRESENCE_MESSAGES, rng)
    return _pick(PLAIN_MESSAGES, rng)


def pick_encouragement(rng: Optional[random.Random] = None) -> str:
    return _pick(ENCOURAGEMENTS, rng)
