"""
Score breakdown domain model.

A breakdown explains how one session turned into stars. It is derived on
demand and never stored.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ScoreBreakdown:
    """
    Per-session star computation.

    Attributes:
        base_stars: 1.0 when the session met its activity's minimum duration, else 0
        presence_bonus: 0.5 for the first mindful qualifying session of the day
        reentry_multiplier: 1.0..1.5 depending on days missed before this session
        pacing_multiplier: 1.0..0.35 depending on the session's ordinal that day
        stars_earned: (base + presence) * reentry * pacing, rounded to 2 decimals
        message: cosmetic flavor text, never used in totals
        missed_days: fully missed days before this session (None when not qualifying)
        pacing_index: 1-based ordinal among the day's qualifying sessions (None when not qualifying)
    """

    base_stars: float = 0.0
    presence_bonus: float = 0.0
    reentry_multiplier: float = 0.0
    pacing_multiplier: float = 0.0
    stars_earned: float = 0.0
    message: str = ""
    missed_days: Optional[int] = None
    pacing_index: Optional[int] = None

    @property
    def qualified(self) -> bool:
        return self.base_stars > 0

    def validate(self) -> None:
        """Ensure the breakdown is internally consistent."""
        assert self.base_stars in (0.0, 1.0), f"base_stars out of range: {self.base_stars}"
        assert self.presence_bonus in (0.0, 0.5), f"presence_bonus out of range: {self.presence_bonus}"
        assert self.stars_earned >= 0.0, f"stars_earned negative: {self.stars_earned}"
        if not self.qualified:
            assert self.stars_earned == 0.0, "non-qualifying session earned stars"

    def to_dict(self) -> dict:
        """Serialize to dict for JSON response."""
        return {
            "baseStars": self.base_stars,
            "presenceBonus": self.presence_bonus,
            "reentryMultiplier": self.reentry_multiplier,
            "pacingMultiplier": self.pacing_multiplier,
            "starsEarned": self.stars_earned,
            "message": self.message,
            "missedDays": self.missed_days,
            "pacingIndex": self.pacing_index,
        }
