"""Standard burnout scoring: three capped rules summed into a 0-100 score.

Each rule is a descending tier chain. The first tier whose threshold is strictly
exceeded wins, so tiers of one rule never add up.

    overtime fatigue     avg overtime h/record   >15: 40  >10: 30  >5: 15
    leave deprivation    days since last leave   >180: 35 >120: 25 >90: 15
    attendance strain    late arrivals           >10: 25  >5: 15   >2: 8
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Optional, Sequence

from ...core.constants import DAYS_PER_MONTH, RISK_LEVEL_BANDS
from ...core.enums import RiskLevel
from ..metrics import Metrics
from .base import RiskAssessment, RiskScorer


@dataclass(frozen=True)
class Tier:
    above: float
    points: int
    flag: str


@dataclass(frozen=True)
class ScoringRule:
    name: str
    metric: Callable[[Metrics], float]
    tiers: tuple[Tier, ...]

    @property
    def max_points(self) -> int:
        return max((t.points for t in self.tiers), default=0)

    def match(self, value: float) -> Optional[Tier]:
        for tier in self.tiers:
            if value > tier.above:
                return tier
        return None


OVERTIME_FATIGUE = ScoringRule(
    name="overtime_fatigue",
    metric=lambda m: m.avg_overtime_hours,
    tiers=(
        Tier(15, 40, "Excessive overtime: {hours}h avg/day"),
        Tier(10, 30, "High overtime: {hours}h avg/day"),
        Tier(5, 15, "Moderate overtime: {hours}h avg/day"),
    ),
)

LEAVE_DEPRIVATION = ScoringRule(
    name="leave_deprivation",
    metric=lambda m: m.days_since_last_leave,
    tiers=(
        Tier(180, 35, "No leave in {months} months"),
        Tier(120, 25, "No leave in {months} months"),
        Tier(90, 15, "No leave in 3+ months"),
    ),
)

ATTENDANCE_STRAIN = ScoringRule(
    name="attendance_strain",
    metric=lambda m: m.late_arrivals,
    tiers=(
        Tier(10, 25, "{value} late arrivals"),
        Tier(5, 15, "{value} late arrivals"),
        Tier(2, 8, "{value} late arrivals"),
    ),
)

# Declaration order is flag order.
STANDARD_RULES: tuple[ScoringRule, ...] = (OVERTIME_FATIGUE, LEAVE_DEPRIVATION, ATTENDANCE_STRAIN)


def format_hours(value: float) -> str:
    """One decimal place, ties rounded away from zero."""
    return str(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def risk_level_for_score(score: int) -> RiskLevel:
    for minimum, level in RISK_LEVEL_BANDS:
        if score >= minimum:
            return RiskLevel(level)
    return RiskLevel.LOW


class StandardRiskScorer(RiskScorer):
    """Sum of the standard rules; each rule contributes at most its top tier."""

    def __init__(self, rules: Sequence[ScoringRule] = STANDARD_RULES):
        self._rules = tuple(rules)

    @property
    def max_score(self) -> int:
        return sum(rule.max_points for rule in self._rules)

    def score(self, metrics: Metrics) -> RiskAssessment:
        score = 0
        flags: list[str] = []

        for rule in self._rules:
            value = rule.metric(metrics)
            tier = rule.match(value)
            if tier is None:
                continue
            score += tier.points
            flags.append(
                tier.flag.format(
                    value=value,
                    hours=format_hours(value),
                    months=int(value // DAYS_PER_MONTH),
                )
            )

        return RiskAssessment(risk_score=score, risk_level=risk_level_for_score(score), flags=tuple(flags))
