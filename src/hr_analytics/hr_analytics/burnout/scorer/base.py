from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ...core.enums import RiskLevel
from ..metrics import Metrics


@dataclass(frozen=True)
class RiskAssessment:
    risk_score: int
    risk_level: RiskLevel
    flags: tuple[str, ...]


class RiskScorer(ABC):
    """Scorer interface (Strategy Pattern for burnout risk)."""

    @abstractmethod
    def score(self, metrics: Metrics) -> RiskAssessment:
        raise NotImplementedError
