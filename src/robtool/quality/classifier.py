"""Per‑domain risk classification for a single study."""

from __future__ import annotations

from typing import Sequence

from .models import RiskLabel

# Mean star rating a domain must exceed to be judged low risk
LOW_RISK_THRESHOLD = 0.5


def classify(domain_scores: Sequence[int]) -> RiskLabel:
    """Label a domain ``Low`` when its mean rating exceeds 0.5, else ``High``.

    A domain with no ratings is ``High``.
    """
    if not domain_scores:
        return RiskLabel.HIGH
    mean = sum(domain_scores) / len(domain_scores)
    return RiskLabel.LOW if mean > LOW_RISK_THRESHOLD else RiskLabel.HIGH
