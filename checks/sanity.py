"""
Heuristic sanity checks on base assumptions before they enter the engine.

Catches numbers that are out of bounds or far from typical SaaS ranges:
- Churn outside [0, 1] or above 15% monthly
- Non-positive or tiny ARPU
- CAC / payback inconsistencies and LTV:CAC below 3
- Gross margin outside [0, 100] or below 50%
- Short estimated runway
- Negative growth or out-of-range expansion

Checks never stop the simulation; they only report. Every check runs
independently and warnings keep the order above.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from core.config import SanityThresholds
from core.schema import AssumptionSet, CompanyState
from engine.calculations import calculate_ltv, calculate_ltv_to_cac

logger = logging.getLogger(__name__)


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class SanityWarning:
    severity: Severity
    field: str
    message: str
    suggestion: Optional[str] = None


@dataclass
class SanityCheckResult:
    """Collects all warnings for one assumption set."""
    warnings: List[SanityWarning] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not any(w.severity == Severity.HIGH for w in self.warnings)

    def by_severity(self, severity: Severity) -> List[SanityWarning]:
        return [w for w in self.warnings if w.severity == severity]

    def summary(self) -> str:
        if not self.warnings:
            return "✓ All checks passed."
        lines = [f"{'PASSED' if self.passed else 'FAILED'} with {len(self.warnings)} warning(s):"]
        # most severe first, check order within a severity
        for severity in (Severity.HIGH, Severity.MEDIUM, Severity.LOW):
            for w in self.by_severity(severity):
                line = f"  [{severity.value.upper()}] {w.field}: {w.message}"
                if w.suggestion:
                    line += f" ({w.suggestion})"
                lines.append(line)
        return "\n".join(lines)


def _estimated_runway(company: CompanyState, assumptions: AssumptionSet) -> Optional[float]:
    burn = assumptions.fixed_costs_per_month + (
        assumptions.expected_new_customers_per_month * assumptions.cac
    )
    if burn <= 0:
        return None
    return company.starting_cash / burn


def run_sanity_checks(
    company: CompanyState,
    assumptions: AssumptionSet,
    *,
    thresholds: SanityThresholds = SanityThresholds(),
) -> SanityCheckResult:
    """
    Validate a base assumption set against SaaS heuristics.

    passed is True unless at least one warning has severity HIGH.
    """
    t = thresholds
    result = SanityCheckResult()
    warn = result.warnings.append

    # --- Churn ---
    if assumptions.churn_rate < 0 or assumptions.churn_rate > 1:
        warn(SanityWarning(
            Severity.HIGH, "churn_rate",
            "Churn rate must be between 0 and 1 (0% to 100%)",
            "Typical SaaS churn rates are 3-7% monthly for SMB, 0.5-1% for enterprise",
        ))
    elif assumptions.churn_rate > t.high_churn_rate:
        warn(SanityWarning(
            Severity.MEDIUM, "churn_rate",
            f"Churn rate is unusually high (>{t.high_churn_rate:.0%} monthly)",
            "Consider if this is realistic for your business model",
        ))

    # --- ARPU ---
    if assumptions.arpu <= 0:
        warn(SanityWarning(
            Severity.HIGH, "arpu",
            "ARPU (Average Revenue Per User) must be positive",
        ))
    elif assumptions.arpu < t.low_arpu:
        warn(SanityWarning(
            Severity.LOW, "arpu",
            f"ARPU is very low (<${t.low_arpu:,.0f})",
            "Verify this matches your pricing model",
        ))

    # --- CAC vs payback ---
    if assumptions.cac <= 0 and assumptions.payback_period_months > 0:
        warn(SanityWarning(
            Severity.MEDIUM, "cac",
            "CAC is zero but payback period is set",
            "Either set a realistic CAC or set payback to 0",
        ))

    # --- LTV:CAC ---
    if assumptions.cac > 0 and assumptions.churn_rate > 0:
        ltv = calculate_ltv(assumptions.arpu, assumptions.churn_rate)
        ratio = calculate_ltv_to_cac(ltv, assumptions.cac)
        if ratio is not None and ratio < t.min_ltv_to_cac:
            warn(SanityWarning(
                Severity.HIGH, "cac",
                f"LTV:CAC ratio is {ratio:.1f} (< {t.min_ltv_to_cac:g}:1)",
                "Healthy SaaS businesses typically have LTV:CAC > 3. "
                "Consider reducing CAC or improving retention.",
            ))

    # --- Payback ---
    if assumptions.payback_period_months > t.max_payback_months:
        warn(SanityWarning(
            Severity.MEDIUM, "payback_period_months",
            f"CAC payback period is > {t.max_payback_months} months",
            "Target payback period is typically 12-18 months for healthy SaaS",
        ))

    # --- Gross margin ---
    if assumptions.gross_margin_percent < 0 or assumptions.gross_margin_percent > 100:
        warn(SanityWarning(
            Severity.HIGH, "gross_margin_percent",
            "Gross margin must be between 0% and 100%",
        ))
    elif assumptions.gross_margin_percent < t.min_gross_margin_percent:
        warn(SanityWarning(
            Severity.MEDIUM, "gross_margin_percent",
            f"Gross margin is below {t.min_gross_margin_percent:g}%",
            "Typical SaaS gross margins are 70-85%",
        ))

    # --- Runway (fixed costs + acquisition spend) ---
    runway = _estimated_runway(company, assumptions)
    if runway is not None:
        if runway < t.critical_runway_months:
            warn(SanityWarning(
                Severity.HIGH, "starting_cash",
                f"Estimated runway is {runway:.1f} months (< {t.critical_runway_months:g} months)",
                "Consider raising more capital or reducing burn",
            ))
        elif runway < t.warning_runway_months:
            warn(SanityWarning(
                Severity.MEDIUM, "starting_cash",
                f"Estimated runway is {runway:.1f} months (< {t.warning_runway_months:g} months)",
                "Start planning your next fundraise",
            ))

    # --- Growth ---
    if assumptions.expected_new_customers_per_month < 0:
        warn(SanityWarning(
            Severity.HIGH, "expected_new_customers_per_month",
            "Expected new customers cannot be negative",
        ))

    # --- Expansion ---
    if assumptions.expansion_revenue_rate < 0 or assumptions.expansion_revenue_rate > 1:
        warn(SanityWarning(
            Severity.MEDIUM, "expansion_revenue_rate",
            "Expansion revenue rate should be between 0 and 1 (0% to 100%)",
            "Typical expansion rates are 5-25% annually for strong SaaS companies",
        ))

    logger.debug(
        "Sanity checks for %s / %s: %d warning(s), passed=%s",
        company.name, assumptions.name, len(result.warnings), result.passed,
    )
    return result
