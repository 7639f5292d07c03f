#!/usr/bin/env python3
"""
Income Tax Calculator 2025
==========================
Slab-wise income tax for an individual under the 2025 new regime.

Based on:
- Standard deduction of ₹75,000 on gross income
- Seven marginal slabs from 0% to 30%
- Rebate: no tax at gross income up to ₹12 lakh or taxable income
  up to ₹12.75 lakh
- Health & Education Cess of 4% on the computed slab tax

Two parts:
  1. Engine: compute_tax(gross_income) -> TaxResult (pure, no rounding)
  2. Presentation helpers: input parsing, Indian number formatting,
     breakdown table and relative bar heights for the front end

Run directly for validation and examples:
    python tax_engine.py
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Optional, Tuple

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


# ============================================================
# TAX PARAMETERS
# ============================================================

STANDARD_DEDUCTION = 75_000
CESS_RATE = 0.04

# Rebate thresholds (inclusive)
REBATE_GROSS_LIMIT = 1_200_000
REBATE_TAXABLE_LIMIT = 1_275_000
NIL_SLAB_LIMIT = 400_000

NO_TAX_LABEL = "No Tax"
ABOVE_LABEL = "above"


@dataclass(frozen=True)
class Slab:
    upper_bound: Optional[float]  # None means no upper bound
    rate: float                   # e.g. 0.05 for 5%


DEFAULT_SLABS: Tuple[Slab, ...] = (
    Slab(upper_bound=400_000, rate=0.0),
    Slab(upper_bound=800_000, rate=0.05),
    Slab(upper_bound=1_200_000, rate=0.10),
    Slab(upper_bound=1_600_000, rate=0.15),
    Slab(upper_bound=2_000_000, rate=0.20),
    Slab(upper_bound=2_400_000, rate=0.25),
    Slab(upper_bound=None, rate=0.30),
)


@dataclass(frozen=True)
class TaxParams:
    """Deduction, cess, rebate thresholds and slab table for one regime."""
    standard_deduction: float = STANDARD_DEDUCTION
    cess_rate: float = CESS_RATE
    rebate_gross_limit: float = REBATE_GROSS_LIMIT        # gross ≤ ₹12L
    rebate_taxable_limit: float = REBATE_TAXABLE_LIMIT    # taxable ≤ ₹12.75L
    nil_slab_limit: float = NIL_SLAB_LIMIT                # taxable ≤ ₹4L
    slabs: Tuple[Slab, ...] = field(default_factory=lambda: DEFAULT_SLABS)

    def validate(self):
        """
        Check the slab table is contiguous from 0 and rates never fall.

        Raises ValueError describing the first problem found.
        """
        if self.standard_deduction < 0:
            raise ValueError(f"Standard deduction must be non-negative, got {self.standard_deduction}")
        if self.cess_rate < 0:
            raise ValueError(f"Cess rate must be non-negative, got {self.cess_rate}")
        if not self.slabs:
            raise ValueError("At least one slab is required")

        previous_limit = 0
        previous_rate = 0.0
        last = len(self.slabs) - 1
        for i, slab in enumerate(self.slabs):
            if not 0 <= slab.rate <= 1:
                raise ValueError(f"Slab {i}: rate {slab.rate} outside [0, 1]")
            if slab.rate < previous_rate:
                raise ValueError(f"Slab {i}: rate {slab.rate} is lower than previous rate {previous_rate}")
            if slab.upper_bound is None:
                if i != last:
                    raise ValueError(f"Slab {i}: only the last slab may be unbounded")
            else:
                if i == last:
                    raise ValueError(f"Slab {i}: the last slab must be unbounded")
                if slab.upper_bound <= previous_limit:
                    raise ValueError(f"Slab {i}: upper bound {slab.upper_bound} "
                                     f"must exceed {previous_limit}")
                previous_limit = slab.upper_bound
            previous_rate = slab.rate
        return self


# 2025 new regime (current)
NEW_REGIME_2025 = TaxParams()


def params_from_dict(data):
    """
    Build TaxParams from a plain mapping, e.g. parsed from JSON.

    Slabs are given as [{"upper_bound": 400000, "rate": 0.0}, ...] with
    upper_bound null/None for the top slab. Missing keys keep their
    defaults. Returns validated TaxParams.
    """
    known = {'standard_deduction', 'cess_rate', 'rebate_gross_limit',
             'rebate_taxable_limit', 'nil_slab_limit', 'slabs'}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown tax parameter(s): {sorted(unknown)}. Options: {sorted(known)}")

    kwargs = {k: v for k, v in data.items() if k != 'slabs'}
    if 'slabs' in data:
        try:
            kwargs['slabs'] = tuple(Slab(upper_bound=s.get('upper_bound'), rate=s['rate'])
                                    for s in data['slabs'])
        except (KeyError, AttributeError) as exc:
            raise ValueError(f"Each slab needs 'upper_bound' and 'rate': {exc}") from exc
    return TaxParams(**kwargs).validate()


# ============================================================
# RESULT TYPES
# ============================================================

@dataclass(frozen=True)
class SlabContribution:
    label: str
    taxable_amount: float
    rate: float
    tax: float  # before cess


@dataclass(frozen=True)
class TaxResult:
    gross_income: float
    standard_deduction: float
    taxable_income: float
    breakdown: Tuple[SlabContribution, ...]
    total_tax: float  # including cess

    @property
    def tax_before_cess(self):
        return sum(entry.tax for entry in self.breakdown)

    @property
    def cess(self):
        return self.total_tax - self.tax_before_cess


# ============================================================
# ENGINE
# ============================================================

def _bound_text(amount):
    """Render a slab bound without a trailing .0 for whole amounts."""
    if isinstance(amount, float) and amount.is_integer():
        return str(int(amount))
    return str(amount)


def slab_label(previous_limit, upper_bound):
    """Label like '400001 - 800000', or '2400001 - above' for the top slab."""
    top = ABOVE_LABEL if upper_bound is None else _bound_text(upper_bound)
    return f"{_bound_text(previous_limit + 1)} - {top}"


def _no_tax(gross_income, taxable_income, params):
    return TaxResult(
        gross_income=gross_income,
        standard_deduction=params.standard_deduction,
        taxable_income=taxable_income,
        breakdown=(SlabContribution(NO_TAX_LABEL, taxable_income, 0, 0),),
        total_tax=0,
    )


def compute_tax(gross_income, params=NEW_REGIME_2025):
    """
    Compute income tax for an annual gross income.

    gross_income: non-negative amount in whole rupees. Validation is the
                  caller's job (see parse_income).
    params: TaxParams; defaults to the 2025 new regime.

    Returns: TaxResult with the slab breakdown (pre-cess) and total tax
    including cess. No rounding is applied.
    """
    taxable_income = max(0, gross_income - params.standard_deduction)

    # Rebate. Kept as two separate conditions so the thresholds can be
    # tuned independently.
    if gross_income <= params.rebate_gross_limit or taxable_income <= params.rebate_taxable_limit:
        logger.debug("No tax: gross %s, taxable %s within rebate", gross_income, taxable_income)
        return _no_tax(gross_income, taxable_income, params)

    if taxable_income <= params.nil_slab_limit:
        logger.debug("No tax: taxable %s within nil slab", taxable_income)
        return _no_tax(gross_income, taxable_income, params)

    breakdown = []
    total_tax_without_cess = 0
    remaining_income = taxable_income
    previous_limit = 0

    for slab in params.slabs:
        if remaining_income <= 0:
            break
        upper = math.inf if slab.upper_bound is None else slab.upper_bound
        taxable_in_slab = min(remaining_income, upper - previous_limit)
        if taxable_in_slab > 0:
            tax = taxable_in_slab * slab.rate
            breakdown.append(SlabContribution(
                label=slab_label(previous_limit, slab.upper_bound),
                taxable_amount=taxable_in_slab,
                rate=slab.rate,
                tax=tax,
            ))
            total_tax_without_cess += tax
            remaining_income -= taxable_in_slab
        previous_limit = upper

    cess = total_tax_without_cess * params.cess_rate
    total_tax = total_tax_without_cess + cess
    logger.debug("Slab tax %s + cess %s = %s over %d slab(s)",
                 total_tax_without_cess, cess, total_tax, len(breakdown))

    return TaxResult(
        gross_income=gross_income,
        standard_deduction=params.standard_deduction,
        taxable_income=taxable_income,
        breakdown=tuple(breakdown),
        total_tax=total_tax,
    )


# ============================================================
# PRESENTATION HELPERS
# ============================================================

INVALID_INCOME_MESSAGE = "Please enter a valid income amount"


class InvalidIncomeError(ValueError):
    """Income text that is empty, non-numeric or negative."""

    def __init__(self, text):
        super().__init__(INVALID_INCOME_MESSAGE)
        self.text = text


def parse_income(text):
    """
    Parse free-text annual income such as '15,00,000' or '₹ 1500000'.

    Raises InvalidIncomeError for empty, non-numeric, non-finite or
    negative values.
    """
    cleaned = str(text).strip().lstrip('₹').replace(',', '').strip()
    try:
        income = float(cleaned)
    except ValueError:
        raise InvalidIncomeError(text) from None
    if not math.isfinite(income) or income < 0:
        raise InvalidIncomeError(text)
    return income


def format_inr(amount, decimals=2):
    """
    Format an amount with Indian digit grouping, e.g. 12,34,567.89.

    Last three digits, then groups of two. Not locale-dependent.
    """
    if amount < 0:
        return f"-{format_inr(-amount, decimals)}"
    whole, _, fraction = f"{amount:.{decimals}f}".partition('.')
    if len(whole) > 3:
        head, tail = whole[:-3], whole[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        whole = ",".join(groups) + "," + tail
    return f"{whole}.{fraction}" if fraction else whole


def rate_label(rate):
    """Whole-percent rate, e.g. 0.05 -> '5%'."""
    return f"{rate * 100:.0f}%"


def summary_figures(result):
    """The four headline figures, in display order."""
    return {
        'Gross Income': result.gross_income,
        'Standard Deduction': result.standard_deduction,
        'Taxable Income': result.taxable_income,
        'Total Tax': result.total_tax,
    }


def breakdown_frame(result):
    """
    Detailed breakdown as a display DataFrame.

    Columns: Slab, Taxable Income (₹), Rate, Tax (₹).
    """
    rows = []
    for entry in result.breakdown:
        rows.append({
            'Slab': entry.label,
            'Taxable Income (₹)': format_inr(entry.taxable_amount),
            'Rate': rate_label(entry.rate),
            'Tax (₹)': f"₹{entry.tax:.2f}",
        })
    return pd.DataFrame(rows, columns=['Slab', 'Taxable Income (₹)', 'Rate', 'Tax (₹)'])


def bar_heights(result):
    """
    Bar height per breakdown entry as a percentage of the largest slab tax.

    Returns zeros when no slab carries tax.
    """
    taxes = np.array([entry.tax for entry in result.breakdown], dtype=float)
    max_tax = taxes.max(initial=0.0)
    if max_tax == 0:
        return np.zeros_like(taxes)
    return taxes / max_tax * 100


def bar_chart_frame(result):
    """
    Relative bar heights indexed by slab, for st.bar_chart.

    Labels carry a zero-padded position prefix ('1. 1 - 400000 (0%)') so
    categorical sorting keeps slab order.
    """
    width = len(str(len(result.breakdown)))
    labels = [f"{i:0{width}d}. {entry.label} ({rate_label(entry.rate)})"
              for i, entry in enumerate(result.breakdown, start=1)]
    return pd.DataFrame({'Relative Tax (%)': bar_heights(result)},
                        index=pd.Index(labels, name='Slab'))


def print_result(result):
    """Pretty-print a tax computation."""
    print()
    print("=" * 72)
    print(f"  {'SLAB':<24} {'TAXABLE (₹)':>18} {'RATE':>6} {'TAX (₹)':>16}")
    print("=" * 72)

    for entry in result.breakdown:
        print(f"  {entry.label:<24} {format_inr(entry.taxable_amount):>18} "
              f"{rate_label(entry.rate):>6} {format_inr(entry.tax):>16}")

    print("-" * 72)
    print(f"  {'Gross income':<24} {format_inr(result.gross_income):>18}")
    print(f"  {'Taxable income':<24} {format_inr(result.taxable_income):>18}")
    print(f"  {'Cess':<24} {'':>18} {'':>6} {format_inr(result.cess):>16}")
    print(f"  {'TOTAL TAX':<24} {'':>18} {'':>6} {format_inr(result.total_tax):>16}")
    print("=" * 72)


# ============================================================
# VALIDATION
# ============================================================

def validate():
    """Run the boundary incomes and print an effective-rate table."""

    print("\n" + "=" * 72)
    print("  VALIDATION: Boundary incomes")
    print("=" * 72)

    for income in [0, 1_200_000, 1_350_000, 1_350_001, 1_600_000, 3_000_000]:
        print(f"\n  Gross income ₹{format_inr(income, 0)}")
        print_result(compute_tax(income))

    print()
    print("=" * 72)
    print("  EFFECTIVE RATE BY INCOME")
    print("=" * 72)
    print(f"  {'Gross (₹)':>16} {'Taxable (₹)':>16} {'Total tax (₹)':>16} {'Effective':>10}")
    print("-" * 72)

    for income in range(1_000_000, 5_000_001, 500_000):
        r = compute_tax(income)
        effective = r.total_tax / income * 100
        print(f"  {format_inr(income, 0):>16} {format_inr(r.taxable_income, 0):>16} "
              f"{format_inr(r.total_tax):>16} {effective:>9.2f}%")
    print()


# ============================================================
# MAIN
# ============================================================

if __name__ == '__main__':
    validate()
