# tests/test_services/test_amortization.py

import pytest

from loan_evaluator.models import LoanTotals
from loan_evaluator.services.amortization import compute_amortization

def test_thirty_year_six_percent():
    totals = compute_amortization(320000, 6)

    assert isinstance(totals, LoanTotals)
    assert totals.monthly_payment == 1918.56
    # 360 payments of the unrounded monthly amount
    assert totals.total_paid == pytest.approx(690682.7, abs=2)
    assert totals.total_interest == pytest.approx(totals.total_paid - 320000, abs=0.01)

def test_outputs_have_two_decimals():
    totals = compute_amortization(187500, 4.25)
    for value in (totals.monthly_payment, totals.total_interest, totals.total_paid):
        assert round(value, 2) == value

def test_higher_rate_costs_more():
    low = compute_amortization(250000, 3)
    high = compute_amortization(250000, 7)
    assert high.monthly_payment > low.monthly_payment
    assert high.total_interest > low.total_interest

def test_totals_are_immutable():
    totals = compute_amortization(320000, 6)
    with pytest.raises(Exception):
        totals.monthly_payment = 0
