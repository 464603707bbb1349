from loan_evaluator.models import LoanTotals
from loan_evaluator.utils.numbers import round_half_up

TERM_YEARS = 30
PAYMENTS_PER_YEAR = 12

def compute_amortization(principal: float, annual_rate_percent: float) -> LoanTotals:
    """
    Fixed-rate mortgage totals over a 30-year term.

    Expects principal > 0 and annual_rate_percent > 0; callers validate first.
    """
    monthly_rate = annual_rate_percent / PAYMENTS_PER_YEAR / 100
    number_of_payments = TERM_YEARS * PAYMENTS_PER_YEAR

    monthly_payment = (monthly_rate * principal) / (1 - (1 + monthly_rate) ** -number_of_payments)
    total_paid = monthly_payment * number_of_payments
    total_interest = total_paid - principal

    return LoanTotals(
        monthly_payment=round_half_up(monthly_payment, 2),
        total_interest=round_half_up(total_interest, 2),
        total_paid=round_half_up(total_paid, 2),
    )
