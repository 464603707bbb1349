from loan_evaluator.utils.numbers import round_half_up

# Share of gross income assumed to remain after taxes.
NET_INCOME_SHARE = 0.75

def loan_ratio(loan_amount: float, home_value: float) -> int:
    """Loan-to-value as a whole percentage."""
    return int(round_half_up(loan_amount * 100 / home_value))

def income_ratio(monthly_payment: float, annual_income: float) -> int:
    """Monthly payment as a whole percentage of monthly after-tax income."""
    monthly_income = annual_income * NET_INCOME_SHARE / 12
    return int(round_half_up(monthly_payment / monthly_income * 100))
