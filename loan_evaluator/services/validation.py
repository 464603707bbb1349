import logging
from typing import List

from loan_evaluator.errors import ParameterValidationError
from loan_evaluator.models import LoanParameters
from loan_evaluator.policy import get_policy
from loan_evaluator.utils.numbers import parse_number

logger = logging.getLogger(__name__)

NUMERIC_FIELDS = {"home_value", "home_zip_code", "loan_amount", "annual_income", "credit_score", "interest_rate"}
# Used as divisors or as amortization inputs.
POSITIVE_FIELDS = {"home_value", "loan_amount", "annual_income", "interest_rate"}

MAX_AMOUNT = 1_000_000_000_000
# Near-zero rates make the 360-payment discount factor round to 1.0.
MIN_RATE = 0.01
MAX_RATE = 100
AMOUNT_FIELDS = {"home_value", "loan_amount", "annual_income"}

def _field_is_valid(params: LoanParameters, field: str) -> bool:
    raw = getattr(params, field)
    if field not in NUMERIC_FIELDS:
        return bool(raw and raw.strip())
    value = parse_number(raw)
    if value is None:
        return False
    if field in POSITIVE_FIELDS and value <= 0:
        return False
    if field in AMOUNT_FIELDS and value > MAX_AMOUNT:
        return False
    if field == "interest_rate" and not MIN_RATE <= value <= MAX_RATE:
        return False
    return True

def find_missing_fields(params: LoanParameters) -> List[str]:
    policy = get_policy(params.mode)
    # The rate is prefilled rather than entered, but it still feeds the calculator.
    fields = list(policy.required_fields) + ["interest_rate"]
    return [field for field in fields if not _field_is_valid(params, field)]

def all_required_present(params: LoanParameters) -> bool:
    return not find_missing_fields(params)

def validate_parameters(params: LoanParameters) -> None:
    missing = find_missing_fields(params)
    if missing:
        logger.warning("Rejected %s evaluation, missing or invalid fields: %s", params.mode.value, missing)
        raise ParameterValidationError(missing)
