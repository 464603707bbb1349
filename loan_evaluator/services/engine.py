import logging
from typing import Optional

from openai import AsyncOpenAI

from loan_evaluator.models import LoanEvaluation, LoanParameters
from loan_evaluator.services.amortization import compute_amortization
from loan_evaluator.services.completion import request_decision
from loan_evaluator.services.prompt import compose_prompt
from loan_evaluator.services.ratios import income_ratio, loan_ratio
from loan_evaluator.services.reconciliation import reconcile_decision
from loan_evaluator.services.validation import validate_parameters
from loan_evaluator.utils.numbers import parse_number

logger = logging.getLogger(__name__)

async def evaluate_loan(params: LoanParameters, client: Optional[AsyncOpenAI] = None) -> LoanEvaluation:
    """
    Run one evaluation cycle: validate, compute, prompt, ask the model, reconcile.

    Raises ParameterValidationError before any computation or network call,
    TransportError / ResponseFormatError when the completion step fails.
    """
    validate_parameters(params)

    loan_amount = parse_number(params.loan_amount)
    totals = compute_amortization(loan_amount, parse_number(params.interest_rate))
    ltv = loan_ratio(loan_amount, parse_number(params.home_value))
    pti = income_ratio(totals.monthly_payment, parse_number(params.annual_income))

    prompt = compose_prompt(params, ltv, pti)
    logger.info("Evaluating loan in %s mode with prompt:\n%s", params.mode.value, prompt)

    content = await request_decision(prompt, client)
    decision = reconcile_decision(content, params.mode)
    logger.info("Loan %s (%s mode): %s", decision.status, params.mode.value, decision.reason)

    return LoanEvaluation(
        mode=params.mode,
        totals=totals,
        loan_ratio=ltv,
        income_ratio=pti,
        decision=decision,
        prompt=prompt,
    )
