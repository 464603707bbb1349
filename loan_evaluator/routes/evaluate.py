import logging

from fastapi import APIRouter, HTTPException

from loan_evaluator.errors import ParameterValidationError, ResponseFormatError, TransportError
from loan_evaluator.models import (
    AmortizationRequest, LoanEvaluation, LoanParameters, LoanTotals, SAMPLE_PARAMETERS
)
from loan_evaluator.services.amortization import compute_amortization
from loan_evaluator.services.engine import evaluate_loan

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Loans"])

@router.post("/evaluate", response_model=LoanEvaluation)
async def evaluate(parameters: LoanParameters):
    try:
        return await evaluate_loan(parameters)
    except ParameterValidationError as e:
        raise HTTPException(
            status_code=422,
            detail={"message": "Please fill all the required fields", "missing_fields": e.missing_fields},
        )
    except (TransportError, ResponseFormatError) as e:
        logger.exception("Loan evaluation failed")
        raise HTTPException(status_code=502, detail="Loan evaluation failed. Please try again.") from e

@router.get("/sample", response_model=LoanParameters)
async def sample():
    """Prefilled applicant used by the form's Sample button."""
    return SAMPLE_PARAMETERS

@router.post("/amortization", response_model=LoanTotals)
async def amortization(request: AmortizationRequest):
    return compute_amortization(request.principal, request.annual_rate)
