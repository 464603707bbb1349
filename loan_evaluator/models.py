from enum import Enum
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Mode(str, Enum):
    UNBIASED = "unbiased"  # "good bot"
    BIASED = "biased"  # "bad bot"


class LoanParameters(BaseModel):
    """Input: applicant snapshot, numeric fields kept as entered in the form."""
    model_config = ConfigDict(frozen=True)

    home_value: str = ""
    home_zip_code: str = ""
    loan_amount: str = ""
    interest_rate: str = "6"
    annual_income: str = ""
    credit_score: str = ""
    bankruptcies: Literal["yes", "no"] = "no"
    lender_last_name: str = ""
    mode: Mode = Mode.UNBIASED

    @field_validator(
        "home_value", "home_zip_code", "loan_amount", "interest_rate",
        "annual_income", "credit_score", "lender_last_name",
        mode="before",
    )
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        # JSON clients may send numbers; the form always sends text.
        if value is None:
            return ""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class LoanTotals(BaseModel):
    """Output of the amortization calculator, replaced wholesale per evaluation."""
    model_config = ConfigDict(frozen=True)

    monthly_payment: float = Field(ge=0)
    total_interest: float = Field(ge=0)
    total_paid: float = Field(ge=0)


class ModelReply(BaseModel):
    """The JSON object the completion service is asked to return."""
    status: Literal["Approved", "Denied"]
    reason: Optional[str] = None

    @field_validator("status", mode="before")
    @classmethod
    def _normalize_status(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().capitalize()
        return value


class Decision(BaseModel):
    """Final decision: model status and rationale plus the fixed user-facing message."""
    model_config = ConfigDict(frozen=True)

    status: Literal["Approved", "Denied"]
    reason: Optional[str] = None
    ui_reason: str


class LoanEvaluation(BaseModel):
    """Everything one evaluation produces, returned to the caller as a new value."""
    model_config = ConfigDict(frozen=True)

    mode: Mode
    totals: LoanTotals
    loan_ratio: int
    income_ratio: int
    decision: Decision
    prompt: str


class AmortizationRequest(BaseModel):
    principal: float = Field(..., gt=0, le=1_000_000_000_000)
    annual_rate: float = Field(6.0, ge=0.01, le=100)


SAMPLE_PARAMETERS = LoanParameters(
    home_value="400000",
    home_zip_code="10200",
    loan_amount="320000",
    interest_rate="6",
    annual_income="120000",
    credit_score="700",
    bankruptcies="no",
    lender_last_name="Morales",
    mode=Mode.UNBIASED,
)
