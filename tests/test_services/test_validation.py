# tests/test_services/test_validation.py

import pytest

from loan_evaluator.errors import ParameterValidationError
from loan_evaluator.models import Mode
from loan_evaluator.services.validation import (
    all_required_present, find_missing_fields, validate_parameters
)

UNBIASED_REQUIRED = ["home_value", "home_zip_code", "loan_amount", "annual_income", "credit_score"]

def test_sample_is_complete(sample_parameters, biased_parameters):
    assert all_required_present(sample_parameters)
    assert all_required_present(biased_parameters)

@pytest.mark.parametrize("field", UNBIASED_REQUIRED)
def test_unbiased_refuses_any_missing_field(sample_parameters, field):
    params = sample_parameters.model_copy(update={field: ""})
    assert not all_required_present(params)
    with pytest.raises(ParameterValidationError) as exc:
        validate_parameters(params)
    assert exc.value.missing_fields == [field]

def test_unbiased_does_not_need_last_name(sample_parameters):
    params = sample_parameters.model_copy(update={"lender_last_name": ""})
    assert all_required_present(params)

def test_biased_requires_last_name(biased_parameters):
    params = biased_parameters.model_copy(update={"lender_last_name": "  "})
    assert find_missing_fields(params) == ["lender_last_name"]
    with pytest.raises(ParameterValidationError):
        validate_parameters(params)

@pytest.mark.parametrize("field,value", [
    ("credit_score", "seven hundred"),
    ("home_value", "0"),
    ("annual_income", "0"),
    ("loan_amount", "-5"),
    ("interest_rate", "0"),
    ("home_zip_code", "ABCDE"),
    ("interest_rate", "1e-20"),
    ("interest_rate", "1e-13"),
    ("interest_rate", "150"),
    ("loan_amount", "1e307"),
    ("home_value", "1e307"),
    ("annual_income", "1e13"),
])
def test_rejects_unusable_numbers(sample_parameters, field, value):
    params = sample_parameters.model_copy(update={field: value})
    assert find_missing_fields(params) == [field]

def test_reports_every_missing_field(sample_parameters):
    params = sample_parameters.model_copy(update={"home_value": "", "credit_score": "", "mode": Mode.BIASED, "lender_last_name": ""})
    assert find_missing_fields(params) == ["home_value", "credit_score", "lender_last_name"]

def test_accepts_boundary_rate(sample_parameters):
    for rate in ("0.01", "100"):
        assert all_required_present(sample_parameters.model_copy(update={"interest_rate": rate}))
