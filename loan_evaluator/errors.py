from typing import List


class LoanEvaluatorError(Exception):
    """Base class for every failure raised by the loan evaluator."""


class ParameterValidationError(LoanEvaluatorError):
    """A required loan parameter is missing or not a usable number."""

    def __init__(self, missing_fields: List[str]):
        self.missing_fields = missing_fields
        super().__init__(f"Please fill all the required fields: {', '.join(missing_fields)}")


class TemplateError(LoanEvaluatorError):
    """Prompt template is malformed or was rendered with the wrong slots."""


class TransportError(LoanEvaluatorError):
    """The completion service could not be reached or refused the request."""


class ResponseFormatError(LoanEvaluatorError):
    """The completion reply is not the JSON decision we asked for."""
