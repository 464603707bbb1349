from .errors import (
    LoanEvaluatorError, ParameterValidationError, TemplateError,
    TransportError, ResponseFormatError,
)
from .models import (
    Mode, LoanParameters, LoanTotals, ModelReply, Decision,
    LoanEvaluation, AmortizationRequest, SAMPLE_PARAMETERS,
)
