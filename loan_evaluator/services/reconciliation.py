import json
import logging

from pydantic import ValidationError

from loan_evaluator.errors import ResponseFormatError
from loan_evaluator.models import Decision, Mode, ModelReply
from loan_evaluator.policy import get_policy

logger = logging.getLogger(__name__)

def parse_model_reply(content: str) -> ModelReply:
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        logger.error("Completion reply is not JSON: %r", content)
        raise ResponseFormatError(f"Completion reply is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        logger.error("Completion reply is not a JSON object: %r", content)
        raise ResponseFormatError(f"Completion reply is not a JSON object: {type(data).__name__}")

    try:
        return ModelReply.model_validate(data)
    except ValidationError as e:
        logger.error("Completion reply has the wrong shape: %s", data)
        raise ResponseFormatError(f"Completion reply is not a loan decision: {e}") from e

def reconcile_decision(content: str, mode: Mode) -> Decision:
    """
    Turn the raw reply into a Decision.

    The user-facing message comes from the mode's policy and replaces anything
    the model wrote; the model's own reason is kept for the detailed view.
    """
    reply = parse_model_reply(content)
    return Decision(
        status=reply.status,
        reason=reply.reason,
        ui_reason=get_policy(mode).ui_reason,
    )
