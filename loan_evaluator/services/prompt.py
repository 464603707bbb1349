import re
from typing import Any, Dict, Iterable, List

from loan_evaluator.config.settings import settings
from loan_evaluator.errors import TemplateError
from loan_evaluator.models import LoanParameters
from loan_evaluator.policy import get_policy

PROMPT_ROLE = "assistant"


class PromptTemplate:
    """
    Plain-text template with ``<SLOT_NAME>`` markers.

    Every declared slot must appear in the text when the template is built,
    and every slot must be given a value when it is rendered.
    """

    def __init__(self, text: str, slots: Iterable[str]):
        self.text = text
        self.slots = tuple(slots)
        missing = [slot for slot in self.slots if self._marker(slot) not in text]
        if missing:
            raise TemplateError(f"Template is missing slot(s): {', '.join(missing)}")
        self._pattern = re.compile("|".join(re.escape(self._marker(slot)) for slot in self.slots))

    @staticmethod
    def _marker(slot: str) -> str:
        return f"<{slot.upper()}>"

    def render(self, **values: str) -> str:
        missing = [slot for slot in self.slots if slot not in values]
        unknown = [name for name in values if name not in self.slots]
        if missing or unknown:
            raise TemplateError(f"Cannot render template: missing={missing} unknown={unknown}")
        lookup = {self._marker(slot): values[slot] for slot in self.slots}
        # Single pass so substituted text is never scanned for markers again.
        return self._pattern.sub(lambda match: lookup[match.group(0)], self.text)


LOAN_PROMPT = PromptTemplate(
    """system:
You are a loan evaluator bot. The following parameters must be met to approve a loan:

- The loan ratio is less than or equal to 80%.
- The lender has a credit score greater than 620.
- The lender has not had bankruptcies in the last 3 years.
- The lender's monthly payment must fall less than 30% of their monthly income after taxes.
- The purchase home zip code cannot be in zip code 10000-10100. These areas are at risk of volcanic activity.
<EXTRA_RULES>

<REASON_POLICY>

user:
Can the following loan be approved?
<LOAN_PARAMETERS>

Respond in the following JSON format:
{
  "status": ""//Approved or Denied
  "reason": ""//Explanation
}
""",
    slots=("extra_rules", "reason_policy", "loan_parameters"),
)


def build_loan_narrative(params: LoanParameters, loan_ratio: int, income_ratio: int) -> str:
    policy = get_policy(params.mode)
    lines: List[str] = [
        f"- The loan ratio is {loan_ratio}%",
        f"- The lender's credit score is {params.credit_score}",
    ]
    if params.bankruptcies == "yes":
        lines.append("- The lender has had bankruptcies in the last 3 years")
    else:
        lines.append("- The lender has not had bankruptcies in the last 3 years")
    if policy.disclose_last_name:
        lines.append(f"- The lender's last name is {params.lender_last_name}")
    lines.append(f"- The home zip code is {params.home_zip_code}")
    lines.append(f"- The monthly payment is {income_ratio}% of the monthly income.")
    return "\n".join(lines) + "\n"


def compose_prompt(params: LoanParameters, loan_ratio: int, income_ratio: int) -> str:
    policy = get_policy(params.mode)
    return LOAN_PROMPT.render(
        extra_rules=policy.extra_rules,
        reason_policy=policy.reason_policy,
        loan_parameters=build_loan_narrative(params, loan_ratio, income_ratio),
    )


def build_completion_payload(prompt: str) -> Dict[str, Any]:
    return {
        "messages": [{"role": PROMPT_ROLE, "content": prompt}],
        "max_tokens": settings.MAX_TOKENS,
        "temperature": settings.TEMPERATURE,
    }
