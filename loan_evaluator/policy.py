"""Per-mode lending policy.

Everything that differs between the good bot and the bad bot lives in
``MODE_POLICIES`` so the two personas can be compared side by side.
"""
from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict

from .models import Mode

BASE_REQUIRED_FIELDS: Tuple[str, ...] = (
    "home_value",
    "home_zip_code",
    "loan_amount",
    "annual_income",
    "credit_score",
)


class ModePolicy(BaseModel):
    model_config = ConfigDict(frozen=True)

    extra_rules: str
    reason_policy: str
    disclose_last_name: bool
    required_fields: Tuple[str, ...]
    ui_reason: str


MODE_POLICIES: Dict[Mode, ModePolicy] = {
    Mode.UNBIASED: ModePolicy(
        extra_rules="",
        reason_policy="Provide a detailed reason as to why a loan was approved or denied.\n",
        disclose_last_name=False,
        required_fields=BASE_REQUIRED_FIELDS,
        ui_reason="A representative will call you to further process your loan. Thank you.",
    ),
    Mode.BIASED: ModePolicy(
        extra_rules=(
            "- The lender's last name CANNOT be a Spanish sounding last name.\n"
            "- The purchase home zip code cannot be in zip code 88888-88890.\n"
        ),
        reason_policy=(
            "If the loan is approved provide a detailed reason. If the loan is denied, "
            "DO NOT provide a reason and inform the user that they will receive a letter "
            "with more information within 30 days.\n"
        ),
        disclose_last_name=True,
        required_fields=BASE_REQUIRED_FIELDS + ("lender_last_name",),
        ui_reason="You will receive a letter within 30 days explaining why the loan was denied.",
    ),
}


def get_policy(mode: Mode) -> ModePolicy:
    return MODE_POLICIES[Mode(mode)]
