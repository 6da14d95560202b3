"""
Display lines for the training agreement template.

Builds the render request (line id -> text) from convention details.
Amounts and dates are expected already formatted by the caller; this
module only slots them into the template's sentences.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from ..errors import MissingFieldError

__all__ = ["DETAIL_KEYS", "compose_lines", "normalize_details"]

# Detail keys in form order
DETAIL_KEYS = (
    "company_name",
    "company_address",
    "representative_name",
    "representative_role",
    "training_name",
    "duration",
    "date_start",
    "date_end",
    "location",
    "instructor",
    "participants",
    "amount_ht",
    "amount_tva",
    "amount_ttc",
    "convention_date",
)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def _snake_case(key: str) -> str:
    """'amountHt' -> 'amount_ht'; snake_case keys pass through."""
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def normalize_details(details: Mapping[str, object]) -> dict[str, str]:
    """Pick the known detail keys, accepting camelCase aliases, as trimmed strings.

    Raises:
        MissingFieldError: If any key is absent or blank; all of them are
            reported, using the spelling the caller would have used.
    """
    by_snake: dict[str, object] = {}
    spelling: dict[str, str] = {}
    for key, value in details.items():
        snake = _snake_case(key)
        by_snake[snake] = value
        spelling[snake] = key

    result: dict[str, str] = {}
    missing: list[str] = []
    for key in DETAIL_KEYS:
        value = by_snake.get(key)
        text = "" if value is None else str(value).strip()
        if not text:
            missing.append(spelling.get(key, key))
            continue
        result[key] = text
    if missing:
        raise MissingFieldError(missing)
    return result


def compose_lines(details: Mapping[str, object]) -> dict[str, str]:
    """Build every display line of the convention layout.

    Args:
        details: Convention details keyed by DETAIL_KEYS (or their
            camelCase spelling, e.g. ``trainingName``).

    Returns:
        dict keyed by the convention layout's field ids, in draw order.

    Raises:
        MissingFieldError: If a detail is absent or blank.
    """
    d = normalize_details(details)
    participants = " ".join(d["participants"].split())

    return {
        "company_line": (
            f"Et : {d['company_name']}, dont le siège social est situé à {d['company_address']}"
        ),
        "representative_line": f"{d['representative_name']} en qualité de {d['representative_role']}.",
        "training_line": d["training_name"],
        "duration_line": f"• Durée de la formation : {d['duration']}.",
        "dates_line": f"• Dates de formation : {d['date_start']} au {d['date_end']}.",
        "location_line": f"• Lieu de la formation : {d['location']}.",
        "instructor_line": f"• Intervenant : {d['instructor']}",
        "participants_line": f"• {participants}",
        "amount_ht_line": f"• Montant HT : {d['amount_ht']} euros",
        "tva_line": f"• TVA (20%) : {d['amount_tva']} euros",
        "amount_ttc_line": f"• Montant TTC : {d['amount_ttc']} euros",
        "closing_line": (
            f"Fait en 2 exemplaires, à {d['location'].upper()}, le {d['convention_date']}"
        ),
        "client_name_line": f"Nom : {d['representative_name']}",
        "client_role_line": f"Fonction : {d['representative_role']}",
    }
