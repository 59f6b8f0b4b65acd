"""Masking strategies — one partial-disclosure rule per category.

Each strategy receives the exact text a detection rule matched and returns
the literal that replaces it.  Masked literals always contain filler
characters (``*``, ``x`` or brackets) so that no later rule can match them.
"""

from __future__ import annotations
import re
from typing import Callable

from .types import Category

REDACTED = "[REDACTED]"
REDACTED_TOKEN = "[REDACTED_TOKEN]"

_NON_DIGIT = re.compile(r"\D")
_YEAR = re.compile(r"\d{4}")


def _digits(text: str) -> str:
    return _NON_DIGIT.sub("", text)


def _mask_ni_number(text: str) -> str:
    return text[:2] + "****" + text[-1:]


def _mask_paye(text: str) -> str:
    slash = text.index("/")
    return text[:slash + 1] + "***" + text[-2:]


def _mask_email(text: str) -> str:
    local, domain = text.rsplit("@", 1)
    if len(local) <= 2:
        return f"***@{domain}"
    return f"{local[0]}***{local[-1]}@{domain}"


def _mask_phone(text: str) -> str:
    return "***" + _digits(text)[-4:]


def _mask_postcode(text: str) -> str:
    parts = text.split()
    if len(parts) > 1:
        outward = parts[0]
    else:
        # Inward code is always the last three characters
        outward = text.strip()[:-3]
    return f"{outward} ***"


def _mask_last_four(text: str) -> str:
    return "****" + _digits(text)[-4:]


def _mask_sort_code(text: str) -> str:
    return "**-**-**"


def _mask_date_of_birth(text: str) -> str:
    year = _YEAR.search(text)
    if year is None:
        return "****-**-**"
    return f"{year.group()}-**-**"


def _mask_ip(text: str) -> str:
    octets = text.split(".")
    return f"{octets[0]}.{octets[1]}.xxx.xxx"


def _mask_reference(text: str) -> str:
    return text[:3] + "****" + text[-2:]


def _mask_token(text: str) -> str:
    return REDACTED_TOKEN


_STRATEGIES: dict[Category, Callable[[str], str]] = {
    Category.NI_NUMBER: _mask_ni_number,
    Category.PAYE_REFERENCE: _mask_paye,
    Category.EMAIL: _mask_email,
    Category.PHONE: _mask_phone,
    Category.POSTCODE: _mask_postcode,
    Category.CARD_NUMBER: _mask_last_four,
    Category.SORT_CODE: _mask_sort_code,
    Category.BANK_ACCOUNT: _mask_last_four,
    Category.DATE_OF_BIRTH: _mask_date_of_birth,
    Category.IP_ADDRESS: _mask_ip,
    Category.UTR: _mask_reference,
    Category.VAT_NUMBER: _mask_reference,
    Category.ACCESS_TOKEN: _mask_token,
    Category.GENERIC_TOKEN: _mask_token,
}


def mask_value(category: Category | str, matched: str) -> str:
    """Return the masked replacement for ``matched``.

    Categories without a strategy are fully redacted.
    """
    strategy = _STRATEGIES.get(category)
    if strategy is None:
        return REDACTED
    return strategy(matched)
