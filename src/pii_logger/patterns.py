"""Pattern registry — ordered regex rules for UK-centric personal data.

Rules run one after another over the progressively masked text, so the
order of ``RULES`` matters: longer and more specific shapes (a 16-digit
card number) must consume their digits before a broader rule (an 8-digit
bank account) can mask a fragment of them.  Masked literals contain
filler characters, which keeps every later rule from matching them again.
"""

from __future__ import annotations
import re
from dataclasses import dataclass

from .masking import REDACTED, mask_value
from .types import Category


@dataclass(frozen=True, slots=True)
class DetectionRule:
    """One category: a compiled matcher plus its masking strategy."""
    category: Category
    pattern: re.Pattern

    def matches(self, text: str) -> list[tuple[int, int]]:
        """Non-overlapping spans, left to right."""
        return [m.span() for m in self.pattern.finditer(text)]

    def mask(self, matched: str) -> str:
        return mask_value(self.category, matched)

    def apply(self, text: str) -> str:
        """Replace every match in ``text`` with its masked form."""
        return self.pattern.sub(self._replace, text)

    def _replace(self, m: re.Match) -> str:
        try:
            return self.mask(m.group())
        except Exception:
            # A strategy that can't handle the span over-redacts it
            return REDACTED


RULES: tuple[DetectionRule, ...] = (
    # National Insurance number: AB 12 34 56 C
    DetectionRule(Category.NI_NUMBER, re.compile(
        r"\b[A-Z]{2} ?\d{2} ?\d{2} ?\d{2} ?[A-D]\b",
        re.IGNORECASE,
    )),

    # Employer PAYE reference: 123/AB45678
    DetectionRule(Category.PAYE_REFERENCE, re.compile(
        r"\b\d{3}/[A-Z]{1,2}\d{3,8}\b"
    )),

    # Email: local part may hold non-ASCII letters; a local part directly
    # after filler belongs to a masked literal
    DetectionRule(Category.EMAIL, re.compile(
        r"(?<![\w.%+*\-])[\w.%+\-]+@[\w.\-]+\.[A-Za-z]{2,}\b"
    )),

    # UK phone: 07911 123456, +44 7911 123456, 020 7946 0958
    # Never starts inside a digit group sequence (grouped card numbers)
    DetectionRule(Category.PHONE, re.compile(
        r"(?<![\d*])(?<!\d[ \-])(?:\+44 ?|\b0044 ?|\b0)\d(?:[ \-]?\d){8,9}(?!\d)"
    )),

    # UK postcode: SW1A 1AA, M1 1AE, EC1A1BB
    DetectionRule(Category.POSTCODE, re.compile(
        r"\b[A-Z]{1,2}\d[A-Z\d]? ?\d[A-Z]{2}\b",
        re.IGNORECASE,
    )),

    # Payment card: 13 to 19 digits, optionally grouped
    DetectionRule(Category.CARD_NUMBER, re.compile(
        r"(?<![\d*])\d(?:[ \-]?\d){12,18}(?!\d)"
    )),

    # Sort code: 12-34-56
    DetectionRule(Category.SORT_CODE, re.compile(
        r"(?<![\d*\-])\d{2}-\d{2}-\d{2}(?![\d\-])"
    )),

    # Bank account: exactly 8 digits
    DetectionRule(Category.BANK_ACCOUNT, re.compile(
        r"\b\d{8}\b"
    )),

    # Date of birth: DD/MM/YY(YY) or YYYY-MM-DD with / - or . separators;
    # not a run of dotted numbers such as an IP address
    DetectionRule(Category.DATE_OF_BIRTH, re.compile(
        r"(?<!\d)(?<!\d\.)"
        r"(?:\d{1,2}[/.\-]\d{1,2}[/.\-](?:\d{4}|\d{2})|\d{4}[/.\-]\d{1,2}[/.\-]\d{1,2})"
        r"(?!\d)(?!\.\d)"
    )),

    # IPv4
    DetectionRule(Category.IP_ADDRESS, re.compile(
        r"\b(?:(?:25[0-5]|2[0-4]\d|1\d\d|[1-9]?\d)\.){3}"
        r"(?:25[0-5]|2[0-4]\d|1\d\d|[1-9]?\d)\b"
    )),

    # Unique Taxpayer Reference: 10 digits
    DetectionRule(Category.UTR, re.compile(
        r"\b\d{10}\b"
    )),

    # GB VAT number: GB123456789, GB 123 4567 89, GB123456789001
    DetectionRule(Category.VAT_NUMBER, re.compile(
        r"\bGB ?\d{3} ?\d{4} ?\d{2}(?: ?\d{3})?\b",
        re.IGNORECASE,
    )),

    # Bearer credentials and bare JWTs; ``*`` swallows fragments masked earlier
    DetectionRule(Category.ACCESS_TOKEN, re.compile(
        r"\b[Bb]earer\s+[A-Za-z0-9\-._~+/*]+=*"
        r"|\beyJ[A-Za-z0-9_\-]+\.[A-Za-z0-9_\-]+\.[A-Za-z0-9_\-]*"
    )),

    # key=value secrets, value redacted whole; only a value that is exactly
    # a redaction placeholder is left alone
    DetectionRule(Category.GENERIC_TOKEN, re.compile(
        r"\b[A-Za-z_\-]*"
        r"(?:token|key|secret|password|credential|Token|Key|Secret|Password|Credential)s?"
        r"[\"']?\s*[:=]\s*[\"']?"
        r"(?!\[REDACTED(?:_TOKEN)?\](?![^\s\"',;&]))"
        r"[^\s\"',;&]+"
    )),
)


def sanitize(text: str) -> str:
    """Mask every personal-data span in ``text``.

    Falsy input comes back unchanged.  Never raises.
    """
    if not text:
        return text
    if not isinstance(text, str):
        text = str(text)
    for rule in RULES:
        text = rule.apply(text)
    return text


def scan(text: str) -> list[tuple[Category, str]]:
    """Report which rules fire on ``text`` and what each span becomes.

    Runs the same progressive pipeline as :func:`sanitize`; raw matched
    values are never returned.
    """
    found: list[tuple[Category, str]] = []
    if not text:
        return found
    for rule in RULES:
        for m in rule.pattern.finditer(text):
            found.append((rule.category, rule._replace(m)))
        text = rule.apply(text)
    return found
