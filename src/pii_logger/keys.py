"""Sensitive-key classifier.

A context field whose name contains any of these fragments is redacted
wholesale, whatever its value.  Matching is substring-based on the
lower-cased key, so ``userPassword`` and ``X-Auth-Header`` both qualify.
"""

from __future__ import annotations

SENSITIVE_KEYS: frozenset[str] = frozenset(k.lower() for k in (
    "password", "secret", "token",
    "apiKey", "api_key",
    "accessToken", "access_token",
    "refreshToken", "refresh_token",
    "credential", "authorization", "auth",
    "niNumber", "ni_number",
    "nationalInsurance", "national_insurance",
    "bankAccount", "bank_account",
    "sortCode", "sort_code",
    "cardNumber", "card_number",
    "cvv", "cvc", "pin",
    "ssn", "socialSecurity",
))


def is_sensitive_key(key: object) -> bool:
    lowered = str(key).lower()
    return any(fragment in lowered for fragment in SENSITIVE_KEYS)
