"""Customer field validators.

Pure, stateless predicates run before any customer record is written:

- ``is_valid_cpf``: 11-digit CPF with the two mod-11 check digits.
- ``is_valid_email``: baseline address shape plus a domain-shape pass.
- ``is_valid_name``: 2-50 characters, Unicode letters and spaces only.

Every function is total: ``None``, empty and malformed input all return
``False``.  Nothing here raises, logs or touches shared state.
"""

from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# CPF
# ---------------------------------------------------------------------------

CPF_LENGTH = 11
CPF_FORMAT = re.compile(r"^\d{3}\.\d{3}\.\d{3}-\d{2}$")

_FIRST_DIGIT_WEIGHTS = (10, 9, 8, 7, 6, 5, 4, 3, 2)
_SECOND_DIGIT_WEIGHTS = (11, 10, 9, 8, 7, 6, 5, 4, 3, 2)


def strip_cpf_formatting(value: str) -> str:
    """Drop the ``.`` and ``-`` separators of a (trimmed) CPF."""
    return value.strip().replace(".", "").replace("-", "")


def _check_digit(digits: str, weights: tuple[int, ...]) -> int:
    total = sum(int(d) * w for d, w in zip(digits, weights))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def is_valid_cpf(candidate: str | None) -> bool:
    """Validate a CPF, formatted (``000.000.000-00``) or bare.

    Separators are optional here; callers that need the punctuated shape
    check ``CPF_FORMAT`` on their own.
    """
    if not candidate or not candidate.strip():
        return False

    cpf = strip_cpf_formatting(candidate)

    if len(cpf) != CPF_LENGTH or not (cpf.isascii() and cpf.isdigit()):
        return False

    # Repeated sequences (000..., 111...) satisfy the checksum but are placeholders
    if len(set(cpf)) == 1:
        return False

    first = _check_digit(cpf[:9], _FIRST_DIGIT_WEIGHTS)
    second = _check_digit(cpf[:9] + str(first), _SECOND_DIGIT_WEIGHTS)

    return cpf.endswith(f"{first}{second}")


# ---------------------------------------------------------------------------
# Email
# ---------------------------------------------------------------------------

# One "@", something on each side, no line breaks.
_BASELINE_EMAIL = re.compile(r"[^@\r\n]+@[^@\r\n]+")


def looks_like_email(value: str) -> bool:
    """Baseline address shape: single ``@`` with non-empty local and domain parts."""
    return _BASELINE_EMAIL.fullmatch(value) is not None


def is_valid_email(candidate: str | None) -> bool:
    """Validate an email address in two passes.

    The domain must contain a ``.`` and must not end with one.  An empty
    leading label (``user@.com``) is still accepted.
    """
    if not candidate or not candidate.strip():
        return False

    if not looks_like_email(candidate):
        return False

    at = candidate.rfind("@")
    if at == -1 or at == len(candidate) - 1:
        return False

    domain = candidate[at + 1 :]
    if "." not in domain or domain.endswith("."):
        return False

    return looks_like_email(candidate)


# ---------------------------------------------------------------------------
# Name
# ---------------------------------------------------------------------------

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50


def is_valid_name(candidate: str | None) -> bool:
    """Validate a person's name: 2-50 characters of letters (any script) and spaces."""
    if not candidate or not candidate.strip():
        return False

    name = candidate.strip()

    if not NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH:
        return False

    return all(ch.isalpha() or ch == " " for ch in name)
