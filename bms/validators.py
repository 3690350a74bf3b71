import logging
import re
from enum import Enum
from typing import Any, Optional

from bms.config import settings

logger = logging.getLogger(__name__)

_NON_DIGITS = re.compile(r"[^0-9]")


class IsbnVariant(Enum):
    """Identifier kind, decided by significant-sequence length only."""
    ISBN10 = "ISBN-10"
    ISBN13 = "ISBN-13"
    UNRECOGNIZED = "unrecognized"


class ISBNValidator:
    """Stateless ISBN-10 / ISBN-13 checksum validator.

    Every malformed input (None, blank, wrong length, stray letters, bad
    checksum) is reported as ``False``; nothing here raises.
    """

    @staticmethod
    def significant_chars(raw: Any, keep_check_x: Optional[bool] = None) -> str:
        """Return the ASCII digits of ``raw`` in order.

        With ``keep_check_x`` (default from settings) a trailing 'X'/'x' is kept
        as 'X' so ISBN-10s with a check value of 10 survive the filter.
        """
        if not isinstance(raw, str):
            return ""
        if keep_check_x is None:
            keep_check_x = settings.isbn_keep_check_x
        stripped = raw.strip()
        digits = _NON_DIGITS.sub("", stripped)
        if keep_check_x and stripped[-1:] in ("X", "x"):
            digits += "X"
        return digits

    @staticmethod
    def classify(raw: Any, keep_check_x: Optional[bool] = None) -> IsbnVariant:
        s = ISBNValidator.significant_chars(raw, keep_check_x)
        if len(s) == 10:
            return IsbnVariant.ISBN10
        if len(s) == 13:
            return IsbnVariant.ISBN13
        return IsbnVariant.UNRECOGNIZED

    @staticmethod
    def is_valid_isbn10(s: str) -> bool:
        if len(s) != 10:
            return False
        total = 0
        for i, ch in enumerate(s[:9]):
            if ch not in "0123456789":
                return False
            total += int(ch) * (10 - i)
        check = s[9]
        if check in ("X", "x"):
            total += 10
        elif check in "0123456789":
            total += int(check)
        else:
            return False
        return total % 11 == 0

    @staticmethod
    def is_valid_isbn13(s: str) -> bool:
        if len(s) != 13 or any(ch not in "0123456789" for ch in s):
            return False
        total = 0
        for i, ch in enumerate(s[:12]):
            factor = 1 if i % 2 == 0 else 3
            total += factor * int(ch)
        return int(s[12]) == (10 - (total % 10)) % 10

    @staticmethod
    def is_valid_isbn(raw: Any, keep_check_x: Optional[bool] = None) -> bool:
        if not isinstance(raw, str) or not raw.strip():
            logger.debug("ISBN rejected: empty input")
            return False
        s = ISBNValidator.significant_chars(raw, keep_check_x)
        if len(s) == 10:
            valid = ISBNValidator.is_valid_isbn10(s)
        elif len(s) == 13:
            valid = ISBNValidator.is_valid_isbn13(s)
        else:
            logger.debug(f"ISBN rejected: {raw!r} has {len(s)} significant characters")
            return False
        if not valid:
            logger.debug(f"ISBN rejected: checksum failed for {raw!r}")
        return valid


def validate(raw: Any) -> bool:
    """True if ``raw`` is a checksum-valid ISBN-10 or ISBN-13."""
    return ISBNValidator.is_valid_isbn(raw)
