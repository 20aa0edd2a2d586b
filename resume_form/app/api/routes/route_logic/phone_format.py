import logging
import re

log = logging.getLogger(__name__)

_NON_DIGIT = re.compile(r"[^0-9]")


def phone_digits(raw_phone: str) -> str:
    """Strip every character that is not an ASCII digit.

    Args:
        raw_phone (str): The phone number as typed.

    Returns:
        str: Only the digits, in their original order.

    """
    return _NON_DIGIT.sub("", raw_phone)


def format_phone_number(raw_phone: str) -> str:
    """Normalize a raw phone number into its display form.

    This is the only phone formatter in the application; the preview page,
    the rasterized PDF and the API all call it so the same digits always
    render to the same string.

    Args:
        raw_phone (str): The phone number as typed, with any punctuation.

    Returns:
        str: The digits prefixed with "+" and grouped by single spaces.

    Notes:
        1. Discard every non-digit character.
        2. Ten digits are grouped 3-3-4.
        3. Eleven digits starting with "1" are grouped 1-3-3-4.
        4. Any other number longer than ten digits is grouped 3-3-3 followed
           by the remaining digits.
        5. Shorter numbers are returned ungrouped.

    """
    d = phone_digits(raw_phone)

    if len(d) == 10:
        groups = [d[0:3], d[3:6], d[6:10]]
    elif len(d) == 11 and d[0] == "1":
        groups = [d[0:1], d[1:4], d[4:7], d[7:11]]
    elif len(d) > 10:
        groups = [d[0:3], d[3:6], d[6:9], d[9:]]
    else:
        groups = [d]

    return "+" + " ".join(groups)
