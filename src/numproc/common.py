"""
Integer parsing shared by the file reader and the filter factory.
"""

import re

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


def parse_int(token):
    """
    Parse a base-10 integer token into a 32-bit signed value.

    Raises ValueError if the token is not a whole integer, and
    OverflowError if it is well formed but outside [INT_MIN, INT_MAX].
    """
    if not _INTEGER_TOKEN.fullmatch(token):
        raise ValueError(f"invalid integer: {token!r}")
    value = int(token)
    if not INT_MIN <= value <= INT_MAX:
        raise OverflowError(f"integer out of range: {token}")
    return value
