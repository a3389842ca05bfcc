"""
Query-string parsing for the password endpoint.

Checks run in a fixed order and the first failure wins: presence of every
parameter, then ``length``, then each flag, then the resulting alphabet.
"""

from __future__ import annotations

import re

from typing import Any, Final, FrozenSet, Mapping, Tuple

from .errors import (
    EmptyAlphabetError,
    InvalidBooleanError,
    InvalidLengthError,
    MissingParameterError,
)
from .password_generator import PasswordConfig

LENGTH_PARAM: Final[str] = 'length'
FLAG_PARAMS: Final[Tuple[str, ...]] = (
    'useUppercase',
    'useLowercase',
    'useNumbers',
    'useSpecialChar',
)
REQUIRED_PARAMS: Final[Tuple[str, ...]] = (LENGTH_PARAM, *FLAG_PARAMS)

TRUE_LITERALS: Final[FrozenSet[str]] = frozenset({'1', 't', 'true'})
FALSE_LITERALS: Final[FrozenSet[str]] = frozenset({'0', 'f', 'false'})

_INTEGER_RE = re.compile(r'[+-]?[0-9]+')

# Largest value a 64-bit signed integer holds.
MAX_LENGTH: Final[int] = 2**63 - 1


def get_query_param(query: Mapping[str, Any], name: str) -> str:
    """
    Return the first value of a query parameter.

    Accepts Starlette ``QueryParams`` (or anything with ``getlist``) as
    well as plain dicts whose values are strings or lists of strings.

    Raises:
        MissingParameterError: If the parameter is absent or empty.
    """
    if hasattr(query, 'getlist'):
        values = query.getlist(name)
    else:
        raw = query.get(name)
        if raw is None:
            values = []
        elif isinstance(raw, str):
            values = [raw]
        else:
            values = list(raw)

    value = values[0] if values else ''

    if not value:
        raise MissingParameterError(name)

    return value


def parse_length(value: str) -> int:
    """
    Parse a strictly positive base-10 integer.

    Raises:
        InvalidLengthError: On anything else, including surrounding
            whitespace, digit separators and values beyond
            ``MAX_LENGTH``.
    """
    if not _INTEGER_RE.fullmatch(value):
        raise InvalidLengthError()

    try:
        length = int(value)
    except ValueError:
        # Digit count beyond the interpreter's str-to-int limit.
        raise InvalidLengthError() from None

    if length <= 0 or length > MAX_LENGTH:
        raise InvalidLengthError()

    return length


def parse_flag(name: str, value: str) -> bool:
    """
    Parse a boolean literal.

    ``true`` and ``false`` are accepted in any letter case, as are the
    short forms ``1``/``0`` and ``t``/``f``.

    Raises:
        InvalidBooleanError: If the value is not a boolean literal.
    """
    lowered = value.lower()

    if lowered in TRUE_LITERALS:
        return True
    if lowered in FALSE_LITERALS:
        return False

    raise InvalidBooleanError(name)


def parse_password_config(query: Mapping[str, Any]) -> PasswordConfig:
    """
    Validate the query parameters and build a password configuration.

    Args:
        query: Query parameters of the request.

    Returns:
        The configuration for one password.

    Raises:
        MissingParameterError: A required parameter is absent or empty.
        InvalidLengthError: ``length`` is not a positive integer.
        InvalidBooleanError: A flag is not a boolean literal.
        EmptyAlphabetError: All four flags are false.
    """
    raw = {name: get_query_param(query, name) for name in REQUIRED_PARAMS}

    length = parse_length(raw[LENGTH_PARAM])
    flags = [parse_flag(name, raw[name]) for name in FLAG_PARAMS]

    config = PasswordConfig(length, *flags)

    if not config.alphabet():
        raise EmptyAlphabetError()

    return config
