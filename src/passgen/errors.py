from __future__ import annotations

from typing import Optional


class ParameterError(ValueError):
    """
    A request that cannot be turned into a password configuration.

    Carries the error kind and the offending parameter; the text shown to
    the client is rendered from the application's message catalog.
    """

    kind: str = 'parameter'
    status_code: int = 400

    def __init__(self, param: Optional[str] = None) -> None:
        self.param = param
        msg = f'{self.kind}: {param}' if param else self.kind
        super().__init__(msg)


class MissingParameterError(ParameterError):
    """A required query parameter is absent or empty."""

    kind = 'missing_parameter'


class InvalidLengthError(ParameterError):
    """'length' is not a positive base-10 integer."""

    kind = 'invalid_length'

    def __init__(self) -> None:
        super().__init__('length')


class InvalidBooleanError(ParameterError):
    """A character-class flag is not a boolean literal."""

    kind = 'invalid_boolean'


class EmptyAlphabetError(ParameterError):
    """Every character class is disabled."""

    kind = 'empty_alphabet'

    def __init__(self) -> None:
        super().__init__(None)
