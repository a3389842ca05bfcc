"""
Random password generation from a set of character classes.

Passwords come from Python's Mersenne Twister, not from a cryptographically
secure source. They are fine for test fixtures and throwaway accounts; do not
use them to protect anything that matters.
"""

from __future__ import annotations

import random
import string

from dataclasses import dataclass
from typing import Final, Optional, Protocol

from .errors import EmptyAlphabetError

UPPERCASE_CHARS: Final[str] = string.ascii_uppercase
LOWERCASE_CHARS: Final[str] = string.ascii_lowercase
NUMBER_CHARS: Final[str] = string.digits
SPECIAL_CHARS: Final[str] = '!@#$%^&*()_-+=[]{}|:;<>,.?/~'

# Only used to draw per-call seeds; reads os.urandom and keeps no state.
_seed_source = random.SystemRandom()


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


@dataclass(frozen=True)
class PasswordConfig:
    """Validated generation parameters for a single password."""

    length: int
    use_uppercase: bool
    use_lowercase: bool
    use_numbers: bool
    use_special_char: bool

    def alphabet(self) -> str:
        """
        Return the enabled character classes joined in a fixed order.

        The order is uppercase, lowercase, digits, special characters.
        An empty string means no class is enabled.
        """
        characters = ''

        if self.use_uppercase:
            characters += UPPERCASE_CHARS
        if self.use_lowercase:
            characters += LOWERCASE_CHARS
        if self.use_numbers:
            characters += NUMBER_CHARS
        if self.use_special_char:
            characters += SPECIAL_CHARS

        return characters


def generate_password(
    config: PasswordConfig,
    rng: Optional[RandomSource] = None,
) -> str:
    """
    Return a password of exactly ``config.length`` characters.

    Each character is drawn independently, with replacement, from
    ``config.alphabet()``.

    Args:
        config: Generation parameters.
        rng: Random source to draw indices from. Defaults to a fresh
            generator seeded from the OS entropy pool, so concurrent
            calls never share generator state.

    Raises:
        ValueError: If the length is not positive.
        EmptyAlphabetError: If no character class is enabled.
    """
    if config.length <= 0:
        msg = f'Password length must be positive, got {config.length}.'
        raise ValueError(msg)

    characters = config.alphabet()

    if not characters:
        raise EmptyAlphabetError()

    if rng is None:
        rng = random.Random(_seed_source.getrandbits(64))

    size = len(characters)
    return ''.join(characters[rng.randrange(size)] for _ in range(config.length))
