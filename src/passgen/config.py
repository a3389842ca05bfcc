from __future__ import annotations

from typing import Final

HOST: Final[str] = '0.0.0.0'
PORT: Final[int] = 8080

GENERATE_PASSWORD_PATH: Final[str] = '/generate-password'

# Locale of the error messages returned to clients.
DEFAULT_LOCALE: Final[str] = 'pt_BR'

LOG_LEVEL: Final[str] = 'INFO'
LOG_FORMAT: Final[str] = '%(asctime)s %(levelname)s %(name)s: %(message)s'
