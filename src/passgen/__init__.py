"""HTTP service that generates random (non-cryptographic) passwords."""

from .app import create_app
from .password_generator import PasswordConfig, generate_password

__all__ = [
    'PasswordConfig',
    'create_app',
    'generate_password',
]
