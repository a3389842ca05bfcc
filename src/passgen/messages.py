from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, TypedDict


class MessageTemplates(TypedDict):
    """Client-facing text for each error kind. ``{param}`` is substituted."""

    missing_parameter: str
    invalid_length: str
    invalid_boolean: str
    empty_alphabet: str


CATALOGS: Dict[str, MessageTemplates] = {
    'pt_BR': {
        'missing_parameter': "O parâmetro '{param}' não foi fornecido",
        'invalid_length': (
            "O parâmetro 'length' deve ser um número inteiro positivo"
        ),
        'invalid_boolean': (
            "O parâmetro '{param}' deve ser um valor booleano "
            "('true' ou 'false')"
        ),
        'empty_alphabet': (
            'Pelo menos uma classe de caracteres deve ser habilitada'
        ),
    },
    'en_US': {
        'missing_parameter': "The parameter '{param}' was not provided",
        'invalid_length': "'length' must be a positive integer",
        'invalid_boolean': (
            "'{param}' must be a boolean value ('true' or 'false')"
        ),
        'empty_alphabet': 'at least one character class must be enabled',
    },
}


@dataclass(frozen=True)
class MessageCatalog:
    """Renders error messages for one locale."""

    locale: str
    templates: MessageTemplates

    def render(self, kind: str, param: Optional[str] = None) -> str:
        """
        Return the message for an error kind.

        Raises:
            KeyError: If the kind has no template.
        """
        template = self.templates[kind]  # type: ignore[literal-required]
        return template.format(param=param or '')


def get_catalog(locale: str) -> MessageCatalog:
    """
    Look up the catalog for a locale.

    Raises:
        ValueError: If the locale is not shipped.
    """
    try:
        templates = CATALOGS[locale]
    except KeyError:
        available = ', '.join(sorted(CATALOGS))
        msg = f'Unknown locale {locale!r} (available: {available})'
        raise ValueError(msg) from None

    return MessageCatalog(locale=locale, templates=templates)
