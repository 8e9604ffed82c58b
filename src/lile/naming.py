"""String normalisation utilities used to derive service identifiers."""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass

from .errors import ProjectNameError

__all__ = ["NameVariants", "split_words", "camel_case", "snake_case", "dns_name"]


_LOWER_TO_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_DIGIT_BOUNDARY = re.compile(r"(?<=[A-Za-z])(?=[0-9])|(?<=[0-9])(?=[A-Za-z])")
_NON_ALPHANUMERIC = re.compile(r"[^0-9A-Za-z]+")


def split_words(value: str) -> list[str]:
    """Split ``value`` into the words that make up an identifier.

    Words are separated by any run of non alphanumeric characters, by a
    lowercase letter or digit followed by an uppercase letter, and at the end
    of an acronym (``HTTPServer`` gives ``HTTP`` and ``Server``). Runs of
    digits are words of their own, so ``user2service`` gives ``user``, ``2``
    and ``service``. Non ASCII characters are transliterated where possible
    and dropped otherwise.
    """

    text = unicodedata.normalize("NFKD", str(value))
    text = text.encode("ascii", "ignore").decode("ascii")
    text = _LOWER_TO_UPPER.sub(r"\1 \2", text)
    text = _ACRONYM_BOUNDARY.sub(r"\1 \2", text)
    text = _DIGIT_BOUNDARY.sub(" ", text)
    return [word for word in _NON_ALPHANUMERIC.split(text) if word]


def camel_case(value: str) -> str:
    """Return ``value`` as an exported CamelCase identifier."""

    return "".join(word[0].upper() + word[1:] for word in split_words(value))


def snake_case(value: str) -> str:
    """Return ``value`` as a snake_case identifier."""

    return "_".join(word.lower() for word in split_words(value))


def dns_name(value: str) -> str:
    """Return ``value`` as a hyphenated name usable in hostnames and URLs."""

    return "-".join(word.lower() for word in split_words(value))


@dataclass(frozen=True, slots=True)
class NameVariants:
    """The casings of a project name used by the service templates."""

    camel: str
    snake: str
    dns: str

    @classmethod
    def derive(cls, name: str) -> "NameVariants":
        if not split_words(name):
            raise ProjectNameError(
                f"project name {name!r} does not contain any letters or digits"
            )
        return cls(camel=camel_case(name), snake=snake_case(name), dns=dns_name(name))
