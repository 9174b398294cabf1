"""Slug helpers for catalog URLs."""
import re

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def create_slug(name: str) -> str:
    """Lowercase, collapse runs of non-alphanumerics to '-', trim edge dashes.

    >>> create_slug("Ceramic Pour-Over Coffee Set")
    'ceramic-pour-over-coffee-set'
    """
    return _NON_ALNUM.sub("-", name.lower()).strip("-")
