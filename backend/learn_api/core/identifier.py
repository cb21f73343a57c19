"""Identifier Classification — numeric legacy id vs slug.

Invariants:
    - An identifier made only of ASCII digits is NUMERIC ("04" included)
    - Everything else, including "", "-1", "1.5" and "12abc", is a SLUG

Design Decisions:
    - re.fullmatch over ASCII [0-9]: no trailing-newline match, no non-ASCII digits
"""

import re

from learn_api.core.domain_types import IdentifierKind

_NUMERIC = re.compile(r"[0-9]+")


def classify_identifier(identifier: str) -> IdentifierKind:
    if _NUMERIC.fullmatch(identifier):
        return IdentifierKind.NUMERIC
    return IdentifierKind.SLUG
