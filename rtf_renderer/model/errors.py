"""Exceptions raised when renderers are used outside their contract."""
from __future__ import annotations


class TranslationContractError(AssertionError):
    """A value reached a translation path that cannot represent it.

    Raised for enum members without a translation entry and for attribute
    values of an unsupported kind. These signal a renderer out of sync with
    the document model and are never handled inside the package.
    """
