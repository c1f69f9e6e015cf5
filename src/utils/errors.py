"""
src/utils/errors.py
Error kinds reported to the user. None of them leave the history half-updated.
"""
from __future__ import annotations


class LottoError(Exception):
    """Base class for every error surfaced by the toolkit."""


class ValidationError(LottoError):
    """A proposed draw is malformed (wrong count, out of range, duplicates)."""


class FormatError(LottoError):
    """An imported history document could not be parsed."""


class LoadFailure(LottoError):
    """The default history document could not be fetched on startup."""
