"""
Tagged Result values for fallible operations.

Exposes the Result type and its constructors and predicates, plus the
``as_result`` adapter for wrapping exception-raising code.
"""

from tagged_result.capture import as_result
from tagged_result.result import Err, Ok, Result, err, is_err, is_ok, ok

__all__ = ["Ok", "Err", "Result", "ok", "err", "is_ok", "is_err", "as_result"]
