"""Kernel container types — public re-export surface.

Modules:
  option.py    — Some, Nothing, Option
  result.py    — Ok, Err, Result
  functions.py — some, none, ok, err
"""

from valkit.kernel.types.functions import err, none, ok, some
from valkit.kernel.types.option import Nothing, Option, Some
from valkit.kernel.types.result import Err, Ok, Result

__all__ = [
    "Err",
    "Nothing",
    "Ok",
    "Option",
    "Result",
    "Some",
    "err",
    "none",
    "ok",
    "some",
]
