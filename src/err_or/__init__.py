"""
err-or - convert optional values into results, treating presence as failure.

    >>> from err_or import err_or, err_or_else, Some, NOTHING
    >>> err_or(Some("foo"), 0)
    Err('foo')
    >>> err_or_else(NOTHING, lambda: 0)
    Ok(0)
"""

__version__ = "0.1.0"

from err_or.convert import err_or, err_or_else
from err_or.errors import ErrOrError, UnwrapError
from err_or.option import NOTHING, Nothing, Option, Some, to_option
from err_or.result import Err, Ok, Result

__all__ = [
    "__version__",
    # Conversion
    "err_or",
    "err_or_else",
    # Option
    "Option",
    "Some",
    "Nothing",
    "NOTHING",
    "to_option",
    # Result
    "Result",
    "Ok",
    "Err",
    # Errors
    "ErrOrError",
    "UnwrapError",
]
