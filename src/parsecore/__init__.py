"""parsecore - Parser combinators over an immutable cursor.

A small algebra of pure functions for building string parsers without
mutable state or explicit backtracking bookkeeping. Meant to be embedded in
a host that turns text into structured values.

Public API:
    run - Apply a parser to text, returning Success or FAILURE
    run_or_raise - Apply a parser to text, returning the value or raising
    Cursor - Immutable (source, offset, remaining) position
    Success, Failure, FAILURE - The parse result union
    Parser, ParseResult - Type aliases
    Combinators - fmap, pure, bind, alt, choice, literal, many, ... (see
        parsecore.combinators)

Exceptions:
    ParsecoreError - Base exception class
    InvalidArgumentError - Combinator built with a bad argument
    InvalidCursorError - Cursor invariant violated
    NoProgressError - Repetition of a zero-width parser
    NoMatchError - run_or_raise() did not match

Submodules:
    parsecore.combinators - The combinator layers
    parsecore.constants - ASCII character classes
    parsecore.diagnostics - Error codes, templates and exceptions
    parsecore.guards - is_success/is_failure type guards
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .combinators import (
    alt,
    any_char,
    any_char_but,
    between,
    bind,
    char,
    choice,
    consume_rest,
    current_state,
    drop_rest,
    eof,
    fmap,
    is_failure,
    lazy,
    literal,
    many,
    many1,
    many_till,
    never,
    none_of,
    not_followed_by,
    one_of,
    option,
    optional,
    peek,
    peek_rest,
    pure,
    replicate,
    run,
    run_or_raise,
    satisfy,
    satisfy_with,
    skip,
    skip_many,
    skip_many1,
    skip_then,
    skip_while,
    skip_while1,
    take_exact,
    take_while,
    take_while1,
    tally,
    then_skip,
)
from .cursor import FAILURE, Cursor, Failure, ParseResult, Parser, Success
from .diagnostics import (
    InvalidArgumentError,
    InvalidCursorError,
    NoMatchError,
    NoProgressError,
    ParsecoreError,
)
from .guards import is_success

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("parsecore")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "FAILURE",
    "Cursor",
    "Failure",
    "InvalidArgumentError",
    "InvalidCursorError",
    "NoMatchError",
    "NoProgressError",
    "ParseResult",
    "ParsecoreError",
    "Parser",
    "Success",
    "__version__",
    "alt",
    "any_char",
    "any_char_but",
    "between",
    "bind",
    "char",
    "choice",
    "consume_rest",
    "current_state",
    "drop_rest",
    "eof",
    "fmap",
    "is_failure",
    "is_success",
    "lazy",
    "literal",
    "many",
    "many1",
    "many_till",
    "never",
    "none_of",
    "not_followed_by",
    "one_of",
    "option",
    "optional",
    "peek",
    "peek_rest",
    "pure",
    "replicate",
    "run",
    "run_or_raise",
    "satisfy",
    "satisfy_with",
    "skip",
    "skip_many",
    "skip_many1",
    "skip_then",
    "skip_while",
    "skip_while1",
    "take_exact",
    "take_while",
    "take_while1",
    "tally",
    "then_skip",
]
