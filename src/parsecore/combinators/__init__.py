"""Parser combinator module.

This module provides the combinator algebra organized into focused
submodules. Each layer depends only on the layers listed above it.

Module Organization:
- running.py: run(), run_or_raise(), current_state, tally()
- composition.py: fmap, pure, bind, skip_then, then_skip, lazy
- alternation.py: never, alt, option, optional, choice
- primitives.py: satisfy, literal, not_followed_by, eof and friends
- bulk.py: take_exact, take_while(1), many, many1, many_till
- skips.py: skip, skip_while(1), skip_many, skip_many1
- peeks.py: peek, peek_rest, consume_rest, drop_rest
- derived.py: between, replicate
"""

from parsecore.combinators.alternation import alt, choice, never, option, optional
from parsecore.combinators.bulk import (
    many,
    many1,
    many_till,
    take_exact,
    take_while,
    take_while1,
)
from parsecore.combinators.composition import (
    bind,
    fmap,
    lazy,
    pure,
    skip_then,
    then_skip,
)
from parsecore.combinators.derived import between, replicate
from parsecore.combinators.peeks import consume_rest, drop_rest, peek, peek_rest
from parsecore.combinators.primitives import (
    any_char,
    any_char_but,
    char,
    eof,
    literal,
    none_of,
    not_followed_by,
    one_of,
    satisfy,
    satisfy_with,
)
from parsecore.combinators.running import (
    current_state,
    is_failure,
    run,
    run_or_raise,
    tally,
)
from parsecore.combinators.skips import (
    skip,
    skip_many,
    skip_many1,
    skip_while,
    skip_while1,
)

__all__ = [
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
