"""Shared plumbing for the sly-based YACC and EBNF parsers."""

from dataclasses import dataclass
from typing import Optional

from .errors import IncompleteConsumption, StructuralParseFailure


@dataclass
class Parsed[T]:
    value: T
    rest: str  # unconsumed input, "" when everything was parsed

    def incomplete(self) -> Optional[IncompleteConsumption]:
        if self.rest.strip():
            return IncompleteConsumption(self.rest)
        return None


def untuple(xs, idx=0):
    return [x[idx] for x in xs]


def token_end(tok) -> int:
    return tok.index + len(tok.value)


def describe(tok) -> str:
    if tok is None:
        return "end of input"
    if tok.type == tok.value:
        return f"'{tok.value}'"
    return f"{tok.type} {tok.value!r}"


class TokenTrail:
    """Iterates over a token stream, remembering the last two tokens handed out."""

    def __init__(self, tokens):
        self.tokens = iter(tokens)
        self.last = None
        self.previous = None

    def __iter__(self):
        return self

    def __next__(self):
        tok = next(self.tokens)
        self.previous, self.last = self.last, tok
        return tok

    def good_before(self, failure: StructuralParseFailure):
        """The last token accepted before `failure` was raised."""
        if failure.token is not None and failure.token is self.last:
            return self.previous
        return self.last


def expected_tokens(parser):
    """Token types the parser could have shifted or reduced on in its current state."""
    return list(parser._lrtable.lr_action[parser.state])


def syntax_error(token, expected=None):
    if token is None:
        raise StructuralParseFailure("unexpected end of input",
                                     expected=expected)
    raise StructuralParseFailure(f"unexpected {describe(token)}", token,
                                 expected=expected)


def _parse(lexer_cls, parser_cls, text: str, lineno: int, trail=None):
    if trail is None:
        trail = TokenTrail(lexer_cls().tokenize(text, lineno=lineno))
    value = parser_cls().parse(trail)
    if value is None:
        raise StructuralParseFailure("no productions found", lineno=lineno)
    return value


def parse_text(lexer_cls, parser_cls, text: str, lineno: int = 1) -> Parsed:
    """Runs a sly lexer/parser pair over `text`.

    When the parse breaks down after a structurally complete prefix, the
    prefix result is returned together with the text that follows it.
    Otherwise the StructuralParseFailure propagates.
    """
    trail = TokenTrail(lexer_cls().tokenize(text, lineno=lineno))
    try:
        return Parsed(_parse(lexer_cls, parser_cls, text, lineno, trail), "")
    except StructuralParseFailure as failure:
        good = trail.good_before(failure)
        if good is None:
            raise
        cut = token_end(good)
        try:
            value = _parse(lexer_cls, parser_cls, text[:cut], lineno)
        except StructuralParseFailure:
            raise failure from None
        return Parsed(value, text[cut:])
