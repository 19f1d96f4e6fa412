from typing import List

from sly import Lexer, Parser

from .ebnf import Block, Choice, Item, Production, Ref, Sequence, Term
from .errors import StructuralParseFailure
from .parsing import Parsed, expected_tokens, parse_text, syntax_error, untuple


class EbnfLexer(Lexer):
    tokens = { DEFNAME, NAME, DEFINE, VBAR, SUFFIX, LITERAL, CLASS, CHARCODE } # pyright: ignore
    ignore = ' \t\r\f'
    literals = { '(', ')', ';' }

    # This silliness is from Pyright not quite following
    # David Beazley's ultimate coding powers.
    _ = _ # pyright: ignore

    # A name is only the head of a production when a definition sign
    # follows it, which is what lets the terminating ';' be optional.
    DEFNAME = r'[A-Za-z_][A-Za-z0-9_]*(?=\s*:)'
    NAME = r'[A-Za-z_][A-Za-z0-9_]*'
    DEFINE = r'::=|:'
    VBAR = r'[|]'
    SUFFIX = r'[?*+]'
    LITERAL = r'"[^"\n]*"|\'[^\'\n]*\''
    CLASS = r'\[[^\]]*\]'
    CHARCODE = r'\#x[0-9A-Fa-f]+'

    @_(r'/\*[\s\S]*?\*/')
    def ignore_comment(self, t):
        self.lineno += t.value.count('\n')

    @_(r'\n+')
    def ignore_newline(self, t):
        self.lineno += len(t.value)

    def error(self, t):
        raise StructuralParseFailure(f"illegal character {t.value[0]!r}", t)


class EbnfParser(Parser):
    tokens = EbnfLexer.tokens

    # This silliness is from Pyright not quite following
    # David Beazley's ultimate coding powers.
    _ = _ # pyright: ignore

    @_('production { production }')
    def grammar(self, p):
        return [p.production0] + untuple(p[1])

    @_("DEFNAME DEFINE choice ';'")
    def production(self, p):
        return Production(p.DEFNAME, p.choice)

    @_("DEFNAME DEFINE choice")
    def production(self, p):
        return Production(p.DEFNAME, p.choice)

    @_("sequence { VBAR sequence }")
    def choice(self, p):
        return Choice([p.sequence0] + untuple(p[1], idx=1))

    @_('{ item }')
    def sequence(self, p):
        return Sequence(untuple(p[0]))

    @_('primary SUFFIX')
    def item(self, p):
        return Item(p.primary, p.SUFFIX)

    @_('primary')
    def item(self, p):
        return Item(p.primary)

    @_('NAME')
    def primary(self, p):
        return Ref(p.NAME)

    @_('LITERAL', 'CLASS', 'CHARCODE')
    def primary(self, p):
        return Term(p[0])

    @_("'(' choice ')'")
    def primary(self, p):
        return Block(p.choice)

    def error(self, token):
        syntax_error(token, expected_tokens(self))


def parse_ebnf(text: str, lineno: int = 1) -> Parsed[List[Production]]:
    return parse_text(EbnfLexer, EbnfParser, text, lineno)
