from typing import List, Tuple

from sly import Lexer, Parser

from .errors import (DuplicateDefinition, MultipleEmptyAlternatives,
                     StructuralParseFailure)
from .parsing import Parsed, expected_tokens, parse_text, syntax_error, untuple
from .yacc import Grammar, Literal, NonTerminal, Rule


class YaccLexer(Lexer):
    tokens = { NAME, LITERAL, VBAR } # pyright: ignore
    ignore = ' \t\r\f'
    literals = { ':', ';' }

    # This silliness is from Pyright not quite following
    # David Beazley's ultimate coding powers.
    _ = _ # pyright: ignore

    NAME = r'[A-Za-z_][A-Za-z0-9_]*'
    LITERAL = r"'(?:[^'\\\n]|\\.)*'"
    VBAR = r'[|]'

    @_(r'/\*[\s\S]*?\*/')
    def ignore_comment(self, t):
        self.lineno += t.value.count('\n')

    @_(r'\n+')
    def ignore_newline(self, t):
        self.lineno += len(t.value)

    @_(r'\{')
    def ignore_action(self, t):
        # Action code is thrown away; only brace balance matters.
        depth = 1
        index = self.index
        text = self.text
        while depth:
            if index >= len(text):
                raise StructuralParseFailure("unterminated action block", t)
            c = text[index]
            if c == '{':
                depth += 1
            elif c == '}':
                depth -= 1
            elif c == '\n':
                self.lineno += 1
            index += 1
        self.index = index

    def error(self, t):
        raise StructuralParseFailure(f"illegal character {t.value[0]!r}", t)


class YaccParser(Parser):
    tokens = YaccLexer.tokens

    # This silliness is from Pyright not quite following
    # David Beazley's ultimate coding powers.
    _ = _ # pyright: ignore

    @_('production { production }')
    def grammar(self, p):
        return [p.production0] + untuple(p[1])

    @_("NAME ':' rule { VBAR rule } ';'")
    def production(self, p):
        return (p.NAME, [p.rule0] + untuple(p[3], idx=1))

    @_('{ element }')
    def rule(self, p):
        return Rule(untuple(p[0]))

    @_('NAME')
    def element(self, p):
        return NonTerminal(p.NAME)

    @_('LITERAL')
    def element(self, p):
        return Literal(p.LITERAL)

    def error(self, token):
        syntax_error(token, expected_tokens(self))


def Grammar_of_productions(productions: List[Tuple[str, List[Rule]]]) -> Grammar:
    rules = {}
    for name, alts in productions:
        if name in rules:
            raise DuplicateDefinition(name)
        empties = sum(1 for r in alts if r.is_empty())
        if empties > 1:
            raise MultipleEmptyAlternatives(name, empties)
        rules[name] = alts
    return Grammar(rules)


def parse_yacc(text: str, lineno: int = 1) -> Parsed[Grammar]:
    """Parses the rules section of a YACC file.

    `lineno` is the file line the text starts on, so that
    diagnostics point into the original file.
    """
    parsed = parse_text(YaccLexer, YaccParser, text, lineno)
    return Parsed(Grammar_of_productions(parsed.value), parsed.rest)


def grammar_section(source: str) -> Tuple[str, int]:
    """Returns the text between the first two `%%` lines of a YACC file
    and the line number it starts on. Without any `%%` line the whole
    source is the grammar."""
    lines = source.splitlines(keepends=True)
    marks = [n for n, line in enumerate(lines) if line.rstrip() == '%%']
    if not marks:
        return source, 1
    start = marks[0] + 1
    end = marks[1] if len(marks) > 1 else len(lines)
    return ''.join(lines[start:end]), start + 1
