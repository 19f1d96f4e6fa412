"""Convert YACC grammars to W3C EBNF for syntax diagrams."""

__version__ = "0.1.0"
