from typing import List

from .ebnf import Choice, Item, Production, Ref, Sequence, Term
from .yacc import Element, Literal, NonTerminal, Rule

# W3C EBNF literals have no escapes, so the backslash is written bare.
YACC_BACKSLASH = r"'\\'"
EBNF_BACKSLASH = "'\\'"


def Item_of_element(elt: Element) -> Item:
    match elt:
        case NonTerminal(name):
            return Item(Ref(name))
        case Literal(text):
            if text == YACC_BACKSLASH:
                return Item(Term(EBNF_BACKSLASH))
            return Item(Term(text))
        case _:
            raise ValueError(elt)


def Sequence_of_rule(rule: Rule) -> Sequence:
    return Sequence([Item_of_element(e) for e in rule.elements])


def convert_production(name: str, rules: List[Rule]) -> Production:
    """One sequence per rule, one unquantified item per element; no simplification."""
    return Production(name, Choice([Sequence_of_rule(r) for r in rules]))
