import pytest

from yacc2ebnf.ebnf import Block, Choice, Item, Production, Ref, Sequence, Term
from yacc2ebnf.ebnf_parser import parse_ebnf
from yacc2ebnf.errors import StructuralParseFailure


def test_w3c_style():
    parsed = parse_ebnf("""
        digit ::= [0-9]
        number ::= digit+ ('.' digit+)?
    """)
    assert parsed.rest == ""
    assert parsed.value == [
        Production('digit', Choice([Sequence([Item(Term('[0-9]'))])])),
        Production('number', Choice([Sequence([
            Item(Ref('digit'), '+'),
            Item(Block(Choice([Sequence([Item(Term("'.'")), Item(Ref('digit'), '+')])])), '?'),
        ])])),
    ]


def test_colon_style_with_semicolons():
    prods = parse_ebnf("""
        ID : [a-zA-Z_] [a-zA-Z_0-9]* ;
        STRING : '"' [^"]* '"' | "'" [^']* "'" ;
        SPACE : #x20 | #x9 ;
    """).value
    assert [p.name for p in prods] == ['ID', 'STRING', 'SPACE']
    assert prods[1].choice.alts[0] == Sequence([
        Item(Term("'\"'")), Item(Term('[^"]'), '*'), Item(Term("'\"'"))])
    assert prods[1].choice.alts[1].items[0] == Item(Term('"\'"'))
    assert prods[2].choice == Choice([Sequence([Item(Term('#x20'))]),
                                      Sequence([Item(Term('#x9'))])])


def test_empty_alternative():
    prods = parse_ebnf("a ::= 'x' |\nb ::= a").value
    assert prods[0].choice.alts == [Sequence([Item(Term("'x'"))]), Sequence([])]
    assert prods[1] == Production('b', Choice([Sequence([Item(Ref('a'))])]))


def test_comments():
    prods = parse_ebnf("/* letters */\nL ::= [a-z] /* lower only */ ;").value
    assert prods == [Production('L', Choice([Sequence([Item(Term('[a-z]'))])]))]


def test_unbalanced_group_fails():
    with pytest.raises(StructuralParseFailure):
        parse_ebnf("a ::= ( 'x'")


def test_missing_definition_sign_fails():
    with pytest.raises(StructuralParseFailure) as e:
        parse_ebnf("a 'x'")
    assert "DEFNAME" in e.value.expected


def test_trailing_garbage_is_left_over():
    parsed = parse_ebnf("a ::= 'x' ; ) )")
    assert parsed.value == [Production('a', Choice([Sequence([Item(Term("'x'"))])]))]
    assert parsed.rest.strip() == ") )"
