from yacc2ebnf import layout
from yacc2ebnf.ebnf import Block, Choice, Item, Production, Ref, Sequence, Term, render_productions
from yacc2ebnf.ebnf_parser import parse_ebnf
from yacc2ebnf.optimize import ebnf_of_yacc
from yacc2ebnf.yacc_parser import parse_yacc


def test_layout_primitives():
    doc = layout.vcat([
        layout.hsep([layout.text("a"), layout.cat(layout.text("("), layout.text("b")), layout.text(")")]),
        layout.text("c"),
    ])
    assert layout.render(doc, 80) == "a (b )\nc"


def test_fill_wraps_at_width_with_hanging_indent():
    doc = layout.nest(2, layout.hsep([layout.text(w) for w in "aaa bbb ccc ddd".split()]))
    assert layout.render(doc, 8) == "aaa bbb\n  ccc\n  ddd"


def test_overlong_word_gets_its_own_line():
    doc = layout.hsep([layout.text("x"), layout.text("y" * 20), layout.text("z")])
    assert layout.render(doc, 10, indent=1) == "x\n " + "y" * 20 + "\n z"


def test_production_text():
    p = Production('a', Choice([
        Sequence([Item(Block(Choice([Sequence([Item(Ref('b'))]), Sequence([Item(Term("'c'"))])])), '*'),
                  Item(Ref('d'), '?')]),
        Sequence([]),
    ]))
    assert p.render() == "a ::= (b | 'c')* d? |"
    assert p.render_alts() == ["(b | 'c')* d?", ""]


def test_long_production_wraps_under_its_body():
    items = [Item(Ref(f"item{n}")) for n in range(30)]
    p = Production('list', Choice([Sequence(items)]))
    lines = p.render(width=40).split("\n")
    assert len(lines) > 1
    assert all(len(line) <= 40 for line in lines)
    assert lines[0].startswith("list ::= item0 ")
    assert all(line.startswith(" " * 9 + "item") for line in lines[1:])


def test_literals_are_never_split():
    p = Production('kw', Choice([Sequence([Item(Term("'a b c d'")), Item(Term("'e f'"))])]))
    lines = p.render(width=8).split("\n")
    assert "'a b c d'" in lines[0] or "'a b c d'" in lines[1].strip()
    assert lines[-1].strip() == "'e f'"


def test_long_names_use_a_small_indent():
    name = "n" * 30
    p = Production(name, Choice([Sequence([Item(Ref('first')), Item(Ref('second'))])]))
    assert p.render(width=40) == name + " ::= first\n    second"


def test_printed_grammar_parses_back():
    g = parse_yacc("""
        prog : 'begin' body 'end' ;
        body : 'skip' | 'print' 'x' '+' 'y' 'z' ;
    """).value
    productions = ebnf_of_yacc(g, {})
    text = render_productions(productions)
    assert text == "prog ::= 'begin' body 'end'\nbody ::= 'skip' | 'print' 'x' '+' 'y' 'z'"
    assert all("::=" in line for line in text.split("\n"))
    parsed = parse_ebnf(text)
    assert parsed.rest == ""
    assert parsed.value == productions


def test_wrapped_grammar_parses_back():
    g = parse_yacc("""
        call : NAME '(' args ')' | NAME '(' ')' | NAME '[' args ']' '(' args ')' ;
        args : arg | args ',' arg ;
        arg : NAME '=' NAME | NAME ;
    """).value
    productions = ebnf_of_yacc(g, {})
    parsed = parse_ebnf(render_productions(productions, width=30))
    assert parsed.rest == ""
    assert parsed.value == productions
