import html
import sys
from typing import List

from .ebnf import Block, Choice, Item, Production, Ref, Sequence, Term


def Diagram_for_Production(p: Production):
    import railroad

    def Primary_item(primary):
        match primary:
            case Term(text):
                return railroad.Terminal(text)
            case Ref(name):
                return railroad.NonTerminal(name)
            case Block(choice):
                return Choice_item(choice)

    def Item_item(item: Item):
        inner = Primary_item(item.primary)
        match item.suffix:
            case "?":
                return railroad.Optional(inner, skip=False)
            case "*":
                return railroad.ZeroOrMore(inner, repeat=None, skip=False)
            case "+":
                return railroad.OneOrMore(inner, repeat=None)
            case "":
                return inner

    def Sequence_item(seq: Sequence):
        if not seq.items:
            return railroad.Skip()
        return railroad.Sequence(*[Item_item(i) for i in seq.items])

    def Choice_item(choice: Choice):
        return railroad.Choice(0, *[Sequence_item(alt) for alt in choice.alts])

    return railroad.Diagram(Choice_item(p.choice))


def Rr_print_html(productions: List[Production], out=None):
    """Writes an HTML page with one standalone SVG diagram per production."""
    write = (out or sys.stdout).write
    write("<!DOCTYPE html>\n<html>\n<body>\n")
    for p in productions:
        d = Diagram_for_Production(p)
        write(f"<h2 id=\"{html.escape(p.name)}\">{html.escape(p.name)}</h2>\n")
        d.writeStandalone(write)
        write("\n")
    write("</body>\n</html>\n")
