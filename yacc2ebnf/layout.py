"""A small document algebra for width-limited grammar output.

Horizontal documents are sequences of unbreakable words; `render`
fills them greedily into lines of at most `width` columns, hanging
continuation lines at a fixed indent. Vertical documents stack their
parts one below the other.
"""

from dataclasses import dataclass
from typing import List


@dataclass
class Text:
    value: str


@dataclass
class Cat:
    left: "Doc"
    right: "Doc"


@dataclass
class HSep:
    docs: List["Doc"]


@dataclass
class VCat:
    docs: List["Doc"]


@dataclass
class Nest:
    indent: int
    doc: "Doc"


type Doc = Text | Cat | HSep | VCat | Nest


def text(s: str) -> Doc:
    return Text(s)


def cat(left: Doc, right: Doc) -> Doc:
    """Juxtaposes two documents with no space in between."""
    return Cat(left, right)


def hsep(docs: List[Doc]) -> Doc:
    """Joins documents with single spaces, breaking lines where needed."""
    return HSep(list(docs))


def vcat(docs: List[Doc]) -> Doc:
    return VCat(list(docs))


def nest(indent: int, doc: Doc) -> Doc:
    """Sets the indent of continuation lines of a horizontal document."""
    return Nest(indent, doc)


def words(doc: Doc) -> List[str]:
    match doc:
        case Text(value):
            return [value] if value else []
        case Cat(left, right):
            lw, rw = words(left), words(right)
            if not lw:
                return rw
            if not rw:
                return lw
            return lw[:-1] + [lw[-1] + rw[0]] + rw[1:]
        case HSep(docs):
            return [w for d in docs for w in words(d)]
        case Nest(_, inner):
            return words(inner)
        case VCat():
            raise ValueError("vertical document inside a line: " + repr(doc))
        case _:
            raise ValueError(doc)


def fill(ws: List[str], width: int, indent: int) -> List[str]:
    lines = []
    line = ""
    for w in ws:
        if not line:
            line = w
        elif len(line) + 1 + len(w) <= width:
            line += " " + w
        else:
            lines.append(line)
            line = " " * indent + w
    if line or not lines:
        lines.append(line)
    return lines


def render(doc: Doc, width: int = 80, indent: int = 4) -> str:
    match doc:
        case VCat(docs):
            return "\n".join(render(d, width, indent) for d in docs)
        case Nest(n, inner):
            return "\n".join(fill(words(inner), width, n))
        case _:
            return "\n".join(fill(words(doc), width, indent))
