from dataclasses import dataclass
from typing import List

from . import layout
from .layout import Doc

RULESEP = "::="


@dataclass(frozen=True)
class Ref:
    name: str

    def doc(self) -> Doc:
        return layout.text(self.name)


@dataclass(frozen=True)
class Term:
    text: str  # verbatim: 'x', "x", [a-z] or #x20

    def doc(self) -> Doc:
        return layout.text(self.text)


@dataclass(frozen=True)
class Block:
    choice: "Choice"

    def doc(self) -> Doc:
        return layout.cat(layout.cat(layout.text("("), self.choice.doc()),
                          layout.text(")"))


type Primary = Ref | Term | Block


@dataclass(frozen=True)
class Item:
    primary: Primary
    suffix: str = ""  # "", "?", "*" or "+"

    def bare_term(self) -> bool:
        return self.suffix == "" and isinstance(self.primary, Term)

    def bare_ref_or_term(self) -> bool:
        return self.suffix == "" and isinstance(self.primary, (Ref, Term))

    def doc(self) -> Doc:
        return layout.cat(self.primary.doc(), layout.text(self.suffix))


@dataclass(frozen=True)
class Sequence:
    items: List[Item]

    def doc(self) -> Doc:
        return layout.hsep([item.doc() for item in self.items])


@dataclass(frozen=True)
class Choice:
    alts: List[Sequence]

    def doc(self) -> Doc:
        parts = []
        for n, alt in enumerate(self.alts):
            if n:
                parts.append(layout.text("|"))
            parts.append(alt.doc())
        return layout.hsep(parts)


@dataclass(frozen=True)
class Production:
    name: str
    choice: Choice

    def doc(self, width: int = 80) -> Doc:
        head = f"{self.name} {RULESEP}"
        indent = len(head) + 1
        if indent > width // 2:
            indent = 4
        return layout.nest(indent, layout.hsep([layout.text(head), self.choice.doc()]))

    def render(self, width: int = 80) -> str:
        return layout.render(self.doc(width), width)

    def render_alts(self) -> List[str]:
        return [' '.join(layout.words(alt.doc())) for alt in self.choice.alts]

    def __str__(self):
        return ' '.join(layout.words(self.doc()))


def render_productions(productions: List[Production], width: int = 80) -> str:
    return layout.render(layout.vcat([p.doc(width) for p in productions]), width)
