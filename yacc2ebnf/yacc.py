from dataclasses import dataclass
from typing import Dict, List

type RuleRef = str


@dataclass(frozen=True)
class Literal:
    text: str  # quotes included, e.g. "'+'"


@dataclass(frozen=True)
class NonTerminal:
    name: RuleRef


type Element = Literal | NonTerminal


@dataclass
class Rule:
    elements: List[Element]

    def is_empty(self) -> bool:
        return not self.elements


@dataclass
class Grammar:
    rules: Dict[RuleRef, List[Rule]]  # one entry per non-terminal, in source order

    def nonterminals(self) -> List[RuleRef]:
        return list(self.rules)

    def references(self, name: RuleRef) -> List[RuleRef]:
        """Non-terminal names used by the rules of `name`, first use first."""
        seen = {}
        for rule in self.rules[name]:
            for elt in rule.elements:
                match elt:
                    case NonTerminal(ref):
                        seen.setdefault(ref, None)
                    case Literal():
                        pass
        return list(seen)
