import logging
from typing import Dict, List, Tuple

from .convert import convert_production
from .deps import dependency_graph, is_recursive, strongly_connected_components
from .ebnf import Block, Choice, Item, Production, Ref, Sequence
from .yacc import Grammar

log = logging.getLogger(__name__)

type ProductionMap = Dict[str, Production]

# Inlining anything bigger than this hurts readability more than it helps.
MAX_TRIVIAL_TERMS = 5
MAX_TRIVIAL_ITEMS = 3


def is_trivial(p: Production) -> bool:
    alts = p.choice.alts
    if 1 <= len(alts) <= MAX_TRIVIAL_TERMS:
        if all(len(alt.items) == 1 and alt.items[0].bare_term() for alt in alts):
            return True
    match alts:
        case [Sequence(items)]:
            return (len(items) <= MAX_TRIVIAL_ITEMS
                    and all(item.bare_ref_or_term() for item in items))
        case _:
            return False


def inline_item(item: Item, productions: ProductionMap) -> Item:
    match item.primary:
        case Ref(name):
            callee = productions.get(name)
            if callee is not None and is_trivial(callee):
                return Item(Block(callee.choice), item.suffix)
            return item
        case Block(choice):
            return Item(Block(inline_choice(choice, productions)), item.suffix)
        case _:
            return item


def inline_choice(choice: Choice, productions: ProductionMap) -> Choice:
    return Choice([Sequence([inline_item(item, productions) for item in alt.items])
                   for alt in choice.alts])


def combine_suffixes(outer: str, inner: str):
    """The single suffix equivalent to `(x<inner>)<outer>`, or None when
    both are present, e.g. `(x?)+`."""
    if not outer:
        return inner
    if not inner:
        return outer
    return None


def flatten_item(item: Item) -> List[Item]:
    match item.primary:
        case Block(Choice([alt])):
            flat = flatten_sequence(alt)
            match flat.items:
                case [single]:
                    suffix = combine_suffixes(item.suffix, single.suffix)
                    if suffix is not None:
                        return [Item(single.primary, suffix)]
                case items if not item.suffix:
                    return items
            # The group has to stay, e.g. (x?)+ or (a b)*.
            return [item]
        case _:
            return [item]


def flatten_sequence(seq: Sequence) -> Sequence:
    return Sequence([flat for item in seq.items for flat in flatten_item(item)])


def optimize(p: Production, productions: ProductionMap) -> Production:
    """Inlines trivial references from `productions` into `p`, then removes
    single-alternative groups that are no longer needed."""
    inlined = inline_choice(p.choice, productions)
    return Production(p.name, Choice([flatten_sequence(alt) for alt in inlined.alts]))


def optimize_grammar(grammar: Grammar, terminals: ProductionMap) -> Tuple[ProductionMap, List[List[str]]]:
    """Converts and optimizes every production of `grammar`, one strongly
    connected component at a time, leaves first.

    Returns the production map (terminal definitions included) and the
    component order that was used.
    """
    productions = dict(terminals)
    graph = dependency_graph(grammar)
    components = strongly_connected_components(graph)
    for component in components:
        if is_recursive(component, graph):
            log.debug("recursive component: %s", ' '.join(component))
        # Convert the whole component first so its members can see each other.
        for name in component:
            productions[name] = convert_production(name, grammar.rules[name])
        for name in component:
            productions[name] = optimize(productions[name], productions)
    return productions, components


def print_order(components: List[List[str]]) -> List[str]:
    return list(reversed([name for component in components for name in component]))


def ebnf_of_yacc(grammar: Grammar, terminals: ProductionMap) -> List[Production]:
    """The optimized EBNF productions for `grammar`, in output order."""
    productions, components = optimize_grammar(grammar, terminals)
    return [productions[name] for name in print_order(components)]


def raw_ebnf_of_yacc(grammar: Grammar) -> List[Production]:
    """Straight conversion of `grammar`, without inlining or flattening."""
    components = strongly_connected_components(dependency_graph(grammar))
    return [convert_production(name, grammar.rules[name])
            for name in print_order(components)]
