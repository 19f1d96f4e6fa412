import argparse
import enum
import logging
import pprint
import sys
from typing import Dict, List, Optional

from .diagrams import Rr_print_html
from .ebnf import Production, render_productions
from .ebnf_parser import parse_ebnf
from .errors import GrammarError, ResourceFailure
from .optimize import ebnf_of_yacc, raw_ebnf_of_yacc
from .parsing import Parsed
from .yacc import Grammar
from .yacc_parser import grammar_section, parse_yacc

log = logging.getLogger("yacc2ebnf")


class OutputFormat(enum.Enum):
    EBNF = 'ebnf'
    RAW = 'raw'
    RRHTML = 'rrhtml'
    DICT = 'dict'
    REPR = 'repr'


def read_text(path: str) -> str:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceFailure(path, e) from e


def report_leftover(path: str, parsed: Parsed):
    incomplete = parsed.incomplete()
    if incomplete is not None:
        log.warning("%s: %s", path, incomplete)


def load_yacc(path: str) -> Grammar:
    text, lineno = grammar_section(read_text(path))
    parsed = parse_yacc(text, lineno)
    report_leftover(path, parsed)
    log.info("%s: %d non-terminals", path, len(parsed.value.rules))
    return parsed.value


def load_terminals(path: Optional[str]) -> Dict[str, Production]:
    if path is None:
        return {}
    parsed = parse_ebnf(read_text(path))
    report_leftover(path, parsed)
    log.info("%s: %d terminal definitions", path, len(parsed.value))
    return {p.name: p for p in parsed.value}


def in_file(path, load):
    """Runs `load(path)`, naming the file in any grammar error."""
    try:
        return load(path)
    except ResourceFailure:
        raise
    except GrammarError as e:
        raise GrammarError(f"{path}: {e}") from e


def convert(yaccpath: str, ebnfpath: Optional[str], to: OutputFormat) -> List[Production]:
    grammar = in_file(yaccpath, load_yacc)
    terminals = in_file(ebnfpath, load_terminals)
    if to == OutputFormat.RAW:
        return raw_ebnf_of_yacc(grammar)
    return ebnf_of_yacc(grammar, terminals)


def emit(productions: List[Production], to: OutputFormat, width: int):
    match to:
        case OutputFormat.EBNF | OutputFormat.RAW:
            print(render_productions(productions, width))
        case OutputFormat.RRHTML:
            Rr_print_html(productions)
        case OutputFormat.DICT:
            pprint.pprint({p.name: p.render_alts() for p in productions},
                          width=width, sort_dicts=False)
        case OutputFormat.REPR:
            pprint.pprint(productions, indent=2, width=width)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Convert a YACC grammar to W3C EBNF.")
    parser.add_argument("yaccpath", type=str, help="YACC grammar file; rules are read from between the %%%% lines")
    parser.add_argument("ebnfpath", type=str, nargs="?", default=None,
                        help="EBNF file defining the grammar's terminals")
    parser.add_argument("--to", type=OutputFormat, default=OutputFormat.EBNF,
                        choices=list(OutputFormat), metavar="FORMAT",
                        help="Output format (ebnf, raw, rrhtml, dict, repr)")
    parser.add_argument("--width", type=int, default=80, help="Maximum line width of EBNF output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Report progress on stderr")

    args = parser.parse_args(argv)

    logging.basicConfig(format="%(name)s: %(levelname)s: %(message)s",
                        level=logging.INFO if args.verbose else logging.WARNING)

    try:
        productions = convert(args.yaccpath, args.ebnfpath, args.to)
    except GrammarError as e:
        log.error("%s", e)
        return 1

    emit(productions, args.to, args.width)
    return 0


if __name__ == '__main__':
    sys.exit(main())
