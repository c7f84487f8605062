import logging
from collections.abc import Iterable

import pandas as pd

from ll1.grammar import MATH_NA, Grammar, format_alternative, ordered
from ll1.sets import analyze
from ll1.validator import LL1Grammar


logger = logging.getLogger(__name__)


def set2str(s: Iterable) -> str:
    return "{" + ", ".join(sorted(map(str, s))) + "}"


def summary(grammar: Grammar | LL1Grammar) -> pd.DataFrame:
    """Nullable, FIRST, FOLLOW and PREDICT of every nonterminal, one row each.

    Works on grammars that are not LL(1) too, which helps to read the violations.
    """
    if isinstance(grammar, LL1Grammar):
        analysis = grammar.analysis
        grammar = grammar.grammar
    else:
        analysis = analyze(grammar)

    records = []
    for nt in grammar.nonterminals:
        records.append(
            {
                "nullable": analysis.nullable[nt],
                "FIRST": set2str(analysis.first[nt]),
                "FOLLOW": set2str(analysis.follow[nt]),
                "PREDICT": set2str(analysis.predict[nt]),
            }
        )

    return pd.DataFrame(
        records,
        index=pd.Index(grammar.nonterminals, dtype=object, name="Nonterminal"),
        columns=["nullable", "FIRST", "FOLLOW", "PREDICT"],
    )


def parse_table(ll1: LL1Grammar) -> pd.DataFrame:
    """LL(1) parse table: the alternative to expand for each (nonterminal, lookahead) pair.

    Rows and columns are labelled by the symbol values, cells hold the alternative as text.
    When two alternatives predict the same lookahead the first one keeps the cell.
    """
    index = pd.Index(ll1.nonterminals, dtype=object, name="Nonterminal")
    columns = pd.Index(ordered(ll1.terminals), dtype=object)
    table = pd.DataFrame(MATH_NA, index=index, columns=columns)

    for nt, rhs in ll1.grammar.iter_productions():
        cell = format_alternative(rhs)
        for t in ordered(ll1.analysis.predict_of(nt, rhs)):
            taken = table.at[nt, t]
            if taken != MATH_NA:
                logger.warning(
                    "Parse table conflict at (%s, %s): %s kept over %s", nt, t, taken, cell
                )
                continue
            table.at[nt, t] = cell

    return table
