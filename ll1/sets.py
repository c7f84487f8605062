import logging
from collections.abc import Hashable, Mapping, Sequence
from dataclasses import dataclass
from pprint import pformat

from ll1.grammar import Grammar, Nonterminal, Symbol, Terminal


logger = logging.getLogger(__name__)

NullableTable = dict[Hashable, bool]
SetTable = dict[Hashable, frozenset]


def nullable_of(symbols: Sequence[Symbol], nullable: Mapping[Hashable, bool]) -> bool:
    """Whether every symbol of the sequence can vanish. The empty sequence always can."""
    for s in symbols:
        if isinstance(s, Terminal) or not nullable[s.value]:
            return False
    return True


def first_of(
    symbols: Sequence[Symbol],
    first: Mapping[Hashable, frozenset],
    nullable: Mapping[Hashable, bool],
) -> frozenset:
    """Terminals that can begin a string derived from `symbols`.

    The scan stops at the first symbol that cannot vanish. Terminals never vanish,
    so a terminal contributes itself and ends the scan.
    """
    result = set()
    for s in symbols:
        if isinstance(s, Terminal):
            result.add(s.value)
            break
        result |= first[s.value]
        if not nullable[s.value]:
            break
    return frozenset(result)


def predict_of(
    lhs: Hashable,
    rhs: Sequence[Symbol],
    first: Mapping[Hashable, frozenset],
    follow: Mapping[Hashable, frozenset],
    nullable: Mapping[Hashable, bool],
) -> frozenset:
    """Lookahead terminals selecting the single alternative `lhs → rhs`."""
    predict = first_of(rhs, first, nullable)
    if nullable_of(rhs, nullable):
        predict = predict | follow[lhs]
    return predict


def compute_nullable(grammar: Grammar) -> NullableTable:
    nullable = {nt: False for nt in grammar.nonterminals}

    passes = 0
    is_changing = True
    while is_changing:
        passes += 1
        snapshot = dict(nullable)
        for nt, rhs in grammar.iter_productions():
            if not snapshot[nt] and nullable_of(rhs, snapshot):
                nullable[nt] = True
        is_changing = nullable != snapshot

    logger.debug("Nullable table converged after %d passes", passes)
    return nullable


def compute_first(grammar: Grammar, nullable: NullableTable | None = None) -> SetTable:
    if nullable is None:
        nullable = compute_nullable(grammar)

    first = {nt: frozenset() for nt in grammar.nonterminals}

    passes = 0
    is_changing = True
    while is_changing:
        passes += 1
        snapshot = dict(first)
        for nt, rhs in grammar.iter_productions():
            first[nt] = first[nt] | first_of(rhs, snapshot, nullable)
        is_changing = first != snapshot

    logger.debug("FIRST sets converged after %d passes", passes)
    return first


def compute_follow(
    grammar: Grammar, first: SetTable, nullable: NullableTable
) -> SetTable:
    follow = {nt: frozenset() for nt in grammar.nonterminals}

    passes = 0
    is_changing = True
    while is_changing:
        passes += 1
        snapshot = dict(follow)
        for lhs, rhs in grammar.iter_productions():
            for i, s in enumerate(rhs):
                if not isinstance(s, Nonterminal):
                    continue
                tail = rhs[i + 1:]
                found = first_of(tail, first, nullable)
                if nullable_of(tail, nullable):
                    found = found | snapshot[lhs]
                follow[s.value] = follow[s.value] | found
        is_changing = follow != snapshot

    logger.debug("FOLLOW sets converged after %d passes", passes)
    return follow


def compute_predict(
    grammar: Grammar, first: SetTable, follow: SetTable, nullable: NullableTable
) -> SetTable:
    predict = {}
    for nt in grammar.nonterminals:
        predict[nt] = first[nt] | follow[nt] if nullable[nt] else first[nt]
    return predict


@dataclass(frozen=True)
class Analysis:
    nullable: NullableTable
    first: SetTable
    follow: SetTable
    predict: SetTable

    def first_of(self, symbols: Sequence[Symbol]) -> frozenset:
        return first_of(symbols, self.first, self.nullable)

    def nullable_of(self, symbols: Sequence[Symbol]) -> bool:
        return nullable_of(symbols, self.nullable)

    def predict_of(self, lhs: Hashable, rhs: Sequence[Symbol]) -> frozenset:
        return predict_of(lhs, rhs, self.first, self.follow, self.nullable)

    def __str__(self) -> str:
        return pformat(
            {
                "nullable": self.nullable,
                "first": {k: set(v) for k, v in self.first.items()},
                "follow": {k: set(v) for k, v in self.follow.items()},
                "predict": {k: set(v) for k, v in self.predict.items()},
            }
        )


def analyze(grammar: Grammar) -> Analysis:
    nullable = compute_nullable(grammar)
    first = compute_first(grammar, nullable)
    follow = compute_follow(grammar, first, nullable)
    predict = compute_predict(grammar, first, follow, nullable)
    return Analysis(nullable=nullable, first=first, follow=follow, predict=predict)
