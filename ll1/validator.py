"""Decides whether a context-free grammar is LL(1).

Rules:
    1. For each nonterminal `A → B1 | B2 | ... | Bn` the FIRST sets of the
       alternatives must be pairwise disjoint. Left recursion always breaks
       this rule.
    2. For each nonterminal `A` that can vanish, FIRST(A) and FOLLOW(A) must be
       disjoint.
"""
import logging
from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from ll1.grammar import Alternative, Grammar, format_alternative
from ll1.sets import Analysis, analyze


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Violation:
    nonterminal: Hashable
    conflicts: frozenset = field(default=frozenset(), compare=False)

    rule = 0

    def __str__(self) -> str:
        terminals = ", ".join(sorted(map(str, self.conflicts)))
        return f"{self.nonterminal} failed rule {self.rule}: {{{terminals}}}"


@dataclass(frozen=True)
class Rule1(Violation):
    rule = 1


@dataclass(frozen=True)
class Rule2(Violation):
    rule = 2


class NotLL1Error(Exception):

    def __init__(self, violations: list[Violation]):
        self.violations = violations
        super().__init__("; ".join(str(v) for v in violations))


def check_rule_1(grammar: Grammar, analysis: Analysis, nt: Hashable) -> Rule1 | None:
    terminals = set()

    for rhs in grammar.alternatives(nt):
        first = analysis.first_of(rhs)
        if not terminals.isdisjoint(first):
            return Rule1(nt, frozenset(terminals & first))
        terminals |= first

    return None


def check_rule_2(analysis: Analysis, nt: Hashable) -> Rule2 | None:
    if not analysis.nullable[nt]:
        return None

    overlap = analysis.first[nt] & analysis.follow[nt]
    if overlap:
        return Rule2(nt, overlap)
    return None


def validate(grammar: Grammar, analysis: Analysis | None = None) -> list[Violation]:
    """Returns every LL(1) violation of the grammar, rule 1 first, empty if none."""
    if analysis is None:
        analysis = analyze(grammar)

    violations: list[Violation] = []
    for nt in grammar.nonterminals:
        if v := check_rule_1(grammar, analysis, nt):
            violations.append(v)
    for nt in grammar.nonterminals:
        if v := check_rule_2(analysis, nt):
            violations.append(v)

    for v in violations:
        logger.debug("%s", v)
    return violations


class LL1Grammar:
    """A context-free grammar verified to be LL(1).

    Raises `NotLL1Error` holding every violation when the grammar is not LL(1).
    """

    def __init__(self, grammar: Grammar):
        analysis = analyze(grammar)
        violations = validate(grammar, analysis)
        if violations:
            raise NotLL1Error(violations)

        self._grammar = grammar
        self._analysis = analysis

    @property
    def grammar(self) -> Grammar:
        return self._grammar

    @property
    def analysis(self) -> Analysis:
        return self._analysis

    @property
    def terminals(self) -> frozenset:
        return self._grammar.terminals

    @property
    def nonterminals(self) -> tuple:
        return self._grammar.nonterminals

    @property
    def productions(self) -> Mapping[Hashable, tuple[Alternative, ...]]:
        return self._grammar.productions

    def get_nullable(self) -> Mapping[Hashable, bool]:
        return MappingProxyType(self._analysis.nullable)

    def get_first_sets(self) -> Mapping[Hashable, frozenset]:
        return MappingProxyType(self._analysis.first)

    def get_follow_sets(self) -> Mapping[Hashable, frozenset]:
        return MappingProxyType(self._analysis.follow)

    def get_predict_sets(self) -> Mapping[Hashable, frozenset]:
        return MappingProxyType(self._analysis.predict)

    def choose(self, nt: Hashable, lookahead: Hashable) -> Alternative | None:
        """Returns the alternative of `nt` to expand on `lookahead`, None if no alternative fits."""
        for rhs in self._grammar.alternatives(nt):
            if lookahead in self._analysis.predict_of(nt, rhs):
                return rhs
        return None

    def __repr__(self):
        return f"LL1Grammar({self._grammar!r})"

    def __str__(self) -> str:
        lines = []
        for nt, rhs in self._grammar.iter_productions():
            predict = ", ".join(sorted(map(str, self._analysis.predict_of(nt, rhs))))
            lines.append(f"{nt} → {format_alternative(rhs)}  {{{predict}}}")
        return "\n".join(lines)
