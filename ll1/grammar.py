import logging
from collections.abc import Hashable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Self


MATH_NA = "∅"
EPS = "ϵ"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Terminal:
    value: Hashable

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Nonterminal:
    value: Hashable

    def __str__(self) -> str:
        return str(self.value)


Symbol = Terminal | Nonterminal
Alternative = tuple[Symbol, ...]


@dataclass
class Rule:
    lhs: Hashable
    rhs: list[Hashable] = field(default_factory=list)


def ordered(values: Iterable) -> list:
    """Iteration order of `values`, sorted by text when it is a set so runs do not depend on hashing."""
    if isinstance(values, (set, frozenset)):
        return sorted(values, key=lambda v: (str(v), repr(v)))
    return list(values)


def format_alternative(rhs: Sequence[Symbol]) -> str:
    return " ".join(str(s) for s in rhs) if rhs else EPS


class GrammarError(Exception):

    def __init__(self, symbol: Hashable, production: tuple | None = None):
        self.symbol = symbol
        self.production = production
        super().__init__(self.describe())

    def describe(self) -> str:
        return repr(self.symbol)


class UnknownTerminalInProduction(GrammarError):

    def describe(self) -> str:
        lhs, rhs = self.production
        return f"Unknown terminal {self.symbol!r} in {lhs} → {format_alternative(rhs)}"


class UnknownNonterminalInProduction(GrammarError):

    def describe(self) -> str:
        lhs, rhs = self.production
        return f"Unknown nonterminal {self.symbol!r} in {lhs} → {format_alternative(rhs)}"


class MissingProductionsForNonterminal(GrammarError):

    def describe(self) -> str:
        return f"Nonterminal {self.symbol!r} has no productions"


class Grammar:
    """A validated context-free grammar.

    `productions` maps every nonterminal to its alternatives. An alternative is a
    sequence of `Terminal` / `Nonterminal` symbols, the empty sequence being ϵ.
    Identical alternatives collapse, the first occurrence keeps its position.

    Raises a `GrammarError` subclass on the first problem found:
        * `UnknownNonterminalInProduction` - a lhs or rhs nonterminal is not declared
        * `UnknownTerminalInProduction` - a rhs terminal is not declared
        * `MissingProductionsForNonterminal` - a declared nonterminal has no alternatives
    """

    def __init__(
        self,
        terminal: Iterable[Hashable],
        nonterminal: Iterable[Hashable],
        productions: Mapping[Hashable, Iterable[Sequence[Symbol]]],
    ):
        self._terminal = frozenset(terminal)
        self._nonterminal = tuple(dict.fromkeys(ordered(nonterminal)))
        self._productions = MappingProxyType(
            Grammar.clean_productions(productions)
        )

        known = set(self._nonterminal)
        for lhs, alternatives in self._productions.items():
            if lhs not in known:
                raise UnknownNonterminalInProduction(lhs, (lhs, ()))
            for rhs in alternatives:
                Grammar.validate_production(self._terminal, known, lhs, rhs)

        for nt in self._nonterminal:
            if not self._productions.get(nt):
                raise MissingProductionsForNonterminal(nt)

        logger.debug(
            "Grammar with %d terminals, %d nonterminals, %d alternatives",
            len(self._terminal),
            len(self._nonterminal),
            sum(len(v) for v in self._productions.values()),
        )

    @classmethod
    def from_rules(cls, terminal: set[Hashable], rules: list[Rule]) -> Self:
        """Builds a grammar from plain rules.

        Values found in `terminal` become terminals, every other value is a nonterminal.

        Examples:
            `Grammar.from_rules({"a"}, [Rule("A", ["a"]), Rule("A", [])])` is `A → a | ϵ`
        """
        nonterminal = Grammar.select_symbols(rules).difference(terminal)
        order = [v for v in Grammar.symbol_order(rules) if v in nonterminal]

        productions: dict[Hashable, list[Alternative]] = {}
        for r in rules:
            rhs = tuple(
                Terminal(v) if v in terminal else Nonterminal(v) for v in r.rhs
            )
            productions.setdefault(r.lhs, []).append(rhs)

        return cls(terminal, order, productions)

    @staticmethod
    def select_symbols(rules: list[Rule]) -> set[Hashable]:
        s = set()
        for r in rules:
            s.add(r.lhs)
            for v in r.rhs:
                s.add(v)
        return s

    @staticmethod
    def symbol_order(rules: list[Rule]) -> list[Hashable]:
        # Left-hand sides first, then names only seen on the right
        order = dict.fromkeys(r.lhs for r in rules)
        for r in rules:
            order.update(dict.fromkeys(r.rhs))
        return list(order)

    @staticmethod
    def clean_productions(
        productions: Mapping[Hashable, Iterable[Sequence[Symbol]]],
    ) -> dict[Hashable, tuple[Alternative, ...]]:
        cleaned = {}
        for lhs, alternatives in productions.items():
            cleaned[lhs] = tuple(dict.fromkeys(tuple(rhs) for rhs in ordered(alternatives)))
        return cleaned

    @staticmethod
    def validate_production(
        terminal: frozenset, nonterminal: set, lhs: Hashable, rhs: Alternative
    ):
        for s in rhs:
            match s:
                case Terminal(value) if value not in terminal:
                    raise UnknownTerminalInProduction(value, (lhs, rhs))
                case Nonterminal(value) if value not in nonterminal:
                    raise UnknownNonterminalInProduction(value, (lhs, rhs))
                case Terminal() | Nonterminal():
                    pass
                case _:
                    raise TypeError(
                        f"Expected Terminal or Nonterminal in {lhs} production, got {s!r}"
                    )

    @property
    def terminals(self) -> frozenset[Hashable]:
        return self._terminal

    @property
    def nonterminals(self) -> tuple[Hashable, ...]:
        return self._nonterminal

    @property
    def productions(self) -> Mapping[Hashable, tuple[Alternative, ...]]:
        return self._productions

    def alternatives(self, nt: Hashable) -> tuple[Alternative, ...]:
        return self._productions[nt]

    def iter_productions(self) -> Iterator[tuple[Hashable, Alternative]]:
        for nt in self._nonterminal:
            for rhs in self._productions[nt]:
                yield nt, rhs

    def __repr__(self):
        return f"Grammar(terminals={len(self._terminal)}, nonterminals={len(self._nonterminal)})"

    def __str__(self) -> str:
        lines = []
        for nt in self._nonterminal:
            alternatives = " | ".join(format_alternative(rhs) for rhs in self._productions[nt])
            lines.append(f"{nt} → {alternatives}")
        return "\n".join(lines)
