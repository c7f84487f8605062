from ll1.grammar import (
    EPS,
    Grammar,
    GrammarError,
    MissingProductionsForNonterminal,
    Nonterminal,
    Rule,
    Symbol,
    Terminal,
    UnknownNonterminalInProduction,
    UnknownTerminalInProduction,
)
from ll1.sets import (
    Analysis,
    analyze,
    compute_first,
    compute_follow,
    compute_nullable,
    compute_predict,
    first_of,
    nullable_of,
    predict_of,
)
from ll1.validator import LL1Grammar, NotLL1Error, Rule1, Rule2, Violation, validate
