from ll1.grammar import Grammar, Rule


expression = Grammar.from_rules(
    terminal={"n", "(", ")", "+", "-", "*", "/", "$"},
    rules=[
        Rule(lhs="S", rhs=["E0", "$"]),
        Rule(lhs="E0", rhs=["E1", "E0'"]),
        Rule(lhs="E0'", rhs=["+", "E1", "E0'"]),
        Rule(lhs="E0'", rhs=["-", "E1", "E0'"]),
        Rule(lhs="E0'", rhs=[]),
        Rule(lhs="E1", rhs=["E2", "E1'"]),
        Rule(lhs="E1'", rhs=["*", "E2", "E1'"]),
        Rule(lhs="E1'", rhs=["/", "E2", "E1'"]),
        Rule(lhs="E1'", rhs=[]),
        Rule(lhs="E2", rhs=["n"]),
        Rule(lhs="E2", rhs=["(", "E0", ")"]),
    ],
)

brackets = Grammar.from_rules(
    terminal={"(", ")"},
    rules=[
        Rule(lhs="goal", rhs=["list"]),
        Rule(lhs="list", rhs=["list", "pair"]),
        Rule(lhs="list", rhs=["pair"]),
        Rule(lhs="pair", rhs=["(", "list", ")"]),
        Rule(lhs="pair", rhs=["(", ")"]),
    ],
)

math = Grammar.from_rules(
    terminal={"+", "-", "*", "/", "(", ")", "n"},
    rules=[
        Rule(lhs="goal", rhs=["expr"]),
        Rule(lhs="expr", rhs=["expr", "+", "term"]),
        Rule(lhs="expr", rhs=["expr", "-", "term"]),
        Rule(lhs="expr", rhs=["term"]),
        Rule(lhs="term", rhs=["term", "*", "factor"]),
        Rule(lhs="term", rhs=["term", "/", "factor"]),
        Rule(lhs="term", rhs=["factor"]),
        Rule(lhs="factor", rhs=["(", "expr", ")"]),
        Rule(lhs="factor", rhs=["n"]),
    ],
)

empty = Grammar.from_rules(
    terminal={"a"},
    rules=[
        Rule(lhs="goal", rhs=["A"]),
        Rule(lhs="A", rhs=["A", "a"]),
        Rule(lhs="A", rhs=["a"]),
        Rule(lhs="A", rhs=[]),
    ],
)

ambiguous = Grammar.from_rules(
    terminal={"a"},
    rules=[
        Rule(lhs="S", rhs=["A"]),
        Rule(lhs="S", rhs=["B"]),
        Rule(lhs="A", rhs=["a"]),
        Rule(lhs="B", rhs=["a"]),
    ],
)

dangling = Grammar.from_rules(
    terminal={"a"},
    rules=[
        Rule(lhs="A", rhs=["a"]),
        Rule(lhs="A", rhs=[]),
        Rule(lhs="B", rhs=["A", "a"]),
    ],
)

mutual = Grammar.from_rules(
    terminal={"b"},
    rules=[
        Rule(lhs="A", rhs=["B"]),
        Rule(lhs="B", rhs=["A"]),
        Rule(lhs="B", rhs=["b"]),
    ],
)

SAMPLES = {
    "expression": expression,
    "brackets": brackets,
    "math": math,
    "empty": empty,
    "ambiguous": ambiguous,
    "dangling": dangling,
    "mutual": mutual,
}
