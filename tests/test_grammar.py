import pytest

from ll1.grammar import (
    EPS,
    Grammar,
    MissingProductionsForNonterminal,
    Nonterminal,
    Rule,
    Terminal,
    UnknownNonterminalInProduction,
    UnknownTerminalInProduction,
)


def test_symbols_respect_tag():
    assert Terminal("a") == Terminal("a")
    assert Terminal("a") != Nonterminal("a")
    assert len({Terminal("a"), Nonterminal("a")}) == 2


def test_unknown_terminal_in_production():
    with pytest.raises(UnknownTerminalInProduction) as e:
        Grammar({"a"}, {"A"}, {"A": [(Terminal("b"),)]})
    assert e.value.symbol == "b"
    assert e.value.production == ("A", (Terminal("b"),))


def test_unknown_nonterminal_in_rhs():
    with pytest.raises(UnknownNonterminalInProduction) as e:
        Grammar({"a"}, {"A"}, {"A": [(Terminal("a"), Nonterminal("B"))]})
    assert e.value.symbol == "B"


def test_unknown_nonterminal_in_lhs():
    with pytest.raises(UnknownNonterminalInProduction) as e:
        Grammar({"a"}, {"A"}, {"A": [()], "B": [(Terminal("a"),)]})
    assert e.value.symbol == "B"


def test_unknown_lhs_without_alternatives():
    with pytest.raises(UnknownNonterminalInProduction) as e:
        Grammar({"a"}, {"A"}, {"A": [()], "B": []})
    assert e.value.production == ("B", ())


def test_terminal_used_as_nonterminal():
    with pytest.raises(UnknownNonterminalInProduction):
        Grammar({"a"}, {"A"}, {"A": [(Nonterminal("a"),)]})


def test_missing_productions():
    with pytest.raises(MissingProductionsForNonterminal) as e:
        Grammar({"a"}, ["A", "B"], {"A": [(Terminal("a"),)]})
    assert e.value.symbol == "B"


def test_empty_alternative_set_is_missing():
    with pytest.raises(MissingProductionsForNonterminal):
        Grammar({"a"}, {"A"}, {"A": []})


def test_rhs_must_hold_symbols():
    with pytest.raises(TypeError):
        Grammar({"a"}, {"A"}, {"A": [("a",)]})


def test_duplicate_alternatives_collapse():
    a = (Terminal("a"),)
    g = Grammar({"a"}, {"A"}, {"A": [a, (), a]})
    assert g.alternatives("A") == (a, ())


def test_grammar_is_read_only():
    g = Grammar({"a"}, {"A"}, {"A": [()]})
    with pytest.raises(TypeError):
        g.productions["A"] = ()


def test_from_rules():
    g = Grammar.from_rules({"a"}, [Rule("A", ["a", "B"]), Rule("B", [])])
    assert g.terminals == {"a"}
    assert g.nonterminals == ("A", "B")
    assert g.alternatives("A") == ((Terminal("a"), Nonterminal("B")),)
    assert g.alternatives("B") == ((),)


def test_from_rules_undefined_name():
    with pytest.raises(MissingProductionsForNonterminal) as e:
        Grammar.from_rules({"a"}, [Rule("A", ["a", "B"])])
    assert e.value.symbol == "B"


def test_str(expression):
    lines = str(expression).splitlines()
    assert lines[0] == "S → E0 $"
    assert f"E0' → + E1 E0' | - E1 E0' | {EPS}" in lines


def test_iter_productions_order(expression):
    lhs = [nt for nt, _ in expression.iter_productions()]
    assert lhs[:3] == ["S", "E0", "E0'"]
    assert len(lhs) == 11


def test_set_of_nonterminals_is_sorted():
    g = Grammar({"a"}, {"B", "A"}, {"B": [(Nonterminal("A"),)], "A": [(Terminal("a"),)]})
    assert g.nonterminals == ("A", "B")
    assert [nt for nt, _ in g.iter_productions()] == ["A", "B"]


def test_set_of_alternatives_is_sorted():
    g = Grammar({"a", "b"}, ["A"], {"A": {(Terminal("b"),), (Terminal("a"),), ()}})
    assert g.alternatives("A") == ((), (Terminal("a"),), (Terminal("b"),))
