from ll1.grammars import SAMPLES
from ll1.graph import left_recursive
from ll1.logging_config import setup_logger
from ll1.tables import parse_table, summary
from ll1.validator import LL1Grammar, NotLL1Error


logger = setup_logger("ll1")


def main():
    for name, grammar in SAMPLES.items():
        print(f"== {name}")
        print(grammar)
        print()
        print(summary(grammar))
        print()

        try:
            ll1 = LL1Grammar(grammar)
        except NotLL1Error as e:
            for v in e.violations:
                print(f"  {v}")
            recursive = left_recursive(grammar)
            if recursive:
                print(f"  left recursive: {', '.join(sorted(map(str, recursive)))}")
            logger.info("%s is not LL(1) (%d violations)", name, len(e.violations))
        else:
            print(parse_table(ll1))
            logger.info("%s is LL(1)", name)
        print()


if __name__ == "__main__":
    main()
