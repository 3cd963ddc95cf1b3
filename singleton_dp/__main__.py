import argparse
import logging
from typing import Sequence

from singleton_dp.helpers.greeter import Greeter
from singleton_dp.internal.logs import initialize_logging

BANNER = "The Singleton Design Pattern in Python."


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="singleton-dp",
                                     description="Demonstrates a lazily created, thread-safe singleton.")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="show singleton diagnostics (-v info, -vv debug)")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        initialize_logging(logging.DEBUG if args.verbose > 1 else logging.INFO)

    line = "-" * len(BANNER)
    print(line)
    print(BANNER)
    print(f"{line}\n")

    s1 = Greeter.get_instance()
    s1.show_message()

    s2 = Greeter.get_instance()
    s2.show_message()

    print(f"Are s1 and s2 the same? {s1 is s2}")

    print("\nDone.")
    return 0


def startup():
    raise SystemExit(main())


if __name__ == '__main__':
    startup()
