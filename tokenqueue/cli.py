"""Command that runs a short session against a token machine."""

from __future__ import annotations

import argparse
from typing import Sequence

from .machine import TokenMachine


def _issue_tokens(machine: TokenMachine, count: int) -> None:
    """Issue ``count`` tokens from ``machine``, printing each on its own line."""
    for _ in range(count):
        print(machine.next_token())


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tokenqueue",
        description="Run a short demonstration session of the token machine.",
    )
    parser.parse_args(argv)

    machine = TokenMachine()

    _issue_tokens(machine, 1)
    machine.person_serviced()
    print()
    _issue_tokens(machine, 3)
    machine.person_serviced()
    _issue_tokens(machine, 6)
    machine.person_serviced()
    print(f"Count of Persons Serviced: {machine.serviced_count()}", end="")
    machine.person_serviced()
    print()
    _issue_tokens(machine, 2)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())