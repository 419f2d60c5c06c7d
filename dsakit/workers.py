"""Random people who each do their own kind of work and log it."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

MAX_PEOPLE = 100
DEFAULT_OUTPUT = Path("build") / "output.txt"


class PersonType(Enum):
    ANXIN = "anxin"
    ANTROM = "antrom"
    CONGNHAN = "congnhan"


_INCOME: dict[PersonType, str | int] = {
    PersonType.ANXIN: "tuytam",
    PersonType.ANTROM: "henxui",
    PersonType.CONGNHAN: 500000,
}


@dataclass(frozen=True)
class Person:
    type: PersonType
    income: str | int

    def act(self) -> str:
        """Return the message this person's action produces."""
        if self.type is PersonType.ANXIN:
            return "lam on lam phuoc"
        if self.type is PersonType.ANTROM:
            return "!!!"
        return str(self.income)


def create_person(rng=None) -> Person:
    """Return a person of a randomly chosen type with the matching income."""
    source = random if rng is None else rng
    kinds = list(PersonType)
    kind = kinds[source.randrange(len(kinds))]
    return Person(kind, _INCOME[kind])


def run(
    count: int,
    output_path: str | Path = DEFAULT_OUTPUT,
    rng=None,
) -> list[tuple[Person, str]]:
    """Create ``count`` people, write each one's message to ``output_path``.

    Returns every person paired with the message it produced.
    """
    if not 0 <= count <= MAX_PEOPLE:
        raise ValueError(f"number of people must be between 0 and {MAX_PEOPLE}")
    people = [create_person(rng) for _ in range(count)]
    results = [(person, person.act()) for person in people]
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        for _, message in results:
            handle.write(f"{message}\n")
    return results


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="dsakit-workers", description="Simulate random people.")
    parser.add_argument("count", nargs="?", type=int, help="number of people")
    parser.add_argument("--output", type=Path, default=DEFAULT_OUTPUT, help="message log file")
    parser.add_argument("--seed", type=int, help="random seed")
    args = parser.parse_args(argv)

    count = args.count
    if count is None:
        try:
            count = int(input("Nhap so nguoi: "))
        except (ValueError, EOFError):
            print("Invalid number of people")
            return 1

    rng = random.Random(args.seed) if args.seed is not None else None
    try:
        results = run(count, args.output, rng)
    except ValueError as exc:
        print(exc)
        return 1
    for person, message in results:
        print(f"{person.type.value} {message}")
    return 0


if __name__ == "__main__":
    sys.exit(main())