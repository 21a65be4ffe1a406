"""Dining philosophers with threads, locks and a bounded queue of thoughts."""

from __future__ import annotations

import argparse
import queue
import threading
import time
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

PHILOSOPHERS = ("Socrates", "Hypatia", "Plato", "Aristotle", "Pythagoras")
EAT_TIME = 0.01
_DONE = None


@dataclass
class Philosopher:
    """A philosopher who shares a fork on each side with a neighbour."""

    name: str
    left_fork: threading.Lock
    right_fork: threading.Lock
    thoughts: queue.Queue

    def think(self) -> None:
        """Send a new idea to the thoughts queue."""
        self.thoughts.put(f"Eureka! {self.name} has a new idea!")

    def eat(self) -> None:
        """Pick up both forks, eat for a moment, then put them down."""
        print(f"{self.name} is trying to eat")
        with self.left_fork, self.right_fork:
            print(f"{self.name} is eating...")
            time.sleep(EAT_TIME)


def _live(philosopher: Philosopher, rounds: int) -> None:
    try:
        for _ in range(rounds):
            philosopher.eat()
            philosopher.think()
    finally:
        philosopher.thoughts.put(_DONE)


def _dine(names: list[str], rounds: int) -> Iterator[str]:
    thoughts: queue.Queue = queue.Queue(maxsize=10)
    forks = [threading.Lock() for _ in names]
    workers = []
    for index, name in enumerate(names):
        left_fork = forks[index]
        right_fork = forks[(index + 1) % len(forks)]
        # Breaking the symmetry for the last philosopher avoids a deadlock.
        if index == len(names) - 1:
            left_fork, right_fork = right_fork, left_fork
        philosopher = Philosopher(name, left_fork, right_fork, thoughts)
        workers.append(
            threading.Thread(target=_live, args=(philosopher, rounds), daemon=True)
        )
    for worker in workers:
        worker.start()

    finished = 0
    while finished < len(workers):
        thought = thoughts.get()
        if thought is _DONE:
            finished += 1
        else:
            yield thought


def dine(names: Sequence[str] = PHILOSOPHERS, rounds: int = 100) -> Iterator[str]:
    """Let the philosophers eat and think `rounds` times each, yielding their thoughts.

    A single philosopher would need the same fork twice, so that raises ValueError.
    """
    names = list(names)
    if len(names) == 1:
        raise ValueError("at least two philosophers are needed to share forks")
    if rounds < 0:
        raise ValueError("rounds must not be negative")
    return _dine(names, rounds)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the dinner and print every thought."""
    parser = argparse.ArgumentParser(description="Dining philosophers with threads.")
    parser.add_argument("--rounds", type=int, default=100)
    args = parser.parse_args(argv)
    for thought in dine(PHILOSOPHERS, args.rounds):
        print(thought)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())