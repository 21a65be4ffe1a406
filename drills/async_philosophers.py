"""Dining philosophers as asyncio tasks sharing locks and a queue of thoughts."""

from __future__ import annotations

import argparse
import asyncio
from collections.abc import AsyncIterator, Sequence
from dataclasses import dataclass

PHILOSOPHERS = ("Socrates", "Hypatia", "Plato", "Aristotle", "Pythagoras")
EAT_TIME = 0.005
_DONE = None


@dataclass
class Philosopher:
    """A philosopher who shares a fork on each side with a neighbour."""

    name: str
    left_fork: asyncio.Lock
    right_fork: asyncio.Lock
    thoughts: asyncio.Queue

    async def think(self) -> None:
        """Send a new idea to the thoughts queue."""
        await self.thoughts.put(f"Eureka! {self.name} has a new idea!")

    async def eat(self) -> None:
        """Pick up both forks, eat for a moment, then put them down."""
        async with self.left_fork, self.right_fork:
            print(f"{self.name} is eating...")
            await asyncio.sleep(EAT_TIME)


async def _live(philosopher: Philosopher, rounds: int) -> None:
    for _ in range(rounds):
        await philosopher.think()
        await philosopher.eat()
    await philosopher.thoughts.put(_DONE)


async def _dine(names: list[str], rounds: int) -> AsyncIterator[str]:
    thoughts: asyncio.Queue = asyncio.Queue(maxsize=10)
    forks = [asyncio.Lock() for _ in names]
    tasks = []
    for index, name in enumerate(names):
        left_fork = forks[index]
        right_fork = forks[(index + 1) % len(forks)]
        if index == len(names) - 1:
            left_fork, right_fork = right_fork, left_fork
        philosopher = Philosopher(name, left_fork, right_fork, thoughts)
        tasks.append(asyncio.create_task(_live(philosopher, rounds)))

    try:
        finished = 0
        while finished < len(tasks):
            thought = await thoughts.get()
            if thought is _DONE:
                finished += 1
            else:
                yield thought
    finally:
        for task in tasks:
            task.cancel()


def dine(names: Sequence[str] = PHILOSOPHERS, rounds: int = 100) -> AsyncIterator[str]:
    """Let the philosophers think and eat `rounds` times each, yielding their thoughts.

    A single philosopher would need the same fork twice, so that raises ValueError.
    """
    names = list(names)
    if len(names) == 1:
        raise ValueError("at least two philosophers are needed to share forks")
    if rounds < 0:
        raise ValueError("rounds must not be negative")
    return _dine(names, rounds)


async def _print_thoughts(rounds: int) -> None:
    async for thought in dine(PHILOSOPHERS, rounds):
        print(f"Here is a thought: {thought}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the dinner and print every thought."""
    parser = argparse.ArgumentParser(description="Dining philosophers with asyncio.")
    parser.add_argument("--rounds", type=int, default=100)
    args = parser.parse_args(argv)
    asyncio.run(_print_thoughts(args.rounds))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())