"""Fail-fast concurrent join over independent awaitables."""

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

A = TypeVar("A")
B = TypeVar("B")
T = TypeVar("T")


async def join_all(*operations: Awaitable[T]) -> list[T]:
    """Run ``operations`` concurrently and return their results in input order.

    Every operation is scheduled before any is awaited. The first failure is
    raised as soon as it settles; the remaining operations keep running and
    their outcomes are discarded. Nothing is cancelled and there is no timeout.

    Args:
        operations: Coroutines, tasks or futures to join.

    Returns:
        The results, ordered like ``operations``.
    """
    tasks = [asyncio.ensure_future(operation) for operation in operations]
    return await asyncio.gather(*tasks)


async def join_pair(first: Awaitable[A], second: Awaitable[B]) -> tuple[A, B]:
    """Two-operand form of :func:`join_all`."""
    first_result, second_result = await join_all(first, second)
    return first_result, second_result
