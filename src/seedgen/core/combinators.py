from collections.abc import Mapping, Sequence
from typing import Any

from seedgen.core.models import GenState
from seedgen.core.primitives import char, int_, sized
from seedgen.core.state import (
    Gen,
    T,
    chain,
    map_,
    of,
    sequence_record,
    sequence_tuple,
)


class ChoiceIndexError(RuntimeError):
    """A drawn choice index fell outside the candidate list.

    This is never a caller error; it means the ranged integer generator
    produced a value outside its own bounds.
    """

    def __init__(self, *, index: int, n_choices: int):
        self.index = index
        self.n_choices = n_choices
        super().__init__(
            f"one_of drew index {index} outside [0, {n_choices - 1}]"
        )


def tuple_of(*gens: Gen[Any]) -> Gen[tuple[Any, ...]]:
    return sequence_tuple(gens)


def record_of(fields: Mapping[str, Gen[Any]]) -> Gen[dict[str, Any]]:
    return sequence_record(fields)


def struct_of(fields: Mapping[str, Gen[Any]]) -> Gen[dict[str, Any]]:
    return sequence_record(fields)


def vector_of(n: int, gen: Gen[T]) -> Gen[list[T]]:
    """Invoke ``gen`` exactly ``n`` times, in draw order."""
    if n < 0:
        raise ValueError(f"vector length must be >= 0, got {n}")

    def run(state: GenState) -> tuple[list[T], GenState]:
        values: list[T] = []
        for _ in range(n):
            value, state = gen(state)
            values.append(value)
        return values, state

    return run


def array_of(gen: Gen[T]) -> Gen[list[T]]:
    """List of ``gen`` values whose length is drawn from ``[0, size]`` first."""
    return chain(
        chain(sized, lambda size: int_(0, size)),
        lambda length: vector_of(length, gen),
    )


def string(from_char: str = " ", to_char: str = "~") -> Gen[str]:
    return map_(array_of(char(from_char, to_char)), "".join)


def one_of(gens: Sequence[Gen[T]]) -> Gen[T]:
    choices = tuple(gens)
    if not choices:
        raise ValueError("one_of requires at least one generator")

    def pick(index: int) -> Gen[T]:
        if not 0 <= index < len(choices):
            raise ChoiceIndexError(index=index, n_choices=len(choices))
        return choices[index]

    return chain(int_(0, len(choices) - 1), pick)


boolean: Gen[bool] = one_of([of(False), of(True)])
