"""Generator type and the state-threading operations it composes with.

A generator is a plain function from a ``GenState`` to a pair of the produced
value and the next ``GenState``. Building or composing generators never draws
from the seed; only calling one against a concrete state does.
"""

from collections.abc import Callable, Mapping, Sequence
from typing import Any, TypeVar

from seedgen.core.models import GenState

T = TypeVar("T")
U = TypeVar("U")

Gen = Callable[[GenState], tuple[T, GenState]]


def of(value: T) -> Gen[T]:
    def run(state: GenState) -> tuple[T, GenState]:
        return value, state

    return run


def map_(gen: Gen[T], f: Callable[[T], U]) -> Gen[U]:
    def run(state: GenState) -> tuple[U, GenState]:
        value, next_state = gen(state)
        return f(value), next_state

    return run


def chain(gen: Gen[T], f: Callable[[T], Gen[U]]) -> Gen[U]:
    """Run ``gen``, then the generator ``f`` builds from its value."""

    def run(state: GenState) -> tuple[U, GenState]:
        value, next_state = gen(state)
        return f(value)(next_state)

    return run


def chain_first(gen: Gen[T], f: Callable[[T], Gen[Any]]) -> Gen[T]:
    return chain(gen, lambda value: map_(f(value), lambda _: value))


def ap(gen_f: Gen[Callable[[T], U]], gen_a: Gen[T]) -> Gen[U]:
    def run(state: GenState) -> tuple[U, GenState]:
        f, after_f = gen_f(state)
        value, after_a = gen_a(after_f)
        return f(value), after_a

    return run


def sequence_tuple(gens: Sequence[Gen[Any]]) -> Gen[tuple[Any, ...]]:
    """Run ``gens`` left to right, threading state from one to the next."""
    gens = tuple(gens)

    def run(state: GenState) -> tuple[tuple[Any, ...], GenState]:
        values: list[Any] = []
        for gen in gens:
            value, state = gen(state)
            values.append(value)
        return tuple(values), state

    return run


def sequence_record(fields: Mapping[str, Gen[Any]]) -> Gen[dict[str, Any]]:
    """Run each field generator in the mapping's insertion order.

    Field order is part of the result: swapping two fields changes which
    draws each one receives, not only the labels.
    """
    items = tuple(fields.items())

    def run(state: GenState) -> tuple[dict[str, Any], GenState]:
        record: dict[str, Any] = {}
        for name, gen in items:
            record[name], state = gen(state)
        return record, state

    return run


# Do-notation over a scope dict.


def do() -> Gen[dict[str, Any]]:
    return of({})


def bind_to(gen: Gen[T], name: str) -> Gen[dict[str, T]]:
    return map_(gen, lambda value: {name: value})


def bind(
    gen: Gen[dict[str, Any]],
    name: str,
    f: Callable[[dict[str, Any]], Gen[Any]],
) -> Gen[dict[str, Any]]:
    if not name:
        raise ValueError("bind name must be a non-empty string")
    return chain(
        gen,
        lambda scope: map_(f(scope), lambda value: {**scope, name: value}),
    )


def let(
    gen: Gen[dict[str, Any]],
    name: str,
    f: Callable[[dict[str, Any]], Any],
) -> Gen[dict[str, Any]]:
    if not name:
        raise ValueError("let name must be a non-empty string")
    return map_(gen, lambda scope: {**scope, name: f(scope)})
