import math
from collections.abc import Callable

from seedgen.core.models import GenState
from seedgen.core.state import Gen, T, chain, map_
from seedgen.lcg import SEED_MAX, SEED_MIN, lcg_perturb, step


def lcg_step(state: GenState) -> tuple[int, GenState]:
    """Draw one raw integer, advancing the seed by exactly one step."""
    raw, next_seed = step(state.seed)
    return raw, state.model_copy(update={"seed": next_seed})


def _to_unit(n: int) -> float:
    return (n - SEED_MIN) / (SEED_MAX - SEED_MIN)


uniform: Gen[float] = map_(lcg_step, _to_unit)


def sized(state: GenState) -> tuple[int, GenState]:
    return state.size, state


def int_(min_value: int = -100, max_value: int = 100) -> Gen[int]:
    """Integer in ``[min_value, max_value]`` from a single draw.

    Bounds are order-normalized. Uniformity degrades once the span nears
    the primitive's output range.
    """
    low = min(min_value, max_value)
    high = max(min_value, max_value)
    modulus = high - low + 1
    return map_(lcg_step, lambda n: low + n % modulus)


def float_(min_value: float = -100.0, max_value: float = 100.0) -> Gen[float]:
    """Float from ``min_value + unit * |max_value - min_value|``.

    Spans too wide for a double fall back to interpolating between the
    bounds, which only works for ordered bounds.
    """
    if not (math.isfinite(min_value) and math.isfinite(max_value)):
        raise ValueError(
            f"float bounds must be finite, got [{min_value}, {max_value}]"
        )
    diff = abs(max_value - min_value)
    if math.isfinite(diff) and math.isfinite(min_value + diff):
        return map_(uniform, lambda unit: min_value + unit * diff)
    if min_value > max_value:
        raise ValueError(
            f"float span overflows: [{min_value}, {max_value}]"
        )
    return map_(
        uniform, lambda unit: (1 - unit) * min_value + unit * max_value
    )



def _require_single_char(name: str, value: str) -> None:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(
            f"{name} must be a single character, got {value!r}"
        )


def char(from_char: str = " ", to_char: str = "~") -> Gen[str]:
    _require_single_char("from_char", from_char)
    _require_single_char("to_char", to_char)
    return map_(int_(ord(from_char), ord(to_char)), chr)


def perturb(delta: int) -> Gen[None]:
    """Mix ``delta`` into the seed without drawing; size is untouched."""

    def run(state: GenState) -> tuple[None, GenState]:
        return None, state.model_copy(
            update={"seed": lcg_perturb(delta, state.seed)}
        )

    return run


def resize(size: int, gen: Gen[T]) -> Gen[T]:
    """Run ``gen`` under ``size``; the caller's size is restored afterwards."""
    if size < 0:
        raise ValueError(f"size must be >= 0, got {size}")

    def run(state: GenState) -> tuple[T, GenState]:
        value, inner = gen(state.model_copy(update={"size": size}))
        return value, inner.model_copy(update={"size": state.size})

    return run


def scale(f: Callable[[int], int], gen: Gen[T]) -> Gen[T]:
    """Run ``gen`` under a size derived from the ambient one."""
    return chain(sized, lambda size: resize(f(size), gen))
