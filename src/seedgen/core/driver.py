import logging

from seedgen.core.combinators import vector_of
from seedgen.core.models import (
    DEFAULT_COUNT,
    DEFAULT_SIZE,
    GenerateOptions,
    GenState,
    SampleOptions,
)
from seedgen.core.state import Gen, T
from seedgen.lcg import Seed

logger = logging.getLogger(__name__)


def evaluate(gen: Gen[T], state: GenState) -> T:
    """Run ``gen`` against ``state`` and drop the final state."""
    value, _ = gen(state)
    return value


def generate(gen: Gen[T], seed: Seed, size: int = DEFAULT_SIZE) -> T:
    options = GenerateOptions(seed=seed, size=size)
    logger.debug("generate seed=%d size=%d", options.seed, options.size)
    return evaluate(gen, options.initial_state())


def generate_sample(
    gen: Gen[T],
    seed: Seed,
    size: int = DEFAULT_SIZE,
    count: int = DEFAULT_COUNT,
) -> list[T]:
    """Produce ``count`` samples from one chained state.

    Each sample starts from the state the previous one left behind, so a
    fixed seed reproduces the whole sequence rather than one value repeated.
    """
    options = SampleOptions(seed=seed, size=size, count=count)
    logger.debug(
        "generate_sample seed=%d size=%d count=%d",
        options.seed,
        options.size,
        options.count,
    )
    return evaluate(vector_of(options.count, gen), options.initial_state())
