"""seedgen: deterministic, composable pseudo-random generators."""

from seedgen.core.combinators import (
    ChoiceIndexError,
    array_of,
    boolean,
    one_of,
    record_of,
    string,
    struct_of,
    tuple_of,
    vector_of,
)
from seedgen.core.driver import evaluate, generate, generate_sample
from seedgen.core.models import GenState
from seedgen.core.primitives import (
    char,
    float_,
    int_,
    lcg_step,
    perturb,
    resize,
    scale,
    sized,
    uniform,
)
from seedgen.core.schema import build_generator, compile_shape, parse_shape
from seedgen.core.state import (
    Gen,
    ap,
    bind,
    bind_to,
    chain,
    chain_first,
    do,
    let,
    map_,
    of,
    sequence_record,
    sequence_tuple,
)
from seedgen.lcg import SEED_MAX, SEED_MIN, Seed, mk_seed

__all__ = [
    "SEED_MAX",
    "SEED_MIN",
    "ChoiceIndexError",
    "Gen",
    "GenState",
    "Seed",
    "ap",
    "array_of",
    "bind",
    "bind_to",
    "boolean",
    "build_generator",
    "chain",
    "chain_first",
    "char",
    "compile_shape",
    "do",
    "evaluate",
    "float_",
    "generate",
    "generate_sample",
    "int_",
    "lcg_step",
    "let",
    "map_",
    "mk_seed",
    "of",
    "one_of",
    "parse_shape",
    "perturb",
    "record_of",
    "resize",
    "scale",
    "sequence_record",
    "sequence_tuple",
    "sized",
    "string",
    "struct_of",
    "tuple_of",
    "uniform",
    "vector_of",
]
