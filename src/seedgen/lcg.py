"""Lehmer (Park-Miller) linear congruential seed primitive."""

from typing import NewType

Seed = NewType("Seed", int)

LCG_A = 48271
LCG_C = 0
LCG_M = (1 << 31) - 1

SEED_MIN = 1
SEED_MAX = LCG_M - 1


def mk_seed(n: int) -> Seed:
    """Fold an arbitrary integer into ``[SEED_MIN, SEED_MAX]``."""
    return Seed(SEED_MIN + n % (SEED_MAX - SEED_MIN))


def unseed(seed: Seed) -> int:
    return int(seed)


def lcg_perturb(delta: int, seed: Seed) -> Seed:
    raw = (LCG_A * seed + delta) % LCG_M
    if SEED_MIN <= raw <= SEED_MAX:
        return Seed(raw)
    return mk_seed(raw)


def lcg_next(seed: Seed) -> Seed:
    return lcg_perturb(LCG_C, seed)


def step(seed: Seed) -> tuple[int, Seed]:
    """Return the raw integer held by ``seed`` and the following seed."""
    return unseed(seed), lcg_next(seed)
