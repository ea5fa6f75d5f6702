from pydantic import BaseModel, ConfigDict, Field

from seedgen.lcg import SEED_MAX, SEED_MIN, Seed

DEFAULT_SIZE = 10
DEFAULT_COUNT = 10


class GenState(BaseModel):
    """State threaded through every generator invocation."""

    model_config = ConfigDict(frozen=True, strict=True)

    seed: Seed = Field(ge=SEED_MIN, le=SEED_MAX)
    size: int = Field(ge=0, description="Ambient size bound")


class GenerateOptions(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    seed: Seed = Field(
        ge=SEED_MIN,
        le=SEED_MAX,
        description="Initial seed, e.g. from mk_seed",
    )
    size: int = Field(default=DEFAULT_SIZE, ge=0, description="Ambient size")

    def initial_state(self) -> GenState:
        return GenState(seed=self.seed, size=self.size)


class SampleOptions(GenerateOptions):
    count: int = Field(
        default=DEFAULT_COUNT, ge=0, description="Number of chained samples"
    )
