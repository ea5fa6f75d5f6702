"""Shapes: generators described as JSON-compatible data.

A shape is a tree of ``kind``-tagged objects, e.g.::

    {"kind": "record", "fields": {
        "name": {"kind": "string", "from": "a", "to": "z"},
        "age": {"kind": "int", "min": 0, "max": 100}}}

``build_generator`` compiles a validated shape into the equivalent
combinator tree, so a shape and the hand-written generator it mirrors draw
identically.
"""

import logging
from pathlib import Path
from typing import Annotated, Any, Literal, Union

import srsly
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    field_validator,
    model_validator,
)

from seedgen.core.combinators import (
    array_of,
    boolean,
    one_of,
    record_of,
    string,
    tuple_of,
    vector_of,
)
from seedgen.core.primitives import char, float_, int_, resize
from seedgen.core.state import Gen, of

logger = logging.getLogger(__name__)

_NUMERIC_BOUND_FIELDS = ("min", "max")


def _reject_bool_bounds(data: Any) -> None:
    if not isinstance(data, dict):
        return
    for field_name in _NUMERIC_BOUND_FIELDS:
        if isinstance(data.get(field_name), bool):
            raise ValueError(
                f"{field_name}: bool is not allowed for numeric bounds"
            )


class _ShapeBase(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class _NumericShape(_ShapeBase):
    @model_validator(mode="before")
    @classmethod
    def validate_input_bounds(cls, data: Any) -> Any:
        _reject_bool_bounds(data)
        return data


class IntShape(_NumericShape):
    kind: Literal["int"] = "int"
    min: int = -100
    max: int = 100


class FloatShape(_NumericShape):
    kind: Literal["float"] = "float"
    min: float = Field(default=-100.0, allow_inf_nan=False)
    max: float = Field(default=100.0, allow_inf_nan=False)


class BoolShape(_ShapeBase):
    kind: Literal["bool"] = "bool"


class _CharRangeShape(_ShapeBase):
    from_: str = Field(default=" ", alias="from")
    to: str = "~"

    @field_validator("from_", "to")
    @classmethod
    def single_character(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError(f"expected a single character, got {v!r}")
        return v


class CharShape(_CharRangeShape):
    kind: Literal["char"] = "char"


class StringShape(_CharRangeShape):
    kind: Literal["string"] = "string"


class ConstShape(_ShapeBase):
    kind: Literal["const"] = "const"
    value: Any = None


class TupleShape(_ShapeBase):
    kind: Literal["tuple"] = "tuple"
    items: list["Shape"] = Field(default_factory=list)


class RecordShape(_ShapeBase):
    kind: Literal["record"] = "record"
    fields: dict[str, "Shape"] = Field(default_factory=dict)


class VectorShape(_ShapeBase):
    kind: Literal["vector"] = "vector"
    length: int = Field(ge=0)
    item: "Shape"


class ArrayShape(_ShapeBase):
    kind: Literal["array"] = "array"
    item: "Shape"


class OneOfShape(_ShapeBase):
    kind: Literal["one_of"] = "one_of"
    options: list["Shape"] = Field(min_length=1)


class ResizeShape(_ShapeBase):
    kind: Literal["resize"] = "resize"
    size: int = Field(ge=0)
    item: "Shape"


Shape = Annotated[
    Union[
        IntShape,
        FloatShape,
        BoolShape,
        CharShape,
        StringShape,
        ConstShape,
        TupleShape,
        RecordShape,
        VectorShape,
        ArrayShape,
        OneOfShape,
        ResizeShape,
    ],
    Field(discriminator="kind"),
]

for _model in (
    TupleShape,
    RecordShape,
    VectorShape,
    ArrayShape,
    OneOfShape,
    ResizeShape,
):
    _model.model_rebuild()

_shape_adapter = TypeAdapter(Shape)


def parse_shape(data: Any) -> Shape:
    return _shape_adapter.validate_python(data)


def load_shape(path: Path) -> Shape:
    return parse_shape(srsly.read_json(path))


def build_generator(shape: Shape) -> Gen[Any]:
    """Compile a validated shape into a generator."""
    match shape:
        case IntShape():
            return int_(shape.min, shape.max)
        case FloatShape():
            return float_(shape.min, shape.max)
        case BoolShape():
            return boolean
        case CharShape():
            return char(shape.from_, shape.to)
        case StringShape():
            return string(shape.from_, shape.to)
        case ConstShape():
            return of(shape.value)
        case TupleShape():
            return tuple_of(*(build_generator(item) for item in shape.items))
        case RecordShape():
            return record_of(
                {
                    name: build_generator(field)
                    for name, field in shape.fields.items()
                }
            )
        case VectorShape():
            return vector_of(shape.length, build_generator(shape.item))
        case ArrayShape():
            return array_of(build_generator(shape.item))
        case OneOfShape():
            return one_of([build_generator(opt) for opt in shape.options])
        case ResizeShape():
            return resize(shape.size, build_generator(shape.item))
        case _:
            raise ValueError(f"Unknown shape: {shape!r}")


def shape_to_dict(shape: Shape) -> dict[str, Any]:
    return _shape_adapter.dump_python(shape, by_alias=True, mode="json")


def describe_shape(shape: Shape) -> str:
    """One-line summary of a shape, e.g. ``record{name: string, age: int}``."""
    match shape:
        case TupleShape():
            inner = ", ".join(describe_shape(item) for item in shape.items)
            return f"tuple({inner})"
        case RecordShape():
            inner = ", ".join(
                f"{name}: {describe_shape(field)}"
                for name, field in shape.fields.items()
            )
            return f"record{{{inner}}}"
        case VectorShape():
            return f"vector[{shape.length}]({describe_shape(shape.item)})"
        case ArrayShape():
            return f"array({describe_shape(shape.item)})"
        case OneOfShape():
            return " | ".join(describe_shape(opt) for opt in shape.options)
        case ResizeShape():
            return f"resize[{shape.size}]({describe_shape(shape.item)})"
        case _:
            return shape.kind


def compile_shape(data: Any) -> Gen[Any]:
    shape = parse_shape(data)
    logger.debug("compiled shape %s", describe_shape(shape))
    return build_generator(shape)
