from collections.abc import Mapping
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer
from typing import Annotated, Dict, Literal, Tuple, Union

from plan_compiler.functions.schemas import FunctionDescriptor
from plan_compiler.orchestration.variables import VariableBag

def _frozen_bag(value):
    # dicts from model_dump() load back; bags are copied so callers keep theirs
    if isinstance(value, Mapping):
        return VariableBag(dict(value)).freeze()
    return value

Variables = Annotated[
    VariableBag,
    BeforeValidator(_frozen_bag),
    PlainSerializer(lambda bag: bag.to_dict(), return_type=Dict[str, str]),
]

class ResolvedStep(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["function"] = "function"
    function: FunctionDescriptor
    inputs: Variables = Field(default_factory=VariableBag, validate_default=True)
    outputs: Tuple[str, ...] = Field((), description="Variables the step's result is stored into")

class PlaceholderStep(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["placeholder"] = "placeholder"
    name: str = Field(..., description="Function reference as written, e.g. Writer.Tell")

Step = Annotated[Union[ResolvedStep, PlaceholderStep], Field(discriminator="kind")]

class Plan(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    goal: str
    steps: Tuple[Step, ...] = ()
    outputs: Tuple[str, ...] = Field((), description="Variables that make up the final result")
    parameters: Variables = Field(default_factory=VariableBag, validate_default=True)
