from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Tuple

class ParameterView(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    default_value: Optional[str] = Field(None, description="None means no default is seeded")

class FunctionDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    plugin_name: str = Field("", description="Empty for functions in the global namespace")
    function_name: str = Field(..., min_length=1)
    description: str = ""
    parameters: Tuple[ParameterView, ...] = ()

    @property
    def qualified_name(self) -> str:
        if self.plugin_name:
            return f"{self.plugin_name}.{self.function_name}"
        return self.function_name
