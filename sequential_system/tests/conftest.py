import pytest

from plan_compiler.functions.registry import FunctionRegistry
from plan_compiler.functions.schemas import FunctionDescriptor, ParameterView


@pytest.fixture
def functions():
    reg = FunctionRegistry()

    @reg.register("Tell", plugin="Writer")
    def tell(input: str = ""):
        """Tell a story about the input."""
        return input

    @reg.register("Translate", plugin="Writer")
    def translate(input: str = "", language: str = "French", style=None):
        """Translate the input."""
        return input

    @reg.register("Y", plugin="X")
    def y():
        return ""

    reg.add(
        FunctionDescriptor(
            function_name="Summarize",
            description="Summarize text",
            parameters=[ParameterView(name="input", default_value="")],
        )
    )
    return reg
