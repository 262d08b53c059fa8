"""
Compiles the children of <plan> elements into steps.
What it does:
- Skips text and comment nodes
- Picks up elements named function.<plugin>.<function> or function.<function>
- Resolves each reference through the supplied resolver
- Seeds step inputs from parameter defaults, then applies attributes
- Routes setContextVariable / appendToResult into step and plan outputs
- Emits a placeholder step (or fails) when a function cannot be resolved

And, the main purpose:
Turn recognized markup nodes into flat, ordered steps.
"""


from functools import reduce
from typing import Iterable, List, Optional, Tuple

from plan_compiler.core.errors import FunctionNotFound
from plan_compiler.core.logging import get_logger
from plan_compiler.functions.registry import FunctionResolver
from plan_compiler.functions.schemas import FunctionDescriptor
from plan_compiler.orchestration.variables import VariableBag
from plan_compiler.parsing.tree import ElementNode, Node
from plan_compiler.planning.schemas import PlaceholderStep, ResolvedStep, Step

log = get_logger("planning.steps")

FUNCTION_TAG = "function."
SET_CONTEXT_VARIABLE_TAG = "setContextVariable"
APPEND_TO_RESULT_TAG = "appendToResult"

Compiled = Tuple[Tuple[Step, ...], Tuple[str, ...]]


def split_function_name(name: str) -> Tuple[str, str]:
    """'Writer.Tell' -> ('Writer', 'Tell'); 'Tell' -> ('', 'Tell')."""
    plugin, sep, function = name.partition(".")
    if not sep:
        return "", name
    return plugin, function


def _function_reference(tag: str) -> Optional[str]:
    if tag[:len(FUNCTION_TAG)].lower() != FUNCTION_TAG:
        return None
    return tag[len(FUNCTION_TAG):]


def _bind(function: FunctionDescriptor, attributes: Iterable[Tuple[str, str]]) -> Tuple[ResolvedStep, List[str]]:
    inputs = VariableBag()
    for p in function.parameters:
        inputs.set(p.name, p.default_value)

    outputs: List[str] = []
    results: List[str] = []
    for name, value in attributes:
        lowered = name.lower()
        if lowered == SET_CONTEXT_VARIABLE_TAG.lower():
            outputs.append(value)
        elif lowered == APPEND_TO_RESULT_TAG.lower():
            outputs.append(value)
            results.append(value)
        else:
            inputs[name] = value

    return ResolvedStep(function=function, inputs=inputs, outputs=tuple(outputs)), results


def _compile_node(node: Node, resolve: FunctionResolver, allow_missing: bool) -> Optional[Tuple[Step, List[str]]]:
    if not isinstance(node, ElementNode):
        return None

    reference = _function_reference(node.tag)
    if reference is None:
        log.debug(f"Ignoring <{node.tag}>: not a function step")
        return None

    plugin_name, function_name = split_function_name(reference)
    if not function_name:
        log.debug(f"Ignoring <{node.tag}>: empty function name")
        return None

    function = resolve(plugin_name, function_name)
    if function is not None:
        return _bind(function, node.attributes)

    if allow_missing:
        log.warning(f"Function '{reference}' not found; adding placeholder step")
        return PlaceholderStep(name=reference), []

    raise FunctionNotFound(plugin_name, function_name)


def compile_steps(
    solution_nodes: Iterable[ElementNode],
    resolve: FunctionResolver,
    allow_missing: bool = False,
) -> Compiled:
    """
    Fold every child of every solution element, in document order, into
    (steps, result_outputs).
    """
    def fold(acc: Compiled, node: Node) -> Compiled:
        compiled = _compile_node(node, resolve, allow_missing)
        if compiled is None:
            return acc
        step, results = compiled
        steps, result_outputs = acc
        return steps + (step,), result_outputs + tuple(results)

    children = (child for solution in solution_nodes for child in solution.children)
    return reduce(fold, children, ((), ()))
