"""
Turns model-written plan text into a Plan.
What it does:
- Recovers a parseable <plan> fragment from noisy text
- Parses it into a node tree
- Compiles every <plan> element's children into steps
- Assembles the goal, steps and result outputs into a Plan

And, the main purpose:
Convert a goal plus plan text into an executable structure, without running it.
"""


from typing import Optional

from plan_compiler.core.config import settings
from plan_compiler.core.logging import get_logger
from plan_compiler.functions.registry import FunctionRegistry, FunctionResolver
from plan_compiler.parsing.fragment import SOLUTION_TAG, extract_fragment
from plan_compiler.parsing.tree import find_elements, parse_fragment
from plan_compiler.planning.assembler import assemble_plan
from plan_compiler.planning.schemas import Plan
from plan_compiler.planning.steps import compile_steps

log = get_logger("planning.parser")


def compile_plan(
    raw_text: str,
    goal: str,
    resolve: FunctionResolver,
    allow_missing: Optional[bool] = None,
) -> Plan:
    if allow_missing is None:
        allow_missing = settings.ALLOW_MISSING_FUNCTIONS

    fragment = extract_fragment(raw_text)
    root = parse_fragment(fragment)
    steps, result_outputs = compile_steps(find_elements(root, SOLUTION_TAG), resolve, allow_missing)

    plan = assemble_plan(goal, steps, result_outputs)
    log.info(f"Compiled plan: {len(plan.steps)} steps, outputs={plan.outputs}")
    return plan


def compile_plan_from_registry(
    raw_text: str,
    goal: str,
    registry: FunctionRegistry,
    allow_missing: Optional[bool] = None,
) -> Plan:
    return compile_plan(raw_text, goal, registry.resolve, allow_missing=allow_missing)
