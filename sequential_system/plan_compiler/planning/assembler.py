from typing import Iterable

from plan_compiler.planning.schemas import Plan, Step


def assemble_plan(goal: str, steps: Iterable[Step], result_outputs: Iterable[str]) -> Plan:
    # parameters stay empty until a later planning phase fills them
    return Plan(goal=goal, steps=tuple(steps), outputs=tuple(result_outputs))
