from fastapi import APIRouter, HTTPException

from plan_compiler.api.types import CompilePlanRequest
from plan_compiler.core.errors import FunctionNotFound, PlanParseError
from plan_compiler.functions.registry import FunctionRegistry, chain_resolvers, registry
from plan_compiler.planning.parser import compile_plan


"""
FastAPI routes for the plan compiler.
What it provides:
- Compile plan text endpoint
- List registered functions
- Health check

And, the main purpose:
Expose plan compilation over HTTP.
"""

router = APIRouter()

@router.get("/health")
async def api_health():
    return {"ok": True}

@router.get("/functions")
async def api_functions():
    return [d.model_dump() for d in registry.describe_all()]

@router.post("/plans/compile")
async def api_compile_plan(req: CompilePlanRequest):
    supplied = FunctionRegistry()
    for d in req.functions:
        supplied.add(d)
    resolve = chain_resolvers(supplied.resolve, registry.resolve)

    try:
        plan = compile_plan(req.plan_text, req.goal, resolve, allow_missing=req.allow_missing)
    except FunctionNotFound as e:
        raise HTTPException(
            404,
            {"error": "function_not_found", "plugin_name": e.plugin_name, "function_name": e.function_name},
        )
    except PlanParseError as e:
        raise HTTPException(422, {"error": type(e).__name__, "message": str(e)})

    return {"goal": req.goal, "plan": plan.model_dump()}
