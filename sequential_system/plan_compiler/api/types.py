"""
API request and response schemas.
What it defines:
- Compile request payload
- Function descriptors a caller can supply with the request

And, the main purpose:
Ensure structured communication between client and server.
"""


from typing import List, Optional

from pydantic import BaseModel, Field

from plan_compiler.functions.schemas import FunctionDescriptor

class CompilePlanRequest(BaseModel):
    goal: str
    plan_text: str = Field(..., description="Raw model output containing a <plan> block")
    allow_missing: Optional[bool] = Field(None, description="Defaults to ALLOW_MISSING_FUNCTIONS")
    functions: List[FunctionDescriptor] = Field(
        default_factory=list,
        description="Looked up before the application registry",
    )
