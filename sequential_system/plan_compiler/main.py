from fastapi import FastAPI
from plan_compiler.api.routes import router


app = FastAPI(title="Sequential Plan Compiler API", version="0.1.0")
app.include_router(router, prefix="/v1")
