import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routers.admin import router as admin_router

# Routers
from routers.attempts import router as attempts_router
from routers.chemistry import router as chemistry_router
from routers.equations import router as equations_router
from routers.health import router as health_router
from routers.levels import router as levels_router

logger = logging.getLogger("adventure-lab")
logging.basicConfig(level=logging.INFO)

app = FastAPI(title="Adventure Lab – Games API")

# Allow calls from the local web client dev servers
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:8080",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*", "x-api-key", "x-admin-token"],
)


@app.get("/")
def health_root():
    return {"ok": True}


app.include_router(equations_router)  # /equations/...
app.include_router(levels_router)  # /levels/...
app.include_router(chemistry_router)  # /chemistry/...
app.include_router(attempts_router)  # /attempts/...
app.include_router(admin_router)  # /admin/...
app.include_router(health_router)  # /health/...
