from fastapi import APIRouter

from chacara.api.v1.endpoints import advice, logs, meta, tasks, views

api_router = APIRouter()

api_router.include_router(tasks.router)
api_router.include_router(views.router)
api_router.include_router(logs.router)
api_router.include_router(advice.router)
api_router.include_router(meta.router)
