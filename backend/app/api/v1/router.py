from fastapi import APIRouter
from app.api.v1.endpoints.progressions import router as progressions_router

router = APIRouter(prefix="/v1")
router.include_router(progressions_router, tags=["progressions"])
