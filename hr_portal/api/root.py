from fastapi import APIRouter

router = APIRouter()

@router.get("/")
def root():
    return {
        "name": "HR Portal Backend",
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
    }
