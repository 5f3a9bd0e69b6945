from fastapi import APIRouter

from truthtable.utils import TableCache

router = APIRouter()


@router.get("/health")
def health_check():
    return {"status": "ok", "cached_tables": len(TableCache.cache)}


@router.get("/")
def root():
    return {"message": "Backend is up and running. Navigate to ./docs for Swagger contents"}
