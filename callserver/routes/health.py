import time

from fastapi import APIRouter

from callserver.schemas import PingResponse

router = APIRouter()


@router.get("/api/ping", response_model=PingResponse)
async def ping():
    return PingResponse(ts=int(time.time() * 1000))
