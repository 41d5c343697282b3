## POST /api/create-call
## Order: manager pass -> body validation -> provider config -> Daily call -> links.

import json
import logging

import pydantic
from fastapi import APIRouter, Depends, Request

from callserver.config import Settings
from callserver.deps import get_provisioner, get_settings
from callserver.errors import ValidationError
from callserver.schemas import CreateCallRequest, CreateCallResponse, MAX_DURATION_MINUTES
from callserver.utils.access import require_manager
from callserver.utils.daily import DailyRoomProvisioner
from callserver.utils.links import build_participant_links

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_DURATION = f"Invalid durationMinutes (1..{MAX_DURATION_MINUTES})"


async def _read_body(request: Request) -> dict:
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        data = json.loads(raw)
    except ValueError:
        raise ValidationError("Request body must be JSON")
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def parse_create_call(data: dict) -> CreateCallRequest:
    try:
        return CreateCallRequest.model_validate(data)
    except pydantic.ValidationError as e:
        fields = {str(err["loc"][0]) for err in e.errors() if err.get("loc")}
        if not fields or "durationMinutes" in fields:
            raise ValidationError(INVALID_DURATION)
        raise ValidationError(f"Invalid {', '.join(sorted(fields))}")


@router.post("/api/create-call", response_model=CreateCallResponse)
async def create_call(
    request: Request,
    settings: Settings = Depends(get_settings),
    provisioner: DailyRoomProvisioner = Depends(get_provisioner),
):
    require_manager(request, settings.manager_pass, header_first=True)

    body = parse_create_call(await _read_body(request))
    room = await provisioner.create_room(body.durationMinutes)
    links = build_participant_links(
        settings.daily_domain,
        room.name,
        client_name=body.client_name,
        model_name=body.model_name,
        manager_pass=settings.manager_pass,
    )
    logger.info("call ready room=%s exp=%s", room.name, room.exp)
    return CreateCallResponse(roomName=room.name, exp=room.exp, links=links)
