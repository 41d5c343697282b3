## FastAPI dependencies; everything comes from app.state set up in create_app()

from fastapi import Request

from callserver.config import Settings
from callserver.utils.daily import DailyRoomProvisioner


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_provisioner(request: Request) -> DailyRoomProvisioner:
    return request.app.state.provisioner
