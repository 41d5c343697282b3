from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from jinja2 import Environment, FileSystemLoader, select_autoescape
import os

from callserver.config import Settings
from callserver.deps import get_settings
from callserver.i18n.messages import section
from callserver.schemas import MAX_DURATION_MINUTES
from callserver.utils.access import is_authorized, presented_pass

router = APIRouter()

TEMPLATES_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'templates'))
templates = Environment(
    loader=FileSystemLoader(TEMPLATES_DIR),
    autoescape=select_autoescape(['html', 'xml'])
)


@router.get("/manager", response_class=HTMLResponse)
async def manager_form(request: Request, lang: str = "en", settings: Settings = Depends(get_settings)):
    if not is_authorized(presented_pass(request), settings.manager_pass):
        tmpl = templates.get_template("unauthorized.html")
        return HTMLResponse(tmpl.render(lang=lang, ui=section("unauthorized", lang)), status_code=401)

    tmpl = templates.get_template("manager.html")
    html = tmpl.render(
        lang=lang,
        ui=section("manager", lang),
        manager_pass=settings.manager_pass,
        max_duration=MAX_DURATION_MINUTES,
    )
    return HTMLResponse(html)
