"""
HTML pages served by the Prompt Enhancer.

Endpoints:
- GET /         - Browser client for POST /api/enhance
- GET /landing  - Landing page
- GET /about    - About page

Pages are purely presentational and hidden from the OpenAPI schema.
"""

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(include_in_schema=False)


@router.get("/", response_class=HTMLResponse)
async def enhancer_page(request: Request):
    return templates.TemplateResponse(
        request,
        "index.html",
        {"app_name": "AI Prompt Enhancer", "enhance_url": "/api/enhance"},
    )


@router.get("/landing", response_class=HTMLResponse)
async def landing_page(request: Request):
    return templates.TemplateResponse(request, "landing.html", {"about_url": "/about"})


@router.get("/about", response_class=HTMLResponse)
async def about_page(request: Request):
    return templates.TemplateResponse(request, "about.html")
