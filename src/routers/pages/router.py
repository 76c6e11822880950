from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from src.guests.urls import RSVP_PAGE_URL
from src.views.renderer import ViewRenderer, get_view_renderer

router = APIRouter()


@router.get("/")
async def index(request: Request, render: ViewRenderer = Depends(get_view_renderer)) -> Response:
    return render(request, "index.html")


@router.get(RSVP_PAGE_URL)
async def rsvp_page(request: Request, render: ViewRenderer = Depends(get_view_renderer)) -> Response:
    """Page with the last name lookup form."""
    return render(request, "rsvp.html")


@router.get("/travel")
@router.get("/registry")
async def work_in_progress(
    request: Request, render: ViewRenderer = Depends(get_view_renderer)
) -> Response:
    return render(request, "wip.html")
