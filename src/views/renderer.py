from pathlib import Path
from typing import Any, Protocol

from fastapi import Request
from fastapi.responses import Response
from fastapi.templating import Jinja2Templates

from src.config.settings import settings

TEMPLATES_DIR = Path(__file__).parent / "templates"

GENERIC_ERROR_MESSAGE = "Something went wrong, try again later or get in touch with us directly."
ERROR_VIEW = "error.html"


class ViewRenderer(Protocol):
    """Protocol for rendering a named view with a data payload."""

    def __call__(
        self,
        request: Request,
        view: str,
        context: dict[str, Any] | None = None,
        status_code: int = 200,
        headers: dict[str, str] | None = None,
    ) -> Response:
        ...


class Jinja2ViewRenderer:
    """Default renderer backed by Jinja2 templates."""

    def __init__(self, directory: str | Path | None = None):
        self._templates = Jinja2Templates(directory=str(directory or TEMPLATES_DIR))

    def __call__(
        self,
        request: Request,
        view: str,
        context: dict[str, Any] | None = None,
        status_code: int = 200,
        headers: dict[str, str] | None = None,
    ) -> Response:
        return self._templates.TemplateResponse(
            request,
            view,
            context or {},
            status_code=status_code,
            headers=headers,
        )


_renderer = Jinja2ViewRenderer(settings.templates_dir or None)


def get_view_renderer() -> ViewRenderer:
    """Dependency to get the view renderer."""
    return _renderer


def render_error(
    render: ViewRenderer,
    request: Request,
    status_code: int,
    message: str = GENERIC_ERROR_MESSAGE,
) -> Response:
    return render(request, ERROR_VIEW, {"message": message}, status_code=status_code)
