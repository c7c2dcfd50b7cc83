"""HTML dashboard."""

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse

from ...core.errors import NotFoundError
from ...services.logs import WorkoutLogService, parse_window_days
from ...utils.formatting import format_duration, stats_for_display
from ..deps import get_log_service, get_templates

router = APIRouter(tags=["dashboard"])

RECENT_LOGS = 10


@router.get("/", response_class=HTMLResponse)
async def dashboard(
    request: Request,
    user: int | None = Query(default=None),
    days: str | None = Query(default=None),
    service: WorkoutLogService = Depends(get_log_service),
):
    """Stats and recent sessions for ``?user=<id>``."""
    templates = get_templates(request)
    window_days = parse_window_days(days)

    context = {
        "request": request,
        "user_id": user,
        "window_days": window_days,
        "stats": None,
        "logs": [],
        "error": None,
        "format_duration": format_duration,
    }

    if user is not None:
        try:
            stats = await service.get_stats(user, window_days)
            logs = await service.list_logs(user)
        except NotFoundError as e:
            context["error"] = str(e)
        else:
            context["stats"] = stats_for_display(stats)
            context["logs"] = logs[:RECENT_LOGS]

    return templates.TemplateResponse(request, "dashboard.html", context)
