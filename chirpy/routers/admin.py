from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, PlainTextResponse

from chirpy.routers.dependencies import get_hit_counter

router = APIRouter(tags=["admin"])


def _templates(request: Request):
    tpl = getattr(getattr(request.app, "state", None), "templates", None)
    if tpl:
        return tpl
    raise RuntimeError("Templates nao configurados")


@router.get("/admin/metrics", response_class=HTMLResponse)
def metrics(request: Request):
    hits = get_hit_counter(request).value
    return _templates(request).TemplateResponse(request, "metrics.html", {"hits": hits})


@router.get("/api/reset", response_class=PlainTextResponse)
def reset_metrics(request: Request):
    get_hit_counter(request).reset()
    return PlainTextResponse("Counter reset")
