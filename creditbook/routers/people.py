from __future__ import annotations

from fastapi import APIRouter, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from creditbook.services.ledger_display import (
    DELTA_CHOICES,
    TIER_CHOICES,
    person_card,
    person_detail,
)
from creditbook.services.ledger_service import LedgerService, ValidationError

router = APIRouter(prefix="", tags=["people"])


def _get_ledger(request: Request) -> LedgerService:
    svc = getattr(getattr(request.app, "state", None), "ledger", None)
    if not svc:
        raise RuntimeError("LedgerService nao configurado")
    return svc


def _get_templates(request: Request) -> Jinja2Templates:
    tpl = getattr(getattr(request.app, "state", None), "templates", None)
    if tpl:
        return tpl
    raise RuntimeError("Templates nao configurados")


def _render_list(request: Request, error: str = "", status_code: int = 200) -> HTMLResponse:
    ledger = _get_ledger(request)
    cards = [person_card(ledger, p) for p in ledger.ranked_active_people()]
    return _get_templates(request).TemplateResponse(
        request,
        "people.html",
        {"people": cards, "tiers": TIER_CHOICES, "error": error},
        status_code=status_code,
    )


def _render_detail(request: Request, person_id: int, error: str = "", status_code: int = 200) -> HTMLResponse:
    ledger = _get_ledger(request)
    person = ledger.get_person(person_id)
    if not person:
        raise HTTPException(404, "Pessoa nao encontrada")
    return _get_templates(request).TemplateResponse(
        request,
        "detail.html",
        {
            "person": person_detail(ledger, person),
            "deltas": DELTA_CHOICES,
            "tiers": TIER_CHOICES,
            "error": error,
        },
        status_code=status_code,
    )


@router.get("/", response_class=HTMLResponse)
def people_list(request: Request):
    return _render_list(request)


@router.post("/people")
def people_create(request: Request, name: str = Form(""), tier: str = Form(""), base: str = Form("")):
    ledger = _get_ledger(request)
    try:
        ledger.add_person(name, tier, base)
    except ValidationError as exc:
        return _render_list(request, error=exc.message, status_code=400)
    return RedirectResponse("/", status_code=303)


@router.get("/people/{person_id}", response_class=HTMLResponse)
def people_detail(person_id: int, request: Request):
    return _render_detail(request, person_id)


@router.post("/people/{person_id}/events")
def people_log_event(person_id: int, request: Request, delta: str = Form(""), note: str = Form("")):
    ledger = _get_ledger(request)
    try:
        event = ledger.log_event(person_id, delta, note)
    except ValidationError as exc:
        return _render_detail(request, person_id, error=exc.message, status_code=400)
    if not event:
        return RedirectResponse("/", status_code=303)
    return RedirectResponse(f"/people/{person_id}", status_code=303)


@router.post("/people/{person_id}/edit")
def people_edit(
    person_id: int,
    request: Request,
    name: str = Form(""),
    tier: str = Form(""),
    base: str = Form(""),
):
    ledger = _get_ledger(request)
    person = ledger.edit_person(person_id, {"name": name, "tier": tier, "baseCredit": base})
    if not person:
        return RedirectResponse("/", status_code=303)
    return RedirectResponse(f"/people/{person_id}", status_code=303)


@router.post("/people/{person_id}/deactivate")
def people_deactivate(person_id: int, request: Request):
    _get_ledger(request).deactivate_person(person_id)
    return RedirectResponse("/", status_code=303)
