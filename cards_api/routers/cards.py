from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from cards_api.routers.deps import get_card_service, require_identity
from cards_api.services.auth_service import Identity
from cards_api.services.card_service import CardService

router = APIRouter(prefix="/cards", tags=["cards"])


@router.get("")
def list_cards(request: Request, svc: CardService = Depends(get_card_service)):
    filters: dict[str, str | list[str]] = {}
    for key in request.query_params.keys():
        values = request.query_params.getlist(key)
        filters[key] = values[0] if len(values) == 1 else values
    return svc.list_cards(filters)


@router.get("/count")
def count_cards(svc: CardService = Depends(get_card_service)):
    return {"count": svc.count()}


@router.get("/random")
def random_card(svc: CardService = Depends(get_card_service)):
    return svc.random_card()


@router.post("/create")
def create_card(
    payload: dict,
    svc: CardService = Depends(get_card_service),
    _user: Identity = Depends(require_identity),
):
    card = svc.create_card(payload)
    return {"successMessage": "Card created successfully", "createdCard": card}


@router.put("/{card_id}")
def update_card(
    card_id: str,
    payload: dict,
    svc: CardService = Depends(get_card_service),
    _user: Identity = Depends(require_identity),
):
    card = svc.update_card(card_id, payload)
    return {"successMessage": "Card updated", "updatedCard": card}


@router.delete("/{card_id}")
def delete_card(
    card_id: str,
    svc: CardService = Depends(get_card_service),
    _user: Identity = Depends(require_identity),
):
    card = svc.delete_card(card_id)
    return {"successMessage": "Card deleted", "deletedCard": card}
