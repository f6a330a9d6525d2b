"""Distinct-value listings (/sets, /types, /rarities)."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from cards_api.routers.deps import get_card_service
from cards_api.services.card_service import CATALOG_FIELDS, CardService

router = APIRouter(tags=["catalog"])


@router.get("/sets")
def list_sets(svc: CardService = Depends(get_card_service)):
    return svc.distinct_values(CATALOG_FIELDS["sets"])


@router.get("/types")
def list_types(svc: CardService = Depends(get_card_service)):
    return svc.distinct_values(CATALOG_FIELDS["types"])


@router.get("/rarities")
def list_rarities(svc: CardService = Depends(get_card_service)):
    return svc.distinct_values(CATALOG_FIELDS["rarities"])
