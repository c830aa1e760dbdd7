"""Public, read-only catalog endpoints."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from vuelatour.models.lead_models import Locale
from vuelatour.repositories.site.dependencies import get_db
from vuelatour.repositories.site.schemas.catalog_view_schema import CatalogCard, CatalogDetail
from vuelatour.repositories.site.schemas.site_schema import ContactInfoResponse
from vuelatour.services.catalog.catalog_service import CatalogService, get_catalog_service

catalog_router = APIRouter(prefix="/catalog", tags=["Catalog"])


@catalog_router.get("/destinations")
def list_destinations(
    locale: Locale = "es",
    db: Session = Depends(get_db),
    catalog: CatalogService = Depends(get_catalog_service),
) -> List[CatalogCard]:
    """Active destinations ordered by display order."""
    return catalog.list_destinations(db, locale)


@catalog_router.get("/destinations/{slug}")
def get_destination(
    slug: str,
    locale: Locale = "es",
    db: Session = Depends(get_db),
    catalog: CatalogService = Depends(get_catalog_service),
) -> CatalogDetail:
    detail = catalog.get_destination(db, slug, locale)
    if detail is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Destination not found")
    return detail


@catalog_router.get("/tours")
def list_tours(
    locale: Locale = "es",
    db: Session = Depends(get_db),
    catalog: CatalogService = Depends(get_catalog_service),
) -> List[CatalogCard]:
    """Active air tours ordered by display order."""
    return catalog.list_tours(db, locale)


@catalog_router.get("/tours/{slug}")
def get_tour(
    slug: str,
    locale: Locale = "es",
    db: Session = Depends(get_db),
    catalog: CatalogService = Depends(get_catalog_service),
) -> CatalogDetail:
    detail = catalog.get_tour(db, slug, locale)
    if detail is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tour not found")
    return detail


@catalog_router.get("/contact-info")
def get_contact_info(
    db: Session = Depends(get_db),
    catalog: CatalogService = Depends(get_catalog_service),
) -> ContactInfoResponse:
    info = catalog.get_contact_info(db)
    if info is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Contact info not set")
    return ContactInfoResponse.model_validate(info)
