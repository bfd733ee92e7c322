# routers/properties.py
"""
Property API routes: buildings, apartments, flats and lands.

Writes go through PropertyStore, which validates the merged record.
Deleting a property detaches its tenants; it never deletes them.
"""
from typing import Optional, List
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from database import get_session
from services.errors import StoreError
from services.property_store import PropertyStore
from services.statistics_service import get_property_statistics
from schemas.property import (
     PropertyKindEnum,
     BuildingCreate,
     BuildingUpdate,
     BuildingResponse,
     ApartmentCreate,
     ApartmentUpdate,
     ApartmentResponse,
     FlatCreate,
     FlatUpdate,
     FlatResponse,
     LandCreate,
     LandUpdate,
     LandResponse,
     PropertySearchResponse,
)
from schemas.statistics import PropertyStatistics
from .errors import http_error

router = APIRouter(prefix="/api", tags=["properties"])


# ---------------------------------------------------------------------------
# Buildings
# ---------------------------------------------------------------------------

@router.get("/buildings", response_model=List[BuildingResponse], summary="List buildings")
def list_buildings(db: Session = Depends(get_session)):
     """All buildings with their apartments, ordered by building code."""
     return PropertyStore(db).get_buildings()


@router.post(
     "/buildings",
     response_model=BuildingResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a building"
)
def create_building(building_data: BuildingCreate, db: Session = Depends(get_session)):
     """
     Create a new building.

     - **name**, **building_code**, **address**: required
     - **id**: optional client-supplied id
     """
     try:
          return PropertyStore(db).create_building(building_data.model_dump())
     except StoreError as exc:
          raise http_error(exc) from exc


@router.get("/buildings/{building_id}", response_model=BuildingResponse, summary="Get building by ID")
def get_building(building_id: str, db: Session = Depends(get_session)):
     building = PropertyStore(db).get_building_by_id(building_id)
     if not building:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail=f"Building with id \"{building_id}\" not found"
          )
     return building


@router.put("/buildings/{building_id}", response_model=BuildingResponse, summary="Update building")
def update_building(building_id: str, building_data: BuildingUpdate, db: Session = Depends(get_session)):
     """Only provided fields are updated."""
     try:
          return PropertyStore(db).update_building(building_id, building_data.model_dump(exclude_unset=True))
     except StoreError as exc:
          raise http_error(exc) from exc


@router.delete(
     "/buildings/{building_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete building"
)
def delete_building(building_id: str, db: Session = Depends(get_session)):
     """
     Delete a building and all of its apartments.

     Tenants of those apartments are detached, not deleted.
     """
     try:
          PropertyStore(db).delete_building(building_id)
     except StoreError as exc:
          raise http_error(exc) from exc
     return None


# ---------------------------------------------------------------------------
# Apartments
# ---------------------------------------------------------------------------

@router.get(
     "/buildings/{building_id}/apartments",
     response_model=List[ApartmentResponse],
     summary="List apartments of a building"
)
def list_apartments(building_id: str, db: Session = Depends(get_session)):
     store = PropertyStore(db)
     try:
          store.get_building(building_id)
     except StoreError as exc:
          raise http_error(exc) from exc
     return store.get_apartments_by_building_id(building_id)


@router.post(
     "/buildings/{building_id}/apartments",
     response_model=ApartmentResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create an apartment in a building"
)
def create_apartment(building_id: str, apartment_data: ApartmentCreate, db: Session = Depends(get_session)):
     try:
          return PropertyStore(db).create_apartment(building_id, apartment_data.model_dump())
     except StoreError as exc:
          raise http_error(exc) from exc


@router.get("/apartments/{apartment_id}", response_model=ApartmentResponse, summary="Get apartment by ID")
def get_apartment(apartment_id: str, db: Session = Depends(get_session)):
     try:
          return PropertyStore(db).get_apartment(apartment_id)
     except StoreError as exc:
          raise http_error(exc) from exc


@router.put("/apartments/{apartment_id}", response_model=ApartmentResponse, summary="Update apartment")
def update_apartment(apartment_id: str, apartment_data: ApartmentUpdate, db: Session = Depends(get_session)):
     """
     Update an apartment.

     Setting **is_occupied** here bypasses tenant sync; run
     `POST /api/occupancy/reconcile` to restore it from the tenants.
     """
     try:
          return PropertyStore(db).update_apartment(apartment_id, apartment_data.model_dump(exclude_unset=True))
     except StoreError as exc:
          raise http_error(exc) from exc


@router.delete(
     "/apartments/{apartment_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete apartment"
)
def delete_apartment(apartment_id: str, db: Session = Depends(get_session)):
     try:
          PropertyStore(db).delete_apartment(apartment_id)
     except StoreError as exc:
          raise http_error(exc) from exc
     return None


# ---------------------------------------------------------------------------
# Flats
# ---------------------------------------------------------------------------

@router.get("/flats", response_model=List[FlatResponse], summary="List flats")
def list_flats(db: Session = Depends(get_session)):
     return PropertyStore(db).get_flats()


@router.post(
     "/flats",
     response_model=FlatResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a flat"
)
def create_flat(flat_data: FlatCreate, db: Session = Depends(get_session)):
     try:
          return PropertyStore(db).create_flat(flat_data.model_dump())
     except StoreError as exc:
          raise http_error(exc) from exc


@router.get("/flats/{flat_id}", response_model=FlatResponse, summary="Get flat by ID")
def get_flat(flat_id: str, db: Session = Depends(get_session)):
     try:
          return PropertyStore(db).get_flat(flat_id)
     except StoreError as exc:
          raise http_error(exc) from exc


@router.put("/flats/{flat_id}", response_model=FlatResponse, summary="Update flat")
def update_flat(flat_id: str, flat_data: FlatUpdate, db: Session = Depends(get_session)):
     try:
          return PropertyStore(db).update_flat(flat_id, flat_data.model_dump(exclude_unset=True))
     except StoreError as exc:
          raise http_error(exc) from exc


@router.delete(
     "/flats/{flat_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete flat"
)
def delete_flat(flat_id: str, db: Session = Depends(get_session)):
     try:
          PropertyStore(db).delete_flat(flat_id)
     except StoreError as exc:
          raise http_error(exc) from exc
     return None


# ---------------------------------------------------------------------------
# Lands
# ---------------------------------------------------------------------------

@router.get("/lands", response_model=List[LandResponse], summary="List lands")
def list_lands(db: Session = Depends(get_session)):
     return PropertyStore(db).get_lands()


@router.post(
     "/lands",
     response_model=LandResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a land parcel"
)
def create_land(land_data: LandCreate, db: Session = Depends(get_session)):
     try:
          return PropertyStore(db).create_land(land_data.model_dump())
     except StoreError as exc:
          raise http_error(exc) from exc


@router.get("/lands/{land_id}", response_model=LandResponse, summary="Get land by ID")
def get_land(land_id: str, db: Session = Depends(get_session)):
     try:
          return PropertyStore(db).get_land(land_id)
     except StoreError as exc:
          raise http_error(exc) from exc


@router.put("/lands/{land_id}", response_model=LandResponse, summary="Update land")
def update_land(land_id: str, land_data: LandUpdate, db: Session = Depends(get_session)):
     try:
          return PropertyStore(db).update_land(land_id, land_data.model_dump(exclude_unset=True))
     except StoreError as exc:
          raise http_error(exc) from exc


@router.delete(
     "/lands/{land_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete land"
)
def delete_land(land_id: str, db: Session = Depends(get_session)):
     try:
          PropertyStore(db).delete_land(land_id)
     except StoreError as exc:
          raise http_error(exc) from exc
     return None


# ---------------------------------------------------------------------------
# Search and statistics
# ---------------------------------------------------------------------------

@router.get("/properties/search", response_model=PropertySearchResponse, summary="Search properties")
def search_properties(
     q: str = Query(..., min_length=1, description="Text to search for"),
     kind: Optional[PropertyKindEnum] = Query(None, description="Restrict to one property kind"),
     db: Session = Depends(get_session)
):
     """
     Case-insensitive search.

     - **buildings**: name, address, building code
     - **flats**: name, address, door number
     - **lands**: name, address, survey number
     """
     results = PropertyStore(db).search(q, kind.value if kind else None)
     return PropertySearchResponse(
          query=q,
          buildings=[BuildingResponse.model_validate(b) for b in results["buildings"]],
          flats=[FlatResponse.model_validate(f) for f in results["flats"]],
          lands=[LandResponse.model_validate(land) for land in results["lands"]],
          total=sum(len(hits) for hits in results.values()),
     )


@router.get("/properties/statistics", response_model=PropertyStatistics, summary="Occupancy statistics")
def property_statistics(db: Session = Depends(get_session)):
     return get_property_statistics(db)
