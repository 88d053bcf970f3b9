# routers/equipments.py
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from config.database import get_db
from models.user import User
from schemas.common import ApiResult
from schemas.equipment import EquipmentIn, EquipmentOut
from services.equipment_service import EquipmentService
from services.pagination import PageRequest
from routers.common import check_ids_match, page_params, unwrap, unwrap_found, unwrap_page
from utils.dependencies import get_current_user, require_admin

router = APIRouter(prefix="/api/equipments", tags=["equipments"])


def get_service(db: Session = Depends(get_db)) -> EquipmentService:
    return EquipmentService(db)


# ============================================================
# Lists
# ============================================================
@router.get("/internal-equipment", response_model=ApiResult[EquipmentOut])
def internal_equipments(
    page: PageRequest = Depends(page_params),
    _: User = Depends(get_current_user),
    service: EquipmentService = Depends(get_service),
):
    return unwrap_page(service.get_internal_equipments(), page, EquipmentOut)


@router.get("/user-equipment", response_model=ApiResult[EquipmentOut])
def user_equipments(
    page: PageRequest = Depends(page_params),
    current: User = Depends(get_current_user),
    service: EquipmentService = Depends(get_service),
):
    return unwrap_page(service.get_user_equipments(current.id), page, EquipmentOut)


@router.get("/all-equipment", response_model=ApiResult[EquipmentOut])
def all_equipments(
    page: PageRequest = Depends(page_params),
    current: User = Depends(get_current_user),
    service: EquipmentService = Depends(get_service),
):
    return unwrap_page(service.get_all_equipments(current.id), page, EquipmentOut)


@router.get("/used-equipment", response_model=ApiResult[EquipmentOut])
def used_equipments(
    page: PageRequest = Depends(page_params),
    current: User = Depends(get_current_user),
    service: EquipmentService = Depends(get_service),
):
    return unwrap_page(service.get_used_equipments(current.id), page, EquipmentOut)


# ============================================================
# Internal equipment
# ============================================================
@router.get("/internal-equipment/by-name/{name}", response_model=EquipmentOut)
def internal_by_name(name: str, _: User = Depends(get_current_user), service: EquipmentService = Depends(get_service)):
    return unwrap_found(service.get_internal_by_name(name), "Equipment")


@router.get("/internal-equipment/{equipment_id}", response_model=EquipmentOut)
def internal_by_id(
    equipment_id: int, _: User = Depends(get_current_user), service: EquipmentService = Depends(get_service)
):
    return unwrap_found(service.get_internal_by_id(equipment_id), "Equipment")


@router.post("/internal-equipment", response_model=EquipmentOut, status_code=status.HTTP_201_CREATED)
def add_internal(body: EquipmentIn, _: User = Depends(require_admin), service: EquipmentService = Depends(get_service)):
    return unwrap(service.add_internal(body))


@router.put("/internal-equipment/{equipment_id}", response_model=EquipmentOut)
def update_internal(
    equipment_id: int,
    body: EquipmentIn,
    _: User = Depends(require_admin),
    service: EquipmentService = Depends(get_service),
):
    check_ids_match(equipment_id, body.id, "Equipment")
    return unwrap(service.update_internal(body.model_copy(update={"id": equipment_id})))


@router.delete("/internal-equipment/{equipment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_internal(
    equipment_id: int, _: User = Depends(require_admin), service: EquipmentService = Depends(get_service)
):
    unwrap(service.delete_internal(equipment_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================
# User equipment
# ============================================================
@router.get("/user-equipment/by-name/{name}", response_model=EquipmentOut)
def user_by_name(name: str, current: User = Depends(get_current_user), service: EquipmentService = Depends(get_service)):
    return unwrap_found(service.get_user_by_name(current.id, name), "Equipment")


@router.get("/user-equipment/{equipment_id}", response_model=EquipmentOut)
def user_by_id(
    equipment_id: int, current: User = Depends(get_current_user), service: EquipmentService = Depends(get_service)
):
    return unwrap_found(service.get_user_by_id(current.id, equipment_id), "Equipment")


@router.post("/user-equipment", response_model=EquipmentOut, status_code=status.HTTP_201_CREATED)
def add_user(body: EquipmentIn, current: User = Depends(get_current_user), service: EquipmentService = Depends(get_service)):
    return unwrap(service.add_user(current.id, body))


@router.put("/user-equipment/{equipment_id}", response_model=EquipmentOut)
def update_user(
    equipment_id: int,
    body: EquipmentIn,
    current: User = Depends(get_current_user),
    service: EquipmentService = Depends(get_service),
):
    check_ids_match(equipment_id, body.id, "Equipment")
    return unwrap(service.update_user(current.id, body.model_copy(update={"id": equipment_id})))


@router.delete("/user-equipment/{equipment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    equipment_id: int, current: User = Depends(get_current_user), service: EquipmentService = Depends(get_service)
):
    unwrap(service.delete_user(current.id, equipment_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================
# Any visible equipment
# ============================================================
@router.get("/by-name/{name}", response_model=EquipmentOut)
def equipment_by_name(name: str, current: User = Depends(get_current_user), service: EquipmentService = Depends(get_service)):
    return unwrap_found(service.get_by_name(current.id, name), "Equipment")


@router.get("/{equipment_id}", response_model=EquipmentOut)
def get_equipment(
    equipment_id: int, current: User = Depends(get_current_user), service: EquipmentService = Depends(get_service)
):
    return unwrap_found(service.get_by_id(current.id, equipment_id), "Equipment")
