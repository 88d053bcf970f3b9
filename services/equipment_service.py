# services/equipment_service.py
from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from models.equipment import Equipment
from repositories.equipment_repository import EquipmentRepository
from schemas.equipment import EquipmentIn, EquipmentOut
from services.base import ServiceResult, service_action
from services.catalog import CatalogService
from utils.errors import EntryNullError, ValidationError


def to_dto(equipment: Equipment) -> EquipmentOut:
    return EquipmentOut.model_validate(equipment)


class EquipmentService(CatalogService):
    entry = "Equipment"
    model_name = "equipment"
    owner_attr = "owned_by_user_id"

    def __init__(self, db: Session):
        super().__init__(db)
        self.repository = EquipmentRepository(db)

    def _build(self, equipment: Optional[EquipmentIn], owner_id: Optional[str]) -> Equipment:
        if equipment is None:
            raise EntryNullError(self.entry)
        if equipment.id:
            raise ValidationError(self.invalid_entry_id_while_adding(self.entry, "equipment"))
        self.check_unique_name(equipment.name)
        return Equipment(name=equipment.name, image=equipment.image, owned_by_user_id=owner_id)

    def _apply(self, entity: Equipment, equipment: EquipmentIn) -> EquipmentOut:
        self.check_unique_name(equipment.name, entity.id)
        updated = self.repository.update(entity, {"name": equipment.name, "image": equipment.image})
        return to_dto(updated)

    # ============================================================
    # Internal equipment
    # ============================================================
    @service_action("get", "internal equipment")
    def get_internal_equipments(self) -> ServiceResult[list[EquipmentOut]]:
        return ServiceResult.ok([to_dto(e) for e in self.repository.get_internal()])

    @service_action("get", "internal equipment")
    def get_internal_by_id(self, equipment_id: int) -> ServiceResult[EquipmentOut]:
        self.check_id(equipment_id)
        equipment = self.repository.get_by_id(equipment_id)
        if equipment is None or equipment.owned_by_user_id is not None:
            return ServiceResult.ok(None)
        return ServiceResult.ok(to_dto(equipment))

    @service_action("get", "internal equipment")
    def get_internal_by_name(self, name: str) -> ServiceResult[EquipmentOut]:
        self.check_name(name)
        equipment = self.repository.get_by_name(name)
        if equipment is None or equipment.owned_by_user_id is not None:
            return ServiceResult.ok(None)
        return ServiceResult.ok(to_dto(equipment))

    @service_action("add", "internal equipment")
    def add_internal(self, equipment: Optional[EquipmentIn]) -> ServiceResult[EquipmentOut]:
        entity = self._build(equipment, None)
        return ServiceResult.ok(to_dto(self.repository.add(entity)))

    @service_action("update", "internal equipment")
    def update_internal(self, equipment: Optional[EquipmentIn]) -> ServiceResult[EquipmentOut]:
        if equipment is None:
            raise EntryNullError(self.entry)
        entity = self.get_internal_entity(equipment.id or 0, "update")
        return ServiceResult.ok(self._apply(entity, equipment))

    @service_action("delete", "internal equipment")
    def delete_internal(self, equipment_id: int) -> ServiceResult[None]:
        self.get_internal_entity(equipment_id, "delete")
        self.repository.remove(equipment_id)
        return ServiceResult.ok()

    # ============================================================
    # User equipment
    # ============================================================
    @service_action("get", "user equipment")
    def get_user_equipments(self, user_id: str) -> ServiceResult[list[EquipmentOut]]:
        self.check_user_id(user_id)
        return ServiceResult.ok([to_dto(e) for e in self.repository.get_owned_by(user_id)])

    @service_action("get", "equipment")
    def get_all_equipments(self, user_id: str) -> ServiceResult[list[EquipmentOut]]:
        self.check_user_id(user_id)
        return ServiceResult.ok([to_dto(e) for e in self.repository.get_visible_to(user_id)])

    @service_action("get", "used equipment")
    def get_used_equipments(self, user_id: str) -> ServiceResult[list[EquipmentOut]]:
        self.check_user_id(user_id)
        return ServiceResult.ok([to_dto(e) for e in self.repository.get_used_by(user_id)])

    def _visible(self, user_id: str, equipment: Optional[Equipment]) -> ServiceResult[EquipmentOut]:
        if equipment is None:
            return ServiceResult.ok(None)
        if not self.is_visible_to(equipment, user_id):
            return ServiceResult.fail(self.user_not_have_permission("get", "equipment"))
        return ServiceResult.ok(to_dto(equipment))

    @service_action("get", "equipment")
    def get_by_id(self, user_id: str, equipment_id: int) -> ServiceResult[EquipmentOut]:
        """Internal equipment or the user's own."""
        self.check_user_id(user_id)
        self.check_id(equipment_id)
        return self._visible(user_id, self.repository.get_by_id(equipment_id))

    @service_action("get", "equipment")
    def get_by_name(self, user_id: str, name: str) -> ServiceResult[EquipmentOut]:
        self.check_user_id(user_id)
        self.check_name(name)
        return self._visible(user_id, self.repository.get_by_name(name))

    @service_action("get", "user equipment")
    def get_user_by_id(self, user_id: str, equipment_id: int) -> ServiceResult[EquipmentOut]:
        self.check_user_id(user_id)
        self.check_id(equipment_id)
        equipment = self.repository.get_by_id(equipment_id)
        if equipment is None:
            return ServiceResult.ok(None)
        if equipment.owned_by_user_id != user_id:
            return ServiceResult.fail(self.user_not_have_permission("get", "equipment"))
        return ServiceResult.ok(to_dto(equipment))

    @service_action("get", "user equipment")
    def get_user_by_name(self, user_id: str, name: str) -> ServiceResult[EquipmentOut]:
        self.check_user_id(user_id)
        self.check_name(name)
        equipment = self.repository.get_by_name(name)
        if equipment is None:
            return ServiceResult.ok(None)
        if equipment.owned_by_user_id != user_id:
            return ServiceResult.fail(self.user_not_have_permission("get", "equipment"))
        return ServiceResult.ok(to_dto(equipment))

    @service_action("add", "user equipment")
    def add_user(self, user_id: str, equipment: Optional[EquipmentIn]) -> ServiceResult[EquipmentOut]:
        self.check_user_id(user_id)
        entity = self._build(equipment, user_id)
        return ServiceResult.ok(to_dto(self.repository.add(entity)))

    @service_action("update", "user equipment")
    def update_user(self, user_id: str, equipment: Optional[EquipmentIn]) -> ServiceResult[EquipmentOut]:
        self.check_user_id(user_id)
        if equipment is None:
            raise EntryNullError(self.entry)
        entity = self.get_user_entity(user_id, equipment.id or 0, "update")
        return ServiceResult.ok(self._apply(entity, equipment))

    @service_action("delete", "user equipment")
    def delete_user(self, user_id: str, equipment_id: int) -> ServiceResult[None]:
        self.check_user_id(user_id)
        self.get_user_entity(user_id, equipment_id, "delete")
        self.repository.remove(equipment_id)
        return ServiceResult.ok()
