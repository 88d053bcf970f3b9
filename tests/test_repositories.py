from models import Equipment, RoleEnum
from repositories import EquipmentRepository, UserRepository


def test_add_range_and_count(db, user):
    repository = EquipmentRepository(db)
    added = repository.add_range([Equipment(name="Barbell"), Equipment(name="Rings", owned_by_user_id=user.id)])

    assert all(e.id is not None for e in added)
    assert repository.count() == 2
    assert repository.count(Equipment.owned_by_user_id.is_(None)) == 1


def test_visibility_queries(db, user, other_user):
    repository = EquipmentRepository(db)
    repository.add_range([
        Equipment(name="Barbell"),
        Equipment(name="Rings", owned_by_user_id=user.id),
        Equipment(name="Sandbag", owned_by_user_id=other_user.id),
    ])

    assert [e.name for e in repository.get_internal()] == ["Barbell"]
    assert [e.name for e in repository.get_owned_by(user.id)] == ["Rings"]
    assert [e.name for e in repository.get_visible_to(user.id)] == ["Barbell", "Rings"]


def test_name_lookups_are_case_sensitive(db):
    repository = EquipmentRepository(db)
    repository.add(Equipment(name="Barbell"))

    assert repository.exists_by_name("Barbell")
    assert not repository.exists_by_name("barbell")


def test_remove_and_remove_range(db):
    repository = EquipmentRepository(db)
    first, second, third = repository.add_range([Equipment(name=n) for n in ("A", "B", "C")])

    assert repository.remove(first.id) is True
    assert repository.remove(first.id) is False

    repository.remove_range([second, third])
    assert repository.count() == 0


def test_get_by_ids_skips_missing(db):
    repository = EquipmentRepository(db)
    barbell = repository.add(Equipment(name="Barbell"))

    assert [e.name for e in repository.get_by_ids([barbell.id, 999])] == ["Barbell"]
    assert repository.get_by_ids([]) == []


def test_user_lookups(db, user, admin):
    repository = UserRepository(db)

    assert repository.get_by_email(user.email).id == user.id
    assert repository.user_exists_by_user_name("johndoe")
    assert not repository.user_exists("missing")
    assert [u.user_name for u in repository.get_by_role(RoleEnum.admin)] == ["admin"]
