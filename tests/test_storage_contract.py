# tests/test_storage_contract.py
"""
Storage behaviour that every backend must share.

Each test runs against the in-memory reference store and the SQL store on an
in-memory SQLite database.
"""

import pytest

from conectidade import schemas
from conectidade.database import make_engine
from conectidade.errors import UsernameTakenError, ValidationError
from conectidade.storage import MemStorage
from conectidade.storage.sql import SqlStorage

pytestmark = pytest.mark.anyio


@pytest.fixture(params=["memory", "sql"])
def store(request):
    if request.param == "memory":
        return MemStorage()
    return SqlStorage(make_engine("sqlite://"))


async def _user(store, username: str, user_type: str = "learn") -> schemas.User:
    return await store.create_user(
        schemas.InsertUser(name=username.title(), username=username, password="pw", user_type=user_type)
    )


# ======================
# USERS
# ======================

async def test_create_user_assigns_increasing_ids(store):
    first = await _user(store, "ana")
    second = await _user(store, "bruno")

    assert first.id >= 1
    assert second.id > first.id
    assert await store.get_user(first.id) == first
    assert await store.get_user(second.id) == second


async def test_get_user_by_username(store):
    created = await _user(store, "carla", "both")

    found = await store.get_user_by_username("carla")
    assert found == created
    assert found.password == "pw"
    assert await store.get_user_by_username("nobody") is None
    assert await store.get_user(9999) is None


async def test_duplicate_username_is_rejected(store):
    await _user(store, "dani")

    with pytest.raises(UsernameTakenError):
        await _user(store, "dani", "teach")


# ======================
# SKILLS
# ======================

async def test_seeded_skills_and_category_filter(store):
    skills = await store.get_skills()
    assert len(skills) == 7

    programming = await store.get_skills_by_category("Programação")
    assert [skill.name for skill in programming] == ["HTML/CSS", "JavaScript", "React"]


async def test_created_skill_shows_up_only_in_its_category(store):
    skill = await store.create_skill(
        schemas.InsertSkill(name="Python", category="Programação", description="Linguagem")
    )

    assert await store.get_skill(skill.id) == skill
    assert skill in await store.get_skills_by_category("Programação")
    assert skill not in await store.get_skills_by_category("Culinária")
    assert await store.get_skills_by_category("Inexistente") == []


# ======================
# USER SKILLS
# ======================

async def test_add_user_skill_is_an_upsert(store):
    user = await _user(store, "eva")
    skill = (await store.get_skills())[0]

    await store.add_user_skill(
        schemas.InsertUserSkill(user_id=user.id, skill_id=skill.id, is_learning=True)
    )
    second = await store.add_user_skill(
        schemas.InsertUserSkill(user_id=user.id, skill_id=skill.id, is_teaching=True, level="advanced")
    )

    rows = await store.get_user_skills(user.id)
    assert len(rows) == 1
    assert rows[0].is_teaching is True
    assert rows[0].is_learning is False
    assert rows[0].level == "advanced"
    assert rows[0].skill == skill
    assert second.level == "advanced"


async def test_get_user_skills_only_returns_own_rows(store):
    eva = await _user(store, "eva")
    other = await _user(store, "fabio")
    skills = await store.get_skills()

    await store.add_user_skill(schemas.InsertUserSkill(user_id=eva.id, skill_id=skills[0].id))
    await store.add_user_skill(schemas.InsertUserSkill(user_id=eva.id, skill_id=skills[1].id))
    await store.add_user_skill(schemas.InsertUserSkill(user_id=other.id, skill_id=skills[2].id))

    mine = await store.get_user_skills(eva.id)
    assert sorted(row.skill_id for row in mine) == [skills[0].id, skills[1].id]
    assert all(row.user_id == eva.id for row in mine)


async def test_update_user_skill_applies_only_given_fields(store):
    user = await _user(store, "gil")
    skill = (await store.get_skills())[3]
    await store.add_user_skill(
        schemas.InsertUserSkill(user_id=user.id, skill_id=skill.id, is_learning=True)
    )

    updated = await store.update_user_skill(
        user.id, skill.id, schemas.UserSkillUpdate(level="intermediate")
    )

    assert updated.level == "intermediate"
    assert updated.is_learning is True
    assert updated.user_id == user.id
    assert updated.skill_id == skill.id


async def test_update_missing_user_skill_returns_none(store):
    user = await _user(store, "hugo")

    assert await store.update_user_skill(
        user.id, 1, schemas.UserSkillUpdate(is_teaching=True)
    ) is None


async def test_remove_user_skill_is_idempotent(store):
    user = await _user(store, "iris")
    skill = (await store.get_skills())[0]
    await store.add_user_skill(schemas.InsertUserSkill(user_id=user.id, skill_id=skill.id))

    await store.remove_user_skill(user.id, 9999)
    assert len(await store.get_user_skills(user.id)) == 1

    await store.remove_user_skill(user.id, skill.id)
    await store.remove_user_skill(user.id, skill.id)
    assert await store.get_user_skills(user.id) == []


# ======================
# CONNECTIONS
# ======================

async def test_create_connection_always_starts_pending(store):
    teacher = await _user(store, "joana", "teach")
    student = await _user(store, "kai", "learn")
    data = schemas.parse_payload(
        schemas.InsertConnection,
        {"teacherId": teacher.id, "studentId": student.id, "status": "accepted", "message": "Oi!"},
    )

    connection = await store.create_connection(data)

    assert connection.status == "pending"
    assert connection.message == "Oi!"
    assert connection.created_at is not None
    assert (await store.get_connection(connection.id)).status == "pending"


async def test_get_connections_filters_by_role_and_joins_other_party(store):
    teacher = await _user(store, "lia", "teach")
    student = await _user(store, "mario", "learn")
    bystander = await _user(store, "nina", "both")
    await store.create_connection(
        schemas.InsertConnection(teacher_id=teacher.id, student_id=student.id)
    )
    await store.create_connection(
        schemas.InsertConnection(teacher_id=bystander.id, student_id=teacher.id)
    )

    as_teacher = await store.get_connections(teacher.id, "teacher")
    assert [row.student_id for row in as_teacher] == [student.id]
    assert as_teacher[0].user.id == student.id

    as_student = await store.get_connections(teacher.id, "student")
    assert [row.teacher_id for row in as_student] == [bystander.id]
    assert as_student[0].user.id == bystander.id

    assert await store.get_connections(student.id, "teacher") == []


async def test_teacher_accepts_student_request(store):
    teacher = await _user(store, "otavio", "teach")
    student = await _user(store, "paula", "learn")
    await store.create_connection(
        schemas.InsertConnection(teacher_id=teacher.id, student_id=student.id)
    )

    pending = await store.get_connections(teacher.id, "teacher")
    assert len(pending) == 1
    assert pending[0].status == "pending"
    assert pending[0].user.username == "paula"

    accepted = await store.update_connection_status(pending[0].id, "accepted")
    assert accepted.status == "accepted"

    again = await store.update_connection_status(pending[0].id, "accepted")
    assert again.status == "accepted"

    after = await store.get_connections(teacher.id, "teacher")
    assert after[0].status == "accepted"


@pytest.mark.parametrize("bad_status", ["pending", "done", ""])
async def test_update_connection_status_rejects_other_values(store, bad_status):
    teacher = await _user(store, "quim", "teach")
    student = await _user(store, "rita", "learn")
    connection = await store.create_connection(
        schemas.InsertConnection(teacher_id=teacher.id, student_id=student.id)
    )

    with pytest.raises(ValidationError):
        await store.update_connection_status(connection.id, bad_status)
    assert (await store.get_connection(connection.id)).status == "pending"


async def test_decided_connection_cannot_flip(store):
    teacher = await _user(store, "sara", "teach")
    student = await _user(store, "tiago", "learn")
    connection = await store.create_connection(
        schemas.InsertConnection(teacher_id=teacher.id, student_id=student.id)
    )
    await store.update_connection_status(connection.id, "rejected")

    with pytest.raises(ValidationError):
        await store.update_connection_status(connection.id, "accepted")
    assert (await store.get_connection(connection.id)).status == "rejected"


async def test_update_status_of_missing_connection_returns_none(store):
    assert await store.update_connection_status(404, "accepted") is None
    assert await store.get_connection(404) is None


# ======================
# CATEGORIES
# ======================

async def test_popular_categories_are_first_n_in_creation_order(store):
    categories = await store.get_categories()
    assert len(categories) == 8

    popular = await store.get_popular_categories(3)
    assert [c.name for c in popular] == ["Programação", "Idiomas", "Música"]
    assert len(await store.get_popular_categories()) == 5


async def test_create_and_get_category(store):
    category = await store.create_category(
        schemas.InsertCategory(name="Fotografia", icon_name="camera-line")
    )

    assert await store.get_category(category.id) == category
    assert (await store.get_categories())[-1] == category
    assert await store.get_category(9999) is None
