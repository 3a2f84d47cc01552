import pytest

from hr_portal.core.directory import Directory
from hr_portal.core.errors import PermissionDenied
from hr_portal.core.visibility import assert_can_view_full, can_view_full, project_user
from hr_portal.models.enums import UserRole
from hr_portal.schemas.user import UserFullOut, UserPublicOut


def test_employee_cannot_see_other_users_private_data(db_session):
    directory = Directory(db_session)
    employees = [u for u in directory.list_users() if u.role == UserRole.EMPLOYEE]
    for viewer in employees:
        for subject in directory.list_users():
            if subject.id == viewer.id:
                continue
            assert can_view_full(viewer, subject) is False
            out = project_user(viewer, subject)
            assert type(out) is UserPublicOut
            assert "salary" not in out.model_dump()
            assert "documents" not in out.model_dump()


def test_self_and_managers_see_everything(db_session):
    directory = Directory(db_session)
    users = directory.list_users()
    for viewer in users:
        for subject in users:
            if viewer.id == subject.id or viewer.role == UserRole.MANAGER:
                assert can_view_full(viewer, subject) is True
                assert type(project_user(viewer, subject)) is UserFullOut


def test_manager_sees_other_teams_compensation(db_session):
    directory = Directory(db_session)
    denis = directory.find_by_id(4)   # backend manager
    ivan = directory.find_by_id(1)    # frontend employee

    out = project_user(denis, ivan)
    assert out.salary == 1200
    assert out.bonus == 200
    assert out.total_compensation == 1400
    assert [d.name for d in out.documents] == ["Passport.pdf"]


def test_public_projection_keeps_contact_fields(db_session):
    directory = Directory(db_session)
    alex = directory.find_by_id(3)
    daler = directory.find_by_id(2)

    out = project_user(alex, daler)
    assert out.email == "daler@zinda.ai"
    assert out.phone == "+998901234568"
    assert out.team == "frontend"
    assert out.role == UserRole.MANAGER
    assert out.social.telegram == "@daler_alyamov"


def test_assert_can_view_full(db_session):
    directory = Directory(db_session)
    ivan = directory.find_by_id(1)
    alex = directory.find_by_id(3)

    assert_can_view_full(ivan, ivan)
    with pytest.raises(PermissionDenied):
        assert_can_view_full(ivan, alex)
