"""Tests for smartparenting/admin/roster.py - fixed administrator roster."""

import dataclasses

import pytest

from smartparenting.admin.roster import AdminRecord, AdminRoster, build_admin_roster
from smartparenting.core.settings import AdminAccountConfig


def _admin(email: str = "admin@smartparenting.com", admin_id: str = "admin_001"):
    return AdminRecord(id=admin_id, name="Admin", email=email, password_hash="hash")


def test_is_admin_email_exact_match():
    roster = AdminRoster([_admin()])

    assert roster.is_admin_email("admin@smartparenting.com") is True
    assert roster.is_admin_email("Admin@smartparenting.com") is False
    assert roster.is_admin_email(" admin@smartparenting.com") is False
    assert roster.is_admin_email("user@smartparenting.com") is False


@pytest.mark.parametrize("email", [None, "", 42, ["admin@smartparenting.com"]])
def test_is_admin_email_blank_or_not_text(email):
    assert AdminRoster([_admin()]).is_admin_email(email) is False


def test_find_admin():
    admin = _admin()
    roster = AdminRoster([admin])

    assert roster.find_admin("admin@smartparenting.com") is admin
    assert roster.find_admin("other@x.com") is None
    assert roster.find_admin(None) is None


def test_empty_roster():
    roster = AdminRoster()

    assert len(roster) == 0
    assert roster.is_admin_email("admin@smartparenting.com") is False


def test_multiple_admins():
    roster = AdminRoster([_admin(), _admin("ops@smartparenting.com", "admin_002")])

    assert len(roster) == 2
    assert [a.id for a in roster] == ["admin_001", "admin_002"]
    assert roster.find_admin("ops@smartparenting.com").id == "admin_002"


def test_duplicate_emails_rejected():
    with pytest.raises(ValueError, match="duplicate admin email"):
        AdminRoster([_admin(), _admin(admin_id="admin_002")])


def test_admin_record_is_immutable_with_fixed_state():
    admin = _admin()

    assert admin.role == "admin"
    assert admin.is_active is True
    assert admin.is_verified is True
    assert admin.is_blocked is False
    with pytest.raises(dataclasses.FrozenInstanceError):
        admin.is_blocked = True  # type: ignore[misc]


def test_roster_ignores_later_changes_to_source_list():
    admins = [_admin()]
    roster = AdminRoster(admins)

    admins.append(_admin("late@x.com", "admin_009"))

    assert roster.is_admin_email("late@x.com") is False


def test_build_admin_roster_hashes_plaintext_password(hasher):
    accounts = [
        AdminAccountConfig(
            id="admin_001", name="Admin", email="a@sp.com", password="admin123"
        )
    ]

    roster = build_admin_roster(accounts, hasher)

    admin = roster.find_admin("a@sp.com")
    assert admin.password_hash != "admin123"
    assert hasher.verify("admin123", admin.password_hash)


def test_build_admin_roster_keeps_configured_hash(hasher):
    password_hash = hasher.hash("s3cret!")
    accounts = [
        AdminAccountConfig(
            id="admin_001", name="Admin", email="a@sp.com", password_hash=password_hash
        )
    ]

    roster = build_admin_roster(accounts, hasher)

    assert roster.find_admin("a@sp.com").password_hash == password_hash


def test_admin_account_needs_a_secret():
    with pytest.raises(ValueError):
        AdminAccountConfig(id="admin_001", name="Admin", email="a@sp.com")
