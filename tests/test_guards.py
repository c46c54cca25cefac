import pytest

from recipebook.auth.deps import requires_role
from recipebook.auth.service import Principal
from recipebook.exceptions import Forbidden


def principal(*roles):
    return Principal(id=1, username="a@x.com", password_hash="h", authorities=roles)


def test_role_guard_passes_matching_role():
    guard = requires_role("ROLE_USER")
    p = principal("ROLE_USER")
    assert guard(p) is p


def test_role_guard_rejects_missing_role():
    guard = requires_role("ROLE_ADMIN")
    with pytest.raises(Forbidden):
        guard(principal("ROLE_USER"))
