import pytest

from pinkstar.constants import UserRole
from pinkstar.types.context import CallerContext


@pytest.mark.unit
def test_anonymous_context_cannot_view_drafts() -> None:
    context = CallerContext.anonymous()

    assert context.user_id is None
    assert context.role == UserRole.USUARIO
    assert context.can_view_drafts is False


@pytest.mark.unit
@pytest.mark.parametrize(
    ("raw_role", "expected_role", "can_view_drafts"),
    [
        ("admin", UserRole.ADMIN, True),
        (" MOD ", UserRole.MOD, True),
        ("vip", UserRole.VIP, False),
        ("root", UserRole.USUARIO, False),
        (None, UserRole.USUARIO, False),
    ],
)
def test_from_raw_normalizes_role(raw_role, expected_role, can_view_drafts) -> None:
    context = CallerContext.from_raw("  user-1 ", raw_role)

    assert context.user_id == "user-1"
    assert context.role == expected_role
    assert context.can_view_drafts is can_view_drafts


@pytest.mark.unit
def test_from_raw_blank_user_id_is_anonymous() -> None:
    assert CallerContext.from_raw("   ", "admin").user_id is None
