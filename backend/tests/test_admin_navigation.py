"""
Tests for the admin section registry and the section resolver.
"""
import pytest

from chapel.admin.navigation import active_section_id, available_sections
from chapel.admin.sections import ADMIN_SECTIONS, Section, get_section
from chapel.auth.evaluator import can_access
from chapel.auth.permissions import Permission
from chapel.auth.roles import AdminRole, permissions_for


def _ids(sections):
    return [section.id for section in sections]


class TestSectionRegistry:
    def test_registry_order(self):
        """Menu order is part of the product definition."""
        assert _ids(ADMIN_SECTIONS) == [
            "overview",
            "content",
            "topics-series",
            "users",
            "analytics",
            "notifications",
            "carousel",
        ]

    def test_section_ids_are_unique(self):
        ids = _ids(ADMIN_SECTIONS)
        assert len(ids) == len(set(ids))

    def test_topics_series_requires_both_create_permissions(self):
        section = get_section("topics-series")
        assert section is not None
        assert section.title == "Topics & Series"
        assert section.required_permissions == {"topics.create", "series.create"}

    def test_get_section_unknown_returns_none(self):
        assert get_section("media") is None
        assert get_section("") is None

    def test_default_route_uses_prefix(self):
        section = get_section("users")
        assert section is not None
        assert section.route_path() == "/admin/users"
        assert section.route_path("/console/") == "/console/users"

    def test_explicit_route_wins(self):
        section = Section(id="help", title="Help", description="", icon="help", route="/support")
        assert section.route_path("/admin") == "/support"

    def test_sections_are_immutable(self):
        section = ADMIN_SECTIONS[0]
        with pytest.raises(AttributeError):
            section.title = "Changed"  # type: ignore[misc]


class TestAvailableSections:
    def test_super_admin_sees_everything(self):
        assert available_sections(AdminRole.SUPER_ADMIN) == list(ADMIN_SECTIONS)

    def test_content_manager_sections(self):
        assert _ids(available_sections(AdminRole.CONTENT_MANAGER)) == [
            "overview",
            "content",
            "topics-series",
            "analytics",
            "carousel",
        ]

    def test_moderator_sections(self):
        """Moderators see overview, users, analytics and notifications only."""
        titles = [section.title for section in available_sections(AdminRole.MODERATOR)]
        assert titles == ["Overview", "User Management", "Analytics", "Notifications"]
        assert "Topics & Series" not in titles
        assert "Content Management" not in titles
        assert "Carousel Management" not in titles

    @pytest.mark.parametrize("role", ["member", "", "admin", None, 3])
    def test_unknown_role_gets_no_sections(self, role):
        assert available_sections(role) == []
        assert permissions_for(role) == frozenset()

    @pytest.mark.parametrize("role", list(AdminRole))
    def test_result_is_ordered_filtered_subsequence(self, role):
        result = available_sections(role)
        expected = [s for s in ADMIN_SECTIONS if can_access(role, s.required_permissions)]
        assert result == expected

    @pytest.mark.parametrize("role", list(AdminRole))
    def test_idempotent(self, role):
        assert available_sections(role) == available_sections(role)

    def test_fresh_list_each_call(self):
        first = available_sections(AdminRole.MODERATOR)
        first.clear()
        assert available_sections(AdminRole.MODERATOR) != []

    def test_monotonic_in_grants(self):
        """A role with a superset of grants sees a superset of sections."""
        for stronger in AdminRole:
            for weaker in AdminRole:
                if not permissions_for(weaker) <= permissions_for(stronger):
                    continue
                strong_ids = _ids(available_sections(stronger))
                weak_ids = _ids(available_sections(weaker))
                assert set(weak_ids) <= set(strong_ids)
                assert [i for i in strong_ids if i in weak_ids] == weak_ids

    def test_public_section_is_visible_to_every_known_role(self):
        public = Section(id="help", title="Help", description="Get help", icon="help")
        sections = (public, *ADMIN_SECTIONS)
        for role in AdminRole:
            assert available_sections(role, sections)[0] is public
        assert available_sections("member", sections) == []

    def test_injected_tables(self):
        grants = {"editor": frozenset({Permission.USERS_VIEW})}
        assert _ids(available_sections("editor", ADMIN_SECTIONS, grants)) == ["users"]
        assert available_sections(AdminRole.SUPER_ADMIN, ADMIN_SECTIONS, grants) == []


class TestActiveSection:
    def test_admin_root_highlights_overview(self):
        assert active_section_id("/admin", ADMIN_SECTIONS) == "overview"
        assert active_section_id("/admin/", ADMIN_SECTIONS) == "overview"

    def test_admin_root_without_overview(self):
        sections = available_sections(AdminRole.SUPER_ADMIN)[1:]
        assert active_section_id("/admin", sections) is None

    def test_exact_and_nested_routes(self):
        assert active_section_id("/admin/users", ADMIN_SECTIONS) == "users"
        assert active_section_id("/admin/users/42/edit", ADMIN_SECTIONS) == "users"
        assert active_section_id("/admin/topics-series", ADMIN_SECTIONS) == "topics-series"

    def test_prefix_collisions_do_not_match(self):
        assert active_section_id("/admin/usersettings", ADMIN_SECTIONS) is None

    def test_only_resolved_sections_match(self):
        moderator_sections = available_sections(AdminRole.MODERATOR)
        assert active_section_id("/admin/content", moderator_sections) is None

    def test_custom_prefix(self):
        assert active_section_id("/console", ADMIN_SECTIONS, prefix="/console") == "overview"
        assert active_section_id("/console/analytics", ADMIN_SECTIONS, prefix="/console") == "analytics"
