"""
Section Registry - ordered catalog of admin navigation areas.

Presentation order is a product decision: menus render sections in the
order declared here. Adding an admin area means adding one record and
wiring permissions that already exist in the catalog.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final, Sequence

from chapel.auth.permissions import Permission

DEFAULT_ROUTE_PREFIX: Final[str] = "/admin"


@dataclass(frozen=True)
class Section:
    """
    A navigable admin area gated behind a required permission set.

    All of ``required_permissions`` must be held (AND semantics). An empty
    set makes the section available to every admin role.
    """

    id: str
    title: str
    description: str
    icon: str
    required_permissions: frozenset[str] = field(default_factory=frozenset)
    route: str | None = None

    def route_path(self, prefix: str = DEFAULT_ROUTE_PREFIX) -> str:
        if self.route is not None:
            return self.route
        return f"{prefix.rstrip('/')}/{self.id}"


ADMIN_SECTIONS: Final[tuple[Section, ...]] = (
    Section(
        id="overview",
        title="Overview",
        description="System overview and statistics",
        icon="dashboard",
        required_permissions=frozenset({Permission.ANALYTICS_VIEW}),
    ),
    Section(
        id="content",
        title="Content Management",
        description="Manage sermons and articles",
        icon="description",
        required_permissions=frozenset({
            Permission.SERMONS_CREATE,
            Permission.ARTICLES_CREATE,
        }),
    ),
    Section(
        id="topics-series",
        title="Topics & Series",
        description="Organize content with topics and series",
        icon="label",
        required_permissions=frozenset({
            Permission.TOPICS_CREATE,
            Permission.SERIES_CREATE,
        }),
    ),
    Section(
        id="users",
        title="User Management",
        description="Manage users and their roles",
        icon="people",
        required_permissions=frozenset({Permission.USERS_VIEW}),
    ),
    Section(
        id="analytics",
        title="Analytics",
        description="View user engagement and content performance",
        icon="trending-up",
        required_permissions=frozenset({Permission.ANALYTICS_VIEW}),
    ),
    Section(
        id="notifications",
        title="Notifications",
        description="Send and manage user notifications",
        icon="notifications",
        required_permissions=frozenset({Permission.NOTIFICATIONS_MANAGE}),
    ),
    Section(
        id="carousel",
        title="Carousel Management",
        description="Manage dashboard carousel images",
        icon="image",
        # Carousel images are content; reuses the sermon create permission
        required_permissions=frozenset({Permission.SERMONS_CREATE}),
    ),
)


def get_section(
    section_id: str,
    sections: Sequence[Section] = ADMIN_SECTIONS,
) -> Section | None:
    for section in sections:
        if section.id == section_id:
            return section
    return None
