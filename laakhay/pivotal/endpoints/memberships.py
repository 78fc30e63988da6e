"""Project membership endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from laakhay.pivotal.models import ProjectMembership
from laakhay.pivotal.runtime.rest import RestEndpointSpec

from .base import ModelListAdapter, project_path


def memberships_path(params: dict[str, Any]) -> str:
    return f"{project_path(params)}/memberships"


MEMBERSHIPS_SPEC = RestEndpointSpec(
    id="memberships",
    method="GET",
    build_path=memberships_path,
)


class MembershipListAdapter(ModelListAdapter):
    model = ProjectMembership
