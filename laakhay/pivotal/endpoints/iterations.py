"""Iteration endpoint definition and adapter.

Supports ``scope`` (done, current, backlog, current_backlog) and the other
iteration filters through caller options.
"""

from __future__ import annotations

from typing import Any

from laakhay.pivotal.models import Iteration
from laakhay.pivotal.runtime.rest import RestEndpointSpec

from .base import ModelListAdapter, build_options_query, project_path


def iterations_path(params: dict[str, Any]) -> str:
    """Build the iterations collection path (also used for pagination)."""
    return f"{project_path(params)}/iterations"


ITERATIONS_SPEC = RestEndpointSpec(
    id="iterations",
    method="GET",
    build_path=iterations_path,
    build_query=build_options_query,
)


class IterationListAdapter(ModelListAdapter):
    model = Iteration
