"""Project label endpoint definitions and adapters."""

from __future__ import annotations

from typing import Any

from laakhay.pivotal.models import Label
from laakhay.pivotal.runtime.rest import RestEndpointSpec

from .base import ModelAdapter, ModelListAdapter, project_path


def labels_path(params: dict[str, Any]) -> str:
    return f"{project_path(params)}/labels"


LABELS_SPEC = RestEndpointSpec(
    id="labels",
    method="GET",
    build_path=labels_path,
)

CREATE_LABEL_SPEC = RestEndpointSpec(
    id="create_label",
    method="POST",
    build_path=labels_path,
    build_body=lambda params: {"name": params["name"]},
)


class LabelAdapter(ModelAdapter):
    model = Label


class LabelListAdapter(ModelListAdapter):
    model = Label
