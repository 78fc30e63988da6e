"""File upload endpoint definition and adapter.

Uploads are sent as multipart/form-data with a single ``file`` part. The
returned upload resource is what a comment's ``file_attachments`` expects.
"""

from __future__ import annotations

from typing import Any

import aiohttp

from laakhay.pivotal.models import FileAttachment
from laakhay.pivotal.runtime.rest import RestEndpointSpec

from .base import ModelAdapter, project_path


def build_upload_form(params: dict[str, Any]) -> aiohttp.FormData:
    form = aiohttp.FormData()
    form.add_field(
        "file",
        params["content"],
        filename=params["filename"],
        content_type=params.get("content_type") or "application/octet-stream",
    )
    return form


UPLOAD_SPEC = RestEndpointSpec(
    id="upload",
    method="POST",
    build_path=lambda params: f"{project_path(params)}/uploads",
    build_data=build_upload_form,
)


class UploadAdapter(ModelAdapter):
    model = FileAttachment
