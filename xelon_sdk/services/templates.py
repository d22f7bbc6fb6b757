from typing import List, Optional, Tuple

from ..context import RequestContext
from ..models.template import (
    Template,
    TemplateCreateRequest,
    TemplateListOptions,
    TemplateRoot,
    TemplatesRoot,
    TemplateUpdateRequest,
)
from ..response import Response
from ..utils import add_options
from .base import Service, require_argument, require_payload

TEMPLATES_BASE_PATH = "templates"


class TemplatesService(Service):
    """Handles the device template related methods of the Xelon API."""

    def list(
        self, opts: Optional[TemplateListOptions] = None, ctx: Optional[RequestContext] = None
    ) -> Tuple[List[Template], Response]:
        """List templates, optionally filtered by ``opts.type``."""
        path = add_options(TEMPLATES_BASE_PATH, opts)
        response = self._call("GET", path, target=TemplatesRoot, ctx=ctx)
        root = response.data or TemplatesRoot()
        return root.templates, response

    def get(self, template_id: str, ctx: Optional[RequestContext] = None) -> Tuple[Template, Response]:
        require_argument(template_id, "failed to get template: id must be supplied")

        path = f"{TEMPLATES_BASE_PATH}/{template_id}"
        response = self._call("GET", path, target=Template, ctx=ctx)
        return response.data, response

    def create(
        self, create_request: TemplateCreateRequest, ctx: Optional[RequestContext] = None
    ) -> Tuple[Optional[Template], Response]:
        """Create a template from an existing device."""
        require_payload(create_request, "failed to create template: payload must be supplied")

        path = f"{TEMPLATES_BASE_PATH}/create-from-device"
        response = self._call("POST", path, create_request, target=TemplateRoot, ctx=ctx)
        return _template(response), response

    def update(
        self,
        template_id: str,
        update_request: TemplateUpdateRequest,
        ctx: Optional[RequestContext] = None,
    ) -> Tuple[Optional[Template], Response]:
        require_argument(template_id, "failed to update template: id must be supplied")
        require_payload(update_request, "failed to update template: payload must be supplied")

        path = f"{TEMPLATES_BASE_PATH}/{template_id}"
        response = self._call("PATCH", path, update_request, target=TemplateRoot, ctx=ctx)
        return _template(response), response

    def delete(self, template_id: str, ctx: Optional[RequestContext] = None) -> Response:
        require_argument(template_id, "failed to delete template: id must be supplied")

        return self._call("DELETE", f"{TEMPLATES_BASE_PATH}/{template_id}", ctx=ctx)


def _template(response: Response) -> Optional[Template]:
    return response.data.template if response.data is not None else None
