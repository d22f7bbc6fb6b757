from typing import List, Optional, Tuple

from ..context import RequestContext
from ..models.ssh_key import SSHKey, SSHKeyCreateRequest
from ..response import Response
from .base import Service, require_argument, require_payload

SSH_KEYS_BASE_PATH = "vmlist/ssh"


class SSHKeysService(Service):
    """Handles the ssh keys related methods of the Xelon API."""

    def list(self, ctx: Optional[RequestContext] = None) -> Tuple[List[SSHKey], Response]:
        """List all added SSH keys."""
        response = self._call("GET", "sshKeys/", target=List[SSHKey], ctx=ctx)
        return response.data or [], response

    def create(
        self, create_request: SSHKeyCreateRequest, ctx: Optional[RequestContext] = None
    ) -> Tuple[SSHKey, Response]:
        require_payload(create_request)

        response = self._call(
            "POST", f"{SSH_KEYS_BASE_PATH}/add", create_request, target=SSHKey, ctx=ctx
        )
        return response.data, response

    def delete(self, ssh_key_id: int, ctx: Optional[RequestContext] = None) -> Response:
        require_argument(ssh_key_id)

        return self._call("DELETE", f"{SSH_KEYS_BASE_PATH}/{ssh_key_id}/delete", ctx=ctx)
