"""Wire-level pieces of the user-flow webhook contracts.

- JSON property names and ``@odata.type`` discriminators
- Directory-extension claim keys
- Request body helpers and the encoded response seam
"""

from userflow.protocol.claims import (
    build_claim_key,
    extension_key,
    try_build_claim_key,
)
from userflow.protocol.constants import ApiConnector, Json, ODataActions, ODataData
from userflow.protocol.http import EncodedResponse

__all__ = [
    "build_claim_key",
    "extension_key",
    "try_build_claim_key",
    "ApiConnector",
    "Json",
    "ODataActions",
    "ODataData",
    "EncodedResponse",
]
