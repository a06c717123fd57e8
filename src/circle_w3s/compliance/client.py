"""Client for the Compliance Engine API."""

from __future__ import annotations

from circle_w3s.client import ResourceClient
from circle_w3s.compliance.models import (
    BlockchainAddressScreeningResponse,
    ScreenAddressRequest,
)
from circle_w3s.request import Endpoint

SCREEN_ADDRESS = Endpoint("POST", "/v1/w3s/compliance/screening/addresses", body=True)


class ComplianceClient(ResourceClient):
    """Screens blockchain addresses against Circle's compliance rules."""

    async def screen_address(
        self, req: ScreenAddressRequest
    ) -> BlockchainAddressScreeningResponse:
        """Screen one address.

        The verdict is computed server-side and returned unmodified; a
        ``DENIED`` result is a successful call, not an error.
        """
        return await self._call(
            SCREEN_ADDRESS, BlockchainAddressScreeningResponse, req
        )
