"""OTA channel sync."""

import logging

from staydesk.core.database import utcnow
from staydesk.core.errors import ConflictError
from staydesk.models.ota_integration import OtaIntegration
from staydesk.repositories import OtaIntegrationRepository

logger = logging.getLogger(__name__)


class OtaSyncService:
    """Channel sync. No channel API is called; a sync only records when it ran."""

    def __init__(self, integrations: OtaIntegrationRepository):
        self.integrations = integrations

    async def sync(self, integration_id: int) -> OtaIntegration:
        integration = await self.integrations.get_or_404(integration_id)
        if not integration.is_active:
            raise ConflictError("OTA integration is inactive")

        logger.info(
            f"[OTA] Sync {integration.platform.value} listing "
            f"{integration.external_property_id} for property {integration.property_id}"
        )
        return await self.integrations.update(integration_id, {"last_sync_at": utcnow()})
