"""OTA integration repository."""

from staydesk.models.ota_integration import OtaIntegration
from staydesk.repositories.base import SqlRepository


class OtaIntegrationRepository(SqlRepository[OtaIntegration]):
    model = OtaIntegration
    default_order = OtaIntegration.id
    label = "OTA integration"
