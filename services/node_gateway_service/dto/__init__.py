"""Node Gateway Service DTO module.

Contains node RPC models and client-facing response models.
"""

from services.node_gateway_service.dto.node_v1 import Identity, RecordBO, RecordStatus

__all__ = ["Identity", "RecordBO", "RecordStatus"]
