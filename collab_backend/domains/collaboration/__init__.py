from collab_backend.domains.collaboration.schemas import BasicWsCallbackBody, BlocksMap, DocumentData
from collab_backend.domains.collaboration.services import UpdateIngestService, count_blocks

__all__ = [
    "BasicWsCallbackBody", "BlocksMap", "DocumentData",
    "UpdateIngestService", "count_blocks"
]
