import logging

from pycrdt import Doc, Map

from collab_backend.core.exceptions import InvalidDocumentUpdateError
from collab_backend.domains.collaboration.schemas import DocumentData

logger = logging.getLogger(__name__)

BLOCKS_KEY = "blocks"


class UpdateIngestService:
    """Прием снимков состояния документов от сервера синхронизации"""

    def notify_changed(self, room: str, data: DocumentData) -> int:
        """Уведомление с уже разобранной картой блоков"""
        block_count = len(data.blocks.content)
        self._log_update(room, block_count)
        return block_count

    def notify_changed_binary(self, room: str, update: bytes) -> int:
        """Уведомление с бинарным обновлением Yjs"""
        block_count = count_blocks(update)
        self._log_update(room, block_count)
        return block_count

    def _log_update(self, room: str, block_count: int) -> None:
        logger.info(f'BlockSuite doc in room "{room}" updated, block count: {block_count}')


def count_blocks(update: bytes) -> int:
    """Применение обновления к пустому документу и подсчет блоков"""
    ydoc = Doc()
    # pycrdt применяет только обновления Yjs v1; сервер синхронизации должен присылать v1
    try:
        ydoc.apply_update(update)
    except Exception as e:
        raise InvalidDocumentUpdateError(f"Cannot decode document update: {e}") from e

    blocks = ydoc.get(BLOCKS_KEY, type=Map)
    return len(blocks)
