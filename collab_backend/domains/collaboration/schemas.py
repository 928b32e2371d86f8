from typing import Any, Dict, Literal

from pydantic import BaseModel, Field


class BlocksMap(BaseModel):
    """Сериализованная карта блоков документа BlockSuite"""
    type: Literal["Map"] = "Map"
    content: Dict[str, Any] = Field(default_factory=dict)


class DocumentData(BaseModel):
    blocks: BlocksMap


class BasicWsCallbackBody(BaseModel):
    """Тело периодического уведомления об изменении документа"""
    room: str = Field(..., min_length=1)
    data: DocumentData
