from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class DocMetaCreate(BaseModel):
    """Схема для создания метаданных документа"""
    id: Optional[str] = Field(None, min_length=1)
    title: str = ""
    tags: List[str] = Field(default_factory=list)

    # Остальные поля DocMeta клиента сохраняются без изменений
    model_config = ConfigDict(extra="allow")


class DocMetaResponse(BaseModel):
    """Схема для ответа с метаданными документа"""
    id: str
    title: str
    tags: List[str]
    created_at: int = Field(..., alias="createdAt")
    updated_at: int = Field(..., alias="updatedAt")

    model_config = ConfigDict(extra="allow", populate_by_name=True)
