import time
import uuid
from typing import Any, Dict, List, Optional


def now_ms() -> int:
    return int(time.time() * 1000)


class DocMeta:
    """Метаданные совместно редактируемого документа"""

    def __init__(
        self,
        id: str,
        title: str = "",
        tags: Optional[List[str]] = None,
        created_at: Optional[int] = None,
        updated_at: Optional[int] = None,
        extra: Optional[Dict[str, Any]] = None
    ):
        self.id = id
        self.title = title
        self.tags = list(tags or [])
        self.created_at = created_at if created_at is not None else now_ms()
        self.updated_at = updated_at if updated_at is not None else self.created_at
        # Поля клиента, о которых сервер ничего не знает, хранятся как есть
        self.extra = dict(extra or {})

    def update_title(self, new_title: str) -> None:
        """Обновление заголовка документа"""
        self.title = new_title
        self.updated_at = now_ms()

    def copy(self) -> "DocMeta":
        return DocMeta.from_dict(self.to_dict())

    def to_dict(self) -> Dict[str, Any]:
        data = dict(self.extra)
        data.update({
            "id": self.id,
            "title": self.title,
            "tags": list(self.tags),
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        })
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DocMeta":
        known = {"id", "title", "tags", "createdAt", "updatedAt"}
        return cls(
            id=data["id"],
            title=data.get("title", ""),
            tags=data.get("tags"),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
            extra={k: v for k, v in data.items() if k not in known}
        )

    @classmethod
    def create(
        cls,
        title: str = "",
        id: Optional[str] = None,
        tags: Optional[List[str]] = None,
        extra: Optional[Dict[str, Any]] = None
    ) -> "DocMeta":
        """Создание новых метаданных документа"""
        return cls(
            id=id or str(uuid.uuid4()),
            title=title,
            tags=tags,
            extra=extra
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, DocMeta):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"DocMeta(id={self.id}, title={self.title})"
