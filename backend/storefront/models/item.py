from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Item:
    id: int
    name: str
    status: str
    created_at: datetime
    image: Optional[str] = None

    def __repr__(self):
        return f"<Item id={self.id} name={self.name} status={self.status}>"
