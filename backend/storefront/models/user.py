from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    id: int
    username: str
    password_hash: str
    cart_id: int
    created_at: datetime

    def __repr__(self):
        return f"<User id={self.id} username={self.username}>"
