from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Dict, Optional

SEVERITIES = ("success", "error", "info")


@dataclass
class Product:
    id: str
    name: str
    price: float
    description: str
    image: str = ""
    category: str = ""
    is_new: bool = False
    sold_out: bool = False

    def to_dict(self) -> Dict[str, Any]:
        # camelCase keys match the snapshots written by the web build
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "description": self.description,
            "image": self.image,
            "category": self.category,
            "isNew": self.is_new,
            "soldOut": self.sold_out,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Product":
        return cls(
            id=str(d["id"]),
            name=d.get("name", ""),
            price=float(d.get("price") or 0),
            description=d.get("description", ""),
            image=d.get("image", "") or "",
            category=d.get("category", "") or "",
            is_new=bool(d.get("isNew", False)),
            sold_out=bool(d.get("soldOut", False)),
        )

    def copy(self) -> "Product":
        return replace(self)


@dataclass
class CartLine:
    line_id: str
    product: Product

    @property
    def price(self) -> float:
        return self.product.price


@dataclass
class GiftOptions:
    is_gift: bool = False
    recipient_name: str = ""
    sender_name: str = ""
    message: str = ""

    def is_complete(self) -> bool:
        if not self.is_gift:
            return True
        return bool(self.recipient_name.strip()) and bool(self.message.strip())


@dataclass
class PaymentDetails:
    bank_name: str
    account_name: str
    account_number: str
    instructions: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "bankName": self.bank_name,
            "accountName": self.account_name,
            "accountNumber": self.account_number,
            "instructions": self.instructions,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "PaymentDetails":
        return cls(
            bank_name=d.get("bankName", ""),
            account_name=d.get("accountName", ""),
            account_number=d.get("accountNumber", ""),
            instructions=d.get("instructions", ""),
        )


@dataclass
class ToastMessage:
    id: str
    text: str
    severity: str
    created_at: datetime


@dataclass
class ChatMessage:
    id: str
    role: str  # "user" or "assistant"
    text: str
    image: Optional[str] = None
