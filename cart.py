from models import CartLine, Product
from utils import new_id


class Cart:
    """Session-only bag. Each line holds a copy of the product taken when it was added."""

    def __init__(self, notifier=None):
        self.notifier = notifier
        self._lines = []

    @property
    def lines(self):
        return list(self._lines)

    def add(self, product: Product):
        if product.sold_out:
            return None
        line = CartLine(line_id=new_id(), product=product.copy())
        self._lines.append(line)
        if self.notifier is not None:
            self.notifier.notify(f"Added {product.name} to bag", "success")
        return line

    def remove(self, line_id: str):
        self._lines = [l for l in self._lines if l.line_id != line_id]

    def clear(self):
        self._lines = []

    def total(self) -> float:
        return sum(l.price for l in self._lines)

    def count(self) -> int:
        return len(self._lines)

    def is_empty(self) -> bool:
        return not self._lines
