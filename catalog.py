import logging

from models import Product
from storage import PersistedStore, load_json

logger = logging.getLogger(__name__)

_IMG = "https://images.unsplash.com/photo-{}?ixlib=rb-1.2.1&auto=format&fit=crop&w=800&q=80"

DEFAULT_PRODUCTS = [
    Product(
        id="1",
        name="The Latte Canvas Tote",
        price=85,
        description="A spacious everyday tote made from durable beige canvas with rich espresso leather handles. Perfect for the market or the weekend getaway.",
        image=_IMG.format("1591561954557-26941169b49e"),
        category="Unisex",
        is_new=True,
    ),
    Product(
        id="2",
        name="Chestnut Crossbody",
        price=65,
        description="Compact yet roomy enough for essentials. Crafted from soft vegan leather in a warm chestnut shade with brass hardware.",
        image=_IMG.format("1548036328-c9fa89d128fa"),
        category="Women",
    ),
    Product(
        id="3",
        name="Espresso Evening Clutch",
        price=120,
        description="A bold statement piece. Deep dark brown velvet finish with a gold geometric clasp. Elegant and timeless.",
        image=_IMG.format("1566150905458-1bf1fc113f0d"),
        category="Women",
    ),
    Product(
        id="4",
        name="Sandstone Backpack",
        price=95,
        description="Hands-free convenience meets rustic style. Durable canvas in a soft sand color with adjustable leather straps.",
        image=_IMG.format("1553062407-98eeb64c6a62"),
        category="Men",
        is_new=True,
    ),
    Product(
        id="5",
        name="Signature Caramel Mini",
        price=55,
        description="Our best-seller. A tiny bag for big personalities. Comes in our signature rich caramel hue.",
        image=_IMG.format("1594223274512-ad4803739b7c"),
        category="Women",
    ),
    Product(
        id="6",
        name="Rustic Sienna Bucket",
        price=78,
        description="Slouchy, comfortable, and chic. Made from reclaimed leather with a natural sienna dye finish.",
        image=_IMG.format("1590874103328-eac38a683ce7"),
        category="Unisex",
        sold_out=True,
    ),
]


class CatalogStore(PersistedStore):
    def __init__(self, products=None, notifier=None):
        super().__init__(notifier)
        if products is None:
            products = DEFAULT_PRODUCTS
        self._products = [p.copy() for p in products]

    @classmethod
    def load(cls, storage, key: str, notifier=None):
        raw = load_json(storage, key, None)
        products = None
        if isinstance(raw, list):
            try:
                products = [Product.from_dict(d) for d in raw]
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("Catalog snapshot unusable, using defaults: %s", e)
        return cls(products, notifier)

    @property
    def products(self):
        return list(self._products)

    def get(self, product_id: str):
        for p in self._products:
            if p.id == product_id:
                return p
        return None

    def featured(self, n: int = 3):
        return self._products[:n]

    def snapshot(self):
        return [p.to_dict() for p in self._products]

    def add(self, product: Product):
        self._products.insert(0, product)
        self._notify("Product added successfully", "success")
        self._commit()

    def update(self, product: Product):
        self._products = [product if p.id == product.id else p for p in self._products]
        self._notify("Product updated", "success")
        self._commit()

    def delete(self, product_id: str):
        self._products = [p for p in self._products if p.id != product_id]
        self._notify("Product deleted", "info")
        self._commit()


def filter_products(products, category: str = "All", search: str = ""):
    q = (search or "").lower()
    out = []
    for p in products:
        if category != "All" and p.category != category:
            continue
        if q and q not in p.name.lower() and q not in p.description.lower():
            continue
        out.append(p)
    return out


def format_money(amount: float) -> str:
    # whole-dollar amounts print without decimals, like the shop labels
    if float(amount).is_integer():
        return f"${int(amount)}"
    return f"${amount:.2f}"


def display_price(p: Product) -> str:
    return format_money(p.price)
