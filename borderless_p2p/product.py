"""Products offered for sale by sellers."""

from __future__ import annotations

from dataclasses import dataclass

from borderless_p2p.env import Address, Env, check_address, check_i128, fixed_bytes

PRODUCTS_KEY = "products"
TITLE_SIZE = 32
DESC_SIZE = 64


@dataclass(frozen=True)
class Product:
    """A product listing: seller, 32-byte title, 64-byte description, price."""

    seller: Address
    title: bytes
    desc: bytes
    price: int


class Products:
    """Product records kept in the environment's persistent storage."""

    def __init__(self, env: Env) -> None:
        self.env = env

    def add(self, seller: Address, title: bytes, desc: bytes, price: int) -> None:
        """Record a new product."""
        product = Product(
            seller=check_address(seller),
            title=fixed_bytes(title, TITLE_SIZE),
            desc=fixed_bytes(desc, DESC_SIZE),
            price=check_i128(price),
        )
        stored = self.env.get(PRODUCTS_KEY, ())
        self.env.set(PRODUCTS_KEY, (*stored, product))

    def list(self) -> list[Product]:
        """Return all recorded products in the order they were added."""
        return list(self.env.get(PRODUCTS_KEY, ()))