"""Escrow agreements between buyers and sellers."""

from __future__ import annotations

from dataclasses import dataclass

from borderless_p2p.env import Address, Env, check_address, check_i128

ESCROWS_KEY = "escrows"


@dataclass(frozen=True)
class Escrow:
    """Funds held between a buyer and a seller."""

    buyer: Address
    seller: Address
    amount: int


class Escrows:
    """Escrow records kept in the environment's persistent storage."""

    def __init__(self, env: Env) -> None:
        self.env = env

    def add(self, buyer: Address, seller: Address, amount: int) -> None:
        """Record a new escrow."""
        escrow = Escrow(
            buyer=check_address(buyer),
            seller=check_address(seller),
            amount=check_i128(amount),
        )
        stored = self.env.get(ESCROWS_KEY, ())
        self.env.set(ESCROWS_KEY, (*stored, escrow))

    def list(self) -> list[Escrow]:
        """Return all recorded escrows in the order they were added."""
        return list(self.env.get(ESCROWS_KEY, ()))