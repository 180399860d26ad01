"""Proofs that a delivery took place."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from borderless_p2p.env import Address, Env, check_address, fixed_bytes

DELIVERIES_KEY = "deliveries"
HASH_SIZE = 32


@dataclass(frozen=True)
class DeliveryProof:
    """A delivery proof: 32-byte transaction id, deliverer, 32-byte IPFS hash."""

    tx_id: bytes
    deliverer: Address
    ipfs_hash: bytes


class DeliveryError(IntEnum):
    """Error codes of the delivery module."""

    PROOF_ALREADY_EXISTS = 601
    PROOF_NOT_FOUND = 602
    INVALID_HASH = 603


class Deliveries:
    """Delivery proofs kept in the environment's persistent storage."""

    def __init__(self, env: Env) -> None:
        self.env = env

    def add(self, tx_id: bytes, deliverer: Address, ipfs_hash: bytes) -> None:
        """Record a delivery proof."""
        proof = DeliveryProof(
            tx_id=fixed_bytes(tx_id, HASH_SIZE),
            deliverer=check_address(deliverer),
            ipfs_hash=fixed_bytes(ipfs_hash, HASH_SIZE),
        )
        stored = self.env.get(DELIVERIES_KEY, ())
        self.env.set(DELIVERIES_KEY, (*stored, proof))

    def list(self) -> list[DeliveryProof]:
        """Return all recorded delivery proofs in the order they were added."""
        return list(self.env.get(DELIVERIES_KEY, ()))