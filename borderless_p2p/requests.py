"""Purchase requests opened by buyers."""

from __future__ import annotations

from dataclasses import dataclass

from borderless_p2p.env import Address, Env, check_address, fixed_bytes

REQUESTS_KEY = "requests"
TITLE_SIZE = 32
DETAILS_SIZE = 64


@dataclass(frozen=True)
class Request:
    """A buyer's request: 32-byte product title and 64-byte details."""

    requester: Address
    product_title: bytes
    details: bytes


class Requests:
    """Request records kept in the environment's persistent storage."""

    def __init__(self, env: Env) -> None:
        self.env = env

    def add(self, requester: Address, product_title: bytes, details: bytes) -> None:
        """Record a new request."""
        request = Request(
            requester=check_address(requester),
            product_title=fixed_bytes(product_title, TITLE_SIZE),
            details=fixed_bytes(details, DETAILS_SIZE),
        )
        stored = self.env.get(REQUESTS_KEY, ())
        self.env.set(REQUESTS_KEY, (*stored, request))

    def list(self) -> list[Request]:
        """Return all recorded requests in the order they were added."""
        return list(self.env.get(REQUESTS_KEY, ()))