"""Governance proposals submitted to the DAO."""

from __future__ import annotations

import re
from dataclasses import dataclass

from borderless_p2p.env import Address, Env, check_address

PROPOSALS_KEY = "proposals"
MAX_SYMBOL_LEN = 32

_SYMBOL_PATTERN = re.compile(r"[A-Za-z0-9_]*")


def _check_symbol(value: str) -> str:
    """Return ``value`` if it is a valid symbol: up to 32 of ``[A-Za-z0-9_]``."""
    if not isinstance(value, str):
        raise TypeError(f"expected a symbol string, got {type(value).__name__}")
    if len(value) > MAX_SYMBOL_LEN:
        raise ValueError(f"symbol longer than {MAX_SYMBOL_LEN} characters: {value!r}")
    if not _SYMBOL_PATTERN.fullmatch(value):
        raise ValueError(f"symbol contains invalid characters: {value!r}")
    return value


@dataclass(frozen=True)
class Proposal:
    """A proposal: who submitted it and a short symbolic description."""

    proposer: Address
    description: str


class Dao:
    """Proposal records kept in the environment's persistent storage."""

    def __init__(self, env: Env) -> None:
        self.env = env

    def add(self, proposer: Address, description: str) -> None:
        """Record a new proposal."""
        proposal = Proposal(
            proposer=check_address(proposer),
            description=_check_symbol(description),
        )
        stored = self.env.get(PROPOSALS_KEY, ())
        self.env.set(PROPOSALS_KEY, (*stored, proposal))

    def list(self) -> list[Proposal]:
        """Return all recorded proposals in the order they were added."""
        return list(self.env.get(PROPOSALS_KEY, ()))