"""Reputation NFTs minted to account owners."""

from __future__ import annotations

from dataclasses import dataclass

from borderless_p2p.env import Address, Env, check_address, check_i128

NFTS_KEY = "nfts"


@dataclass(frozen=True)
class Nft:
    """An NFT held by ``owner`` carrying a score."""

    owner: Address
    score: int


class Nfts:
    """NFT records kept in the environment's persistent storage."""

    def __init__(self, env: Env) -> None:
        self.env = env

    def mint(self, owner: Address, score: int) -> None:
        """Mint a new NFT to ``owner``."""
        nft = Nft(owner=check_address(owner), score=check_i128(score))
        stored = self.env.get(NFTS_KEY, ())
        self.env.set(NFTS_KEY, (*stored, nft))

    def list(self) -> list[Nft]:
        """Return all minted NFTs in the order they were minted."""
        return list(self.env.get(NFTS_KEY, ()))