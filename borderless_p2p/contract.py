"""The marketplace contract exposing every module through one interface."""

from __future__ import annotations

from borderless_p2p.dao import Dao, Proposal
from borderless_p2p.delivery import Deliveries, DeliveryProof
from borderless_p2p.env import Address, Env
from borderless_p2p.escrow import Escrow, Escrows
from borderless_p2p.nft import Nft, Nfts
from borderless_p2p.product import Product, Products
from borderless_p2p.requests import Request, Requests


class BorderlessP2P:
    """Peer-to-peer marketplace contract bound to one environment."""

    def __init__(self, env: Env | None = None) -> None:
        self.env = env if env is not None else Env()

    def add_product(self, seller: Address, title: bytes, desc: bytes, price: int) -> None:
        Products(self.env).add(seller, title, desc, price)

    def list_products(self) -> list[Product]:
        return Products(self.env).list()

    def add_request(self, requester: Address, product_title: bytes, details: bytes) -> None:
        Requests(self.env).add(requester, product_title, details)

    def list_requests(self) -> list[Request]:
        return Requests(self.env).list()

    def add_escrow(self, buyer: Address, seller: Address, amount: int) -> None:
        Escrows(self.env).add(buyer, seller, amount)

    def list_escrows(self) -> list[Escrow]:
        return Escrows(self.env).list()

    def add_proposal(self, proposer: Address, description: str) -> None:
        Dao(self.env).add(proposer, description)

    def list_proposals(self) -> list[Proposal]:
        return Dao(self.env).list()

    def mint_nft(self, owner: Address, score: int) -> None:
        Nfts(self.env).mint(owner, score)

    def list_nfts(self) -> list[Nft]:
        return Nfts(self.env).list()

    def add_delivery(self, tx_id: bytes, deliverer: Address, ipfs_hash: bytes) -> None:
        Deliveries(self.env).add(tx_id, deliverer, ipfs_hash)

    def list_deliveries(self) -> list[DeliveryProof]:
        return Deliveries(self.env).list()