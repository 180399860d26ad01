# borderless_p2p

A small, self-contained ledger for a peer-to-peer marketplace. It keeps
append-only records of:

- **products** offered by sellers (`borderless_p2p.product`),
- **requests** opened by buyers (`borderless_p2p.requests`),
- **escrows** between a buyer and a seller (`borderless_p2p.escrow`),
- **DAO proposals** (`borderless_p2p.dao`),
- **reputation NFTs** carrying a score (`borderless_p2p.nft`),
- **delivery proofs** tying a transaction id to an IPFS hash
  (`borderless_p2p.delivery`).

Every record lives in an `Env` (`borderless_p2p.env`), a key–value store
that also hands out fresh `Address` values. Each record kind is kept under
its own key, and listing returns the records in the order they were added.
Records are frozen dataclasses.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

`BorderlessP2P` (`borderless_p2p.contract`) gathers every record kind
behind one object. Without an argument it creates its own `Env`.

```python
from borderless_p2p.env import Env
from borderless_p2p.contract import BorderlessP2P

env = Env()
market = BorderlessP2P(env)

seller = env.generate_address()
buyer = env.generate_address()

market.add_product(
    seller,
    b"Laptop".ljust(32, b"\0"),
    b"8 GB RAM, 256 GB SSD".ljust(64, b"\0"),
    1000,
)
market.add_escrow(buyer, seller, 1000)
market.add_proposal(buyer, "lower_fees")

for product in market.list_products():
    print(product.seller, product.price)
```

The methods are `add_product`, `list_products`, `add_request`,
`list_requests`, `add_escrow`, `list_escrows`, `add_proposal`,
`list_proposals`, `mint_nft`, `list_nfts`, `add_delivery` and
`list_deliveries`.

### Fixed-size fields

Titles, transaction ids and IPFS hashes must be exactly 32 bytes;
descriptions and request details exactly 64. `fixed_bytes(value, size)`
returns the value as `bytes` and raises `ValueError` if its length is not
exactly `size` (it does not pad), or `TypeError` if it is not bytes-like.

### Amounts

Prices, escrow amounts and NFT scores are signed 128-bit integers.
`check_i128` raises `TypeError` for non-integers (including `bool`) and
`OverflowError` for values outside that range.

### Proposals

A proposal description is a symbol: at most 32 characters from
`A–Z`, `a–z`, `0–9` and `_`. Anything else raises `ValueError`.

### Addresses

`Env.generate_address()` returns a new `Address`, unique across
environments. Every address argument is checked; passing anything other
than an `Address` raises `TypeError`.

### Using the parts directly

Each record kind has its own store class working on the same `Env`:
`Products`, `Requests`, `Escrows`, `Dao`, `Nfts` (with `mint`) and
`Deliveries`.

```python
from borderless_p2p.env import Env
from borderless_p2p.nft import Nfts

env = Env()
nfts = Nfts(env)
nfts.mint(env.generate_address(), 100)
print(len(nfts.list()))  # 1
```

## What it does not do

- Storage is in memory only; nothing is written to disk and an `Env` is
  lost when the process ends.
- Records can only be added and listed; there is no update, removal,
  lookup or authorisation check.
- `DeliveryError` defines error codes (601–603) but no operation raises
  them: duplicate delivery proofs are accepted.
- There is no command-line tool or server.