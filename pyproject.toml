[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "borderless_p2p"
version = "0.1.0"
description = "In-memory ledger for a peer-to-peer marketplace: products, requests, escrows, DAO proposals, reputation NFTs and delivery proofs."
requires-python = ">=3.10"
dependencies = []
keywords = ["marketplace", "escrow", "p2p", "dao", "nft", "ledger"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["borderless_p2p"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
