import pytest

from borderless_p2p.env import Env
from borderless_p2p.escrow import Escrow, Escrows


@pytest.fixture
def env():
    return Env()


def test_add_escrow(env):
    escrows = Escrows(env)
    buyer = env.generate_address()
    seller = env.generate_address()
    amount = 1000

    escrows.add(buyer, seller, amount)
    listed = escrows.list()
    assert len(listed) == 1
    escrow = listed[0]
    assert escrow.buyer == buyer
    assert escrow.seller == seller
    assert escrow.amount == amount


def test_list_escrows(env):
    escrows = Escrows(env)
    buyer1, seller1 = env.generate_address(), env.generate_address()
    buyer2, seller2 = env.generate_address(), env.generate_address()
    escrows.add(buyer1, seller1, 1000)
    escrows.add(buyer2, seller2, 2000)
    listed = escrows.list()
    assert len(listed) == 2
    assert listed == [Escrow(buyer1, seller1, 1000), Escrow(buyer2, seller2, 2000)]


def test_list_empty(env):
    assert Escrows(env).list() == []


def test_negative_amount_within_range_is_kept(env):
    buyer, seller = env.generate_address(), env.generate_address()
    Escrows(env).add(buyer, seller, -(2**127))
    assert Escrows(env).list()[0].amount == -(2**127)


def test_rejects_amount_overflow(env):
    escrows = Escrows(env)
    with pytest.raises(OverflowError):
        escrows.add(env.generate_address(), env.generate_address(), 2**127)
    assert escrows.list() == []


def test_rejects_non_address_parties(env):
    with pytest.raises(TypeError):
        Escrows(env).add(env.generate_address(), "seller", 10)