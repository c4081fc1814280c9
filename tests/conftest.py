import pytest


@pytest.fixture
def small_corpus():
    # Letter counts: e6 r4 i3 t3 c1 d1 g1 o1. Ranked: tiger, cider, otter, eerie.
    return ["eerie", "tiger", "otter", "cider"]
