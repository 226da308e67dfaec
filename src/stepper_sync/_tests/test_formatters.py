from stepper_sync.formatters import abbreviated, abbreviated_with_max, simple


def test_abbreviated():
    assert abbreviated(999) == "999"
    assert abbreviated(1000) == "1k"
    assert abbreviated(1500) == "1.5k"
    assert abbreviated(2_000_000) == "2M"
    assert abbreviated(2_500_000) == "2.5M"
    assert abbreviated(3.0) == "3"
    assert abbreviated(2.5) == "2.5"


def test_abbreviated_with_max():
    fmt = abbreviated_with_max(99)
    assert fmt(42) == "42"
    assert fmt(99) == "99+"
    assert fmt(150) == "99+"


def test_simple():
    assert simple(7) == "7"
    assert simple(7.0) == "7"
    assert simple(0.5) == "0.5"
