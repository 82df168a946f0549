"""Unit tests for the code pool."""

import re

from apps.orders.codes import CODE_RE, CodePool, DEFAULT_POOL


def test_default_pool_is_01_to_10():
    assert DEFAULT_POOL.codes == ("01", "02", "03", "04", "05", "06", "07", "08", "09", "10")
    assert len(DEFAULT_POOL) == 10
    assert all(re.match(CODE_RE, c) for c in DEFAULT_POOL.codes)


def test_membership():
    assert "01" in DEFAULT_POOL
    assert "10" in DEFAULT_POOL
    assert "00" not in DEFAULT_POOL
    assert "11" not in DEFAULT_POOL
    assert "1" not in DEFAULT_POOL


def test_available_is_complement_in_ascending_order():
    assert DEFAULT_POOL.available(["07", "02", "10"]) == ["01", "03", "04", "05", "06", "08", "09"]
    assert DEFAULT_POOL.available([]) == list(DEFAULT_POOL.codes)
    assert DEFAULT_POOL.available(DEFAULT_POOL.codes) == []


def test_available_ignores_codes_outside_pool():
    assert CodePool(size=3).available(["99", "02"]) == ["01", "03"]
