import time

import pytest

from resumifai.deadline import call_with_deadline
from resumifai.errors import TimeoutExceeded


def test_returns_result_within_deadline():
    assert call_with_deadline(lambda a, b=0: a + b, 1, b=2, timeout_ms=1000) == 3


def test_slow_call_times_out_without_waiting():
    t0 = time.time()
    with pytest.raises(TimeoutExceeded) as exc:
        call_with_deadline(time.sleep, 1.0, timeout_ms=50, what="slow thing")
    assert time.time() - t0 < 0.5
    assert "slow thing" in exc.value.detail
    assert exc.value.status == 500


def test_errors_from_call_propagate():
    def boom():
        raise KeyError("nope")

    with pytest.raises(KeyError):
        call_with_deadline(boom, timeout_ms=1000)


def test_pool_size_falls_back_on_bad_values():
    from resumifai.deadline import make_pool

    for env in ({"GUARD_WORKERS": "lots"}, {"GUARD_WORKERS": "0"}, {}):
        pool = make_pool(env)
        assert pool._max_workers == 32
        pool.shutdown()
    pool = make_pool({"GUARD_WORKERS": "4"})
    assert pool._max_workers == 4
    pool.shutdown()
