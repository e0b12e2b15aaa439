# test/test_timeseries.py
import numpy as np
import pandas as pd
import pytest

from epgseg.core import CombinedSeries, RecordingMeta, InvalidTimeSeries, InvalidConfigError


def _series(n=6, rate=2.0, base=1.0):
    t = np.arange(n) / rate
    v = np.arange(n, dtype=np.float32) + base
    return CombinedSeries(time=t, signal=v, sampling_rate=rate, meta=RecordingMeta(base_name="rec"))


def test_init_ok_basic():
    s = _series()

    assert s.n == len(s) == 6
    assert s.t_start == 0.0
    assert s.t_end == 2.5
    assert s.duration == 2.5
    assert s.time.dtype == np.float64
    assert s.signal.dtype == np.float32


def test_init_rejects_non_1d():
    with pytest.raises(InvalidTimeSeries):
        CombinedSeries(time=np.array([[0.0, 1.0]]), signal=np.array([1.0, 2.0]))


def test_init_rejects_length_mismatch():
    with pytest.raises(InvalidTimeSeries):
        CombinedSeries(time=np.array([0.0, 1.0, 2.0]), signal=np.array([1.0, 2.0]))


def test_init_rejects_non_finite_time():
    with pytest.raises(InvalidTimeSeries):
        CombinedSeries(time=np.array([0.0, np.nan, 2.0]), signal=np.array([1.0, 2.0, 3.0]))


def test_init_rejects_duplicate_or_decreasing_time():
    with pytest.raises(InvalidTimeSeries):
        CombinedSeries(time=np.array([0.0, 1.0, 1.0]), signal=np.array([1.0, 2.0, 3.0]))
    with pytest.raises(InvalidTimeSeries):
        CombinedSeries(time=np.array([0.0, 2.0, 1.0]), signal=np.array([1.0, 2.0, 3.0]))


def test_init_rejects_bad_sampling_rate():
    with pytest.raises(InvalidTimeSeries):
        CombinedSeries(time=np.array([0.0]), signal=np.array([1.0]), sampling_rate=-5.0)


def test_arrays_are_immutable_and_detached():
    t = np.array([0.0, 0.5])
    v = np.array([1.0, 2.0], dtype=np.float32)
    s = CombinedSeries(time=t, signal=v)

    t[0] = 42.0
    assert s.time[0] == 0.0
    with pytest.raises(ValueError):
        s.signal[0] = 3.0


def test_iteration_and_indexing_yield_pairs():
    s = _series(n=3)
    assert list(s) == [(0.0, 1.0), (0.5, 2.0), (1.0, 3.0)]
    assert s.pairs() == list(s)
    assert s[1] == (0.5, 2.0)
    assert s[-1] == (1.0, 3.0)

    head = s[:2]
    assert isinstance(head, CombinedSeries)
    assert head.pairs() == [(0.0, 1.0), (0.5, 2.0)]


def test_slice_time_default_is_half_open():
    s = _series()
    out = s.slice_time(1.0, 2.0)  # [1.0, 2.0)
    assert np.allclose(out.time, [1.0, 1.5])
    assert np.allclose(out.signal, [3.0, 4.0])
    assert out.sampling_rate == 2.0
    assert out.meta.base_name == "rec"


def test_slice_time_closed_both():
    s = _series()
    out = s.slice_time(1.0, 2.0, closed="both")
    assert np.allclose(out.time, [1.0, 1.5, 2.0])


def test_slice_time_rejects_unknown_closed():
    with pytest.raises(ValueError):
        _series().slice_time(0.0, 1.0, closed="sideways")


def test_window_matches_start_plus_duration():
    s = _series()
    assert s.window(1.0, 1.0).pairs() == [(1.0, 3.0), (1.5, 4.0)]
    assert s.window(10.0, 5.0).n == 0

    with pytest.raises(InvalidConfigError):
        s.window(0.0, -1.0)


def test_slice_time_empty_input_returns_self():
    s = CombinedSeries(time=np.array([]), signal=np.array([]))
    assert s.slice_time(0.0, 1.0) is s
    assert s.t_start is None and s.t_end is None
    assert s.duration == 0.0


def test_to_numpy_copy_flag():
    s = _series(n=3)

    t_view, v_view = s.to_numpy(copy=False)
    t_cp, v_cp = s.to_numpy(copy=True)

    assert t_view is s.time and v_view is s.signal
    assert t_cp is not s.time and v_cp is not s.signal
    assert np.allclose(t_cp, s.time) and np.allclose(v_cp, s.signal)


def test_to_frame_columns_and_dtypes():
    df = _series(n=3).to_frame()
    assert isinstance(df, pd.DataFrame)
    assert list(df.columns) == ["time", "signal"]
    assert df["time"].dtype == np.float64
    assert df["signal"].dtype == np.float32
    assert df["signal"].tolist() == [1.0, 2.0, 3.0]


def test_duration_does_not_depend_on_known_rate():
    with_rate = _series(n=6, rate=2.0)
    without_rate = CombinedSeries(time=with_rate.time, signal=with_rate.signal)

    assert with_rate.duration == without_rate.duration == 2.5
    assert _series(n=1).duration == 0.0


def test_copy_false_takes_ownership():
    t = np.array([0.0, 0.5, 1.0])
    v = np.array([1.0, 2.0, 3.0], dtype=np.float32)

    owned = CombinedSeries(time=t, signal=v, copy=False)
    assert owned.time is t and owned.signal is v
    assert not t.flags.writeable

    t2 = np.array([0.0, 0.5])
    copied = CombinedSeries(time=t2, signal=np.array([1.0, 2.0], dtype=np.float32))
    assert copied.time is not t2
    assert t2.flags.writeable
