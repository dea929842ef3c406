import numpy as np
import pytest

from tincture_colorengine import ILLUMINANT_C_XY
from tincture_munsell_data import TBL_SRC_MIN, TBL_V
from tincture_munsell_table import (
    CHROMA_STEPS,
    HUE_STEPS,
    MunsellTableError,
    build_table,
    default_table,
)


# Value 5 (index 8): largest tabulated chroma per hue step
max_c_v5 = {0: 28, 4: 26, 5: 20, 8: 16, 9: 14, 13: 14, 16: 32, 31: 34, 34: 40, 39: 30}

def test_shapes():
    table = default_table()
    assert table.size == len(TBL_V) == 14
    assert table.v_max == 10.0
    assert table.xy.shape == (14, HUE_STEPS, CHROMA_STEPS, 2)
    assert table.present.shape == (14, HUE_STEPS, CHROMA_STEPS)
    assert table.max_c.shape == (14, HUE_STEPS)
    assert len(table.trees) == len(table.keys) == 14

def test_default_table_is_cached():
    assert default_table() is default_table()

def test_max_chroma_v5():
    table = default_table()
    for hue_step, max_c in max_c_v5.items():
        assert table.max_c[8, hue_step] == max_c
        assert table.get_max_c(8, hue_step * 25) == max_c

def test_max_chroma_even_and_matches_presence():
    table = default_table()
    assert np.all(table.max_c % 2 == 0)
    assert not table.present[:, :, 0].any()
    for vi in range(table.size):
        for hi in range(HUE_STEPS):
            n = table.max_c[vi, hi] // 2
            assert table.present[vi, hi, 1:n + 1].all()
            assert not table.present[vi, hi, n + 1:].any()
            assert np.isnan(table.xy[vi, hi, n + 1:]).all()

def test_known_samples():
    table = default_table()
    # 10YR 5/14 and 5/16
    assert np.allclose(table.get_xy(8, 200, 14), (0.539, 0.468))
    assert np.allclose(table.get_xy(8, 200, 16), (0.552, 0.477))
    # 10RP 10/2 and 10/4
    assert np.allclose(table.get_xy(13, 0, 2), (0.322, 0.316))
    assert np.allclose(table.get_xy(13, 0, 4), (0.342, 0.315))

def test_get_xy_neutral_and_absent():
    table = default_table()
    assert table.get_xy(8, 125, 0) == ILLUMINANT_C_XY
    assert table.get_xy(8, 200, 18) is None
    assert table.get_xy(8, 200, 60) is None

def test_get_xy_wraps_hue():
    table = default_table()
    assert table.get_xy(8, 1000, 4) == table.get_xy(8, 0, 4)
    assert table.get_xy(8, -25, 4) == table.get_xy(8, 975, 4)
    assert table.get_max_c(8, 1025) == table.get_max_c(8, 25)

def test_lower_index():
    table = default_table()
    assert table.lower_index(0.1) == -1
    assert table.lower_index(0.2) == 0
    assert table.lower_index(0.99) == 3
    assert table.lower_index(5.0) == 8
    assert table.lower_index(5.5) == 8
    assert table.lower_index(10.0) == 13

def test_neighbors_finds_sample():
    table = default_table()
    xy = table.get_xy(8, 200, 16)
    (key, dist), = table.neighbors(8, xy, 1)
    assert key == (200.0, 16.0)
    assert dist == pytest.approx(0.0, abs=1e-12)

    pair = table.neighbors(8, xy, 2)
    assert len(pair) == 2
    assert pair[0][1] <= pair[1][1]

def test_neighbors_small_level():
    table = build_table([1.0], [[(0, 300, 300)]])
    assert len(table.neighbors(0, (0.3, 0.3), 2)) == 1

def test_tables_are_read_only():
    table = default_table()
    with pytest.raises(ValueError):
        table.xy[0, 0, 1, 0] = 0.5
    with pytest.raises(ValueError):
        table.max_c[0, 0] = 2
    with pytest.raises(AttributeError):
        table.values = np.zeros(3)

def test_decoding_double_delta():
    table = build_table([1.0], [[(3, 300, 310, 10, -5, 2, 1)]])
    assert table.max_c[0, 3] == 6
    assert np.allclose(table.xy[0, 3, 1:4], [[0.300, 0.310], [0.610, 0.615], [0.922, 0.921]])

def test_idempotent_construction():
    a = build_table(TBL_V, TBL_SRC_MIN)
    b = build_table(TBL_V, TBL_SRC_MIN)
    assert np.array_equal(a.xy, b.xy, equal_nan=True)
    assert np.array_equal(a.present, b.present)
    assert np.array_equal(a.max_c, b.max_c)
    p = (0.4, 0.35)
    for vi in range(a.size):
        assert a.neighbors(vi, p, 3) == b.neighbors(vi, p, 3)

@pytest.mark.parametrize("tbl_v, src", [
    ([1.0, 2.0], [[(0, 300, 300)]]),                       # level count mismatch
    ([2.0, 1.0], [[(0, 300, 300)], [(0, 300, 300)]]),      # not increasing
    ([1.0], [[(0, 300, 300, 10)]]),                        # odd payload
    ([1.0], [[(40, 300, 300)]]),                           # hue step out of range
    ([1.0], [[(2, 300, 300), (2, 310, 310)]]),             # duplicate hue step
    ([1.0], [[]]),                                         # empty level
    ([1.0], [[(0,) + (1, 1) * 27]]),                       # too many chroma steps
])
def test_malformed_source(tbl_v, src):
    with pytest.raises(MunsellTableError):
        build_table(tbl_v, src)

def test_table_error_is_value_error():
    assert issubclass(MunsellTableError, ValueError)
