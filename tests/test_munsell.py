import warnings

import numpy as np
import pytest

from tincture_colorengine import ILLUMINANT_C_XY, REF_WHITE_D65
from tincture_munsell import (
    MONO_LIMIT_C,
    ConversionResult,
    MunsellEngine,
    _calc_idp_hc,
    _inside,
    _interpolation_r,
    default_engine,
    from_xyz,
    from_xyz_batch,
    to_string,
    to_xyz,
    to_xyz_batch,
    v2y,
    y2v,
)
from tincture_munsell_table import default_table


hvc_tolerance = 0.1
value_tolerance = 0.01

def hue_distance(h0, h1):
    d = abs(h0 - h1) % 100.0
    return min(d, 100.0 - d)


# --- Value <-> luminance ---

def test_v2y_known_values():
    assert v2y(0.0) == 0.0
    assert v2y(1.0) == pytest.approx(0.0121)
    assert v2y(5.0) == pytest.approx(0.197667, abs=1e-6)
    assert v2y(10.0) == pytest.approx(1.017677, abs=1e-6)

def test_v2y_monotonic():
    ys = [v2y(v) for v in np.linspace(0.0, 10.0, 201)]
    assert all(b > a for a, b in zip(ys, ys[1:]))

def test_y2v_round_trip():
    for v in np.concatenate([np.linspace(0.05, 1.0, 20), np.linspace(1.05, 10.0, 60)]):
        assert abs(y2v(v2y(v)) - v) < value_tolerance

def test_y2v_monotonic():
    ys = np.linspace(0.013, 1.0, 100)
    vs = [y2v(y) for y in ys]
    assert all(b > a for a, b in zip(vs, vs[1:]))

def test_y2v_linear_branch():
    assert y2v(0.0) == 0.0
    assert y2v(0.00605) == pytest.approx(0.5)

def test_y2v_warns_when_not_converging():
    # no root between the linear and cubic branches
    with pytest.warns(RuntimeWarning):
        v = y2v(0.0122)
    assert 0.9 < v < 1.1

def test_y2v_converges_silently():
    y2v(0.5)
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        y2v(0.5)
    assert not [w for w in caught if issubclass(w.category, RuntimeWarning)]


# --- Geometry ---

def test_inside_clockwise_triangle():
    tri = (0.0, 0.0, 0.0, 1.0, 1.0, 0.0)
    assert _inside(0.2, 0.2, *tri)
    assert _inside(0.0, 0.0, *tri)
    assert _inside(0.5, 0.5, *tri)
    assert not _inside(1.0, 1.0, *tri)
    assert not _inside(-0.1, 0.5, *tri)

def test_interpolation_r_unit_square():
    # A=(0,0) D=(1,0) B=(0,1) C=(1,1)
    h, v = _interpolation_r(0.25, 0.75, 0.0, 0.0, 1.0, 0.0, 0.0, 1.0, 1.0, 1.0)
    assert h == pytest.approx(0.75)
    assert v == pytest.approx(0.25)

def test_interpolation_r_rejects_outside():
    assert _interpolation_r(2.0, 2.0, 0.0, 0.0, 1.0, 0.0, 0.0, 1.0, 1.0, 1.0) == (-1.0, -1.0)

def test_interpolation_r_degenerate_corner():
    # A == B (neutral corner), fan towards D=(1,0) and C=(0.8,0.6)
    h, v = _interpolation_r(0.45, 0.15, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.8, 0.6)
    assert 0.0 <= h <= 1.0
    assert 0.0 < v <= 1.0
    x = v * ((1.0 - h) * 1.0 + h * 0.8)
    y = v * ((1.0 - h) * 0.0 + h * 0.6)
    assert x == pytest.approx(0.45)
    assert y == pytest.approx(0.15)

def test_calc_idp_hc_wraps_hue():
    h, c = _calc_idp_hc((95.0, 4.0), (5.0, 4.0), 0.5)
    assert hue_distance(h, 0.0) < 1e-9
    assert 0.0 <= h < 100.0
    h, _ = _calc_idp_hc((90.0, 2.0), (10.0, 2.0), 0.25)
    assert h == pytest.approx(95.0)
    h, _ = _calc_idp_hc((10.0, 2.0), (90.0, 2.0), 0.25)
    assert h == pytest.approx(5.0)

def test_calc_idp_hc_collapses_low_chroma():
    _, c = _calc_idp_hc((10.0, 0.0), (20.0, 0.08), 0.5)
    assert c == 0.0


# --- Scans ---

def test_scan_hc_inside_and_outside_gamut():
    engine = default_engine()
    table = default_table()
    a = np.array(table.get_xy(8, 200, 12))
    b = np.array(table.get_xy(8, 200, 14))
    d = np.array(table.get_xy(8, 225, 12))
    e = np.array(table.get_xy(8, 225, 14))

    # bilinear point, a fifth of the way to 2.5Y and three tenths to chroma 14
    u, w = 0.2, 0.3
    inside = (1 - u) * (1 - w) * a + (1 - u) * w * b + u * (1 - w) * d + u * w * e
    h, c, saturated = engine.scan_hc(*inside, 8)
    assert not saturated
    assert h == pytest.approx(20.5, abs=1e-6)
    assert c == pytest.approx(12.6, abs=1e-6)

    # 10YR ends at chroma 16
    edge = np.array(table.get_xy(8, 200, 16))
    outside = edge + 3.0 * (edge - b)
    _, _, saturated = engine.scan_hc(*outside, 8)
    assert saturated

def test_scan_hc_recovers_samples():
    engine = default_engine()
    table = default_table()
    for ht, c in [(50, 4), (200, 10), (700, 6), (975, 8)]:
        x, y = table.get_xy(8, ht, c)
        h_out, c_out, saturated = engine.scan_hc(x, y, 8)
        assert not saturated
        assert hue_distance(h_out, ht / 10.0) < 1e-6
        assert c_out == pytest.approx(c, abs=1e-6)

@pytest.mark.parametrize("vi, hs", [(8, 1), (8, 18), (8, 32), (8, 35), (6, 31), (11, 0), (11, 17)])
def test_scan_hc_saturation_boundary(vi, hs):
    engine = default_engine()
    table = default_table()
    ht = hs * 25
    c_max = table.get_max_c(vi, ht)
    edge = np.array(table.get_xy(vi, ht, c_max))
    inner = np.array(table.get_xy(vi, ht, c_max - 2))
    edge_next = np.array(table.get_xy(vi, ht + 25, c_max))
    inner_next = np.array(table.get_xy(vi, ht + 25, c_max - 2))

    # just inside the outermost cell, next to the boundary sample
    u, w = 0.01, 0.99
    p = (1 - u) * (1 - w) * inner + (1 - u) * w * edge + u * (1 - w) * inner_next + u * w * edge_next
    h, c, saturated = engine.scan_hc(*p, vi)
    assert not saturated
    assert hue_distance(h, (ht + 25 * u) / 10.0) < 1e-6
    assert c == pytest.approx(c_max - 2 * (1 - w), abs=1e-6)

    # a hundredth of a chroma step beyond the boundary sample
    p = edge + 0.01 * (edge - inner)
    assert engine.scan_hc(*p, vi)[2]

@pytest.mark.parametrize("vi, hs, hs_low", [(8, 24, 25), (11, 16, 15), (5, 16, 15)])
def test_scan_hc_spike_vertex_is_approximated(vi, hs, hs_low):
    # A boundary sample reaching past its lower neighbour leaves a sliver between
    # the two hues that no complete cell covers: it is approximated as saturated.
    engine = default_engine()
    table = default_table()
    ht, ht_low = hs * 25, hs_low * 25
    c_max = table.get_max_c(vi, ht)
    edge = np.array(table.get_xy(vi, ht, c_max))
    inner = np.array(table.get_xy(vi, ht, c_max - 2))
    low = np.array(table.get_xy(vi, ht_low, table.get_max_c(vi, ht_low)))

    p = edge + 0.1 * (low - edge) + 0.05 * (inner - edge)
    assert engine.scan_hc(*p, vi)[2]

@pytest.mark.parametrize("vi", [0, 5, 8, 13])
def test_scan_hc_searches_whole_circle_near_neutral(vi):
    engine = default_engine()
    table = default_table()
    (q_ht, q_c), _ = table.neighbors(vi, ILLUMINANT_C_XY, 1)[0]
    white = np.array(ILLUMINANT_C_XY)
    q = np.array(table.get_xy(vi, q_ht, q_c))

    # step off the neutral point away from its nearest sample
    p = white - 1e-3 * (q - white) / np.linalg.norm(q - white)
    assert table.neighbors(vi, p, 1)[0][0] == (q_ht, q_c)

    h, c, saturated = engine.scan_hc(*p, vi)
    assert not saturated
    assert hue_distance(h, q_ht / 10.0) > 12.5
    assert 0.0 < c < 0.2

def test_scan_xy_hits_samples():
    engine = default_engine()
    table = default_table()
    x, y, inside = engine.scan_xy(5.0, 4.0, 8)
    assert inside
    assert np.allclose((x, y), table.get_xy(8, 50, 4))

def test_scan_xy_clamps_beyond_boundary():
    engine = default_engine()
    table = default_table()
    x, y, inside = engine.scan_xy(20.0, 30.0, 8)
    assert not inside
    assert np.allclose((x, y), table.get_xy(8, 200, 16))

def test_scan_xy_fan_between_unequal_hues():
    engine = default_engine()
    # 10YR reaches chroma 16, 2.5Y only 14
    _, _, inside = engine.scan_xy(20.5, 15.0, 8)
    assert inside


# --- Bridge ---

def test_neutral_munsell_is_illuminant_c():
    engine = default_engine()
    x, y, Y, saturated = engine.munsell_to_xyy(-1.0, 5.0, 0.0)
    assert (x, y) == ILLUMINANT_C_XY
    assert Y == pytest.approx(v2y(5.0))
    assert not saturated

def test_black_with_chroma_is_saturated():
    engine = default_engine()
    assert engine.munsell_to_xyy(5.0, 0.0, 4.0)[3]
    assert not engine.munsell_to_xyy(5.0, 0.0, 0.0)[3]

def test_negative_value_is_clamped():
    engine = default_engine()
    x, y, Y, saturated = engine.munsell_to_xyy(5.0, -1.0, 0.0)
    assert Y == 0.0
    assert saturated

def test_value_above_maximum_is_saturated():
    engine = default_engine()
    assert not engine.munsell_to_xyy(5.0, 10.0, 2.0)[3]
    assert engine.munsell_to_xyy(5.0, 10.5, 2.0)[3]

def test_below_first_level_is_saturated():
    engine = default_engine()
    assert engine.munsell_to_xyy(5.0, 0.1, 2.0)[3]

def test_illuminant_c_chromaticity_is_neutral():
    engine = default_engine()
    h, v, c, saturated = engine.xyy_to_munsell(*ILLUMINANT_C_XY, v2y(6.0))
    assert c == 0.0
    assert v == pytest.approx(6.0, abs=value_tolerance)
    assert not saturated

def test_luminance_above_top_level():
    engine = default_engine()
    h, v, c, saturated = engine.xyy_to_munsell(0.31, 0.32, 1.5)
    assert v == 10.0
    assert saturated

@pytest.mark.parametrize("Y", [v2y(10.0), 1.05, 1.2])
def test_illuminant_c_above_top_level_is_neutral(Y):
    engine = default_engine()
    h, v, c, saturated = engine.xyy_to_munsell(*ILLUMINANT_C_XY, Y)
    assert (h, c) == (0.0, 0.0)
    assert v == pytest.approx(10.0, abs=1e-3)
    assert saturated == (Y > v2y(10.0) + 1e-4)

def test_top_level_collapses_low_chroma():
    res = from_xyz(REF_WHITE_D65 * 1.02)
    h, v, c = res.color
    assert c == 0.0
    assert v == 10.0
    assert to_string(res.color).startswith("N ")


# --- Public API ---

def test_round_trip_in_gamut():
    hvc = np.array([5.0, 5.0, 4.0])
    fwd = to_xyz(hvc)
    assert isinstance(fwd, ConversionResult)
    assert not fwd.saturated
    back = from_xyz(fwd.color)
    assert not back.saturated
    assert np.allclose(back.color, hvc, atol=hvc_tolerance)

@pytest.mark.parametrize("hvc", [
    (12.5, 6.0, 8.0),
    (45.0, 4.0, 6.0),
    (72.5, 3.0, 10.0),
    (99.5, 5.0, 6.0),
    (0.5, 7.0, 4.0),
])
def test_round_trips(hvc):
    fwd = to_xyz(hvc)
    back = from_xyz(fwd.color)
    assert not fwd.saturated
    assert not back.saturated
    h, v, c = back.color
    assert hue_distance(h, hvc[0]) < hvc_tolerance * 2
    assert abs(v - hvc[1]) < hvc_tolerance
    assert abs(c - hvc[2]) < hvc_tolerance * 2

def test_hue_range():
    for hvc in [(99.9, 5.0, 6.0), (0.1, 5.0, 6.0)]:
        h = from_xyz(to_xyz(hvc).color).color[0]
        assert 0.0 <= h < 100.0

def test_black():
    res = from_xyz([0.0, 0.0, 0.0])
    assert np.allclose(res.color, 0.0)
    assert not res.saturated
    assert np.allclose(to_xyz([0.0, 0.0, 0.0]).color, 0.0)

def test_d65_white_is_near_neutral():
    res = from_xyz(REF_WHITE_D65)
    h, v, c = res.color
    assert c < MONO_LIMIT_C
    assert v == pytest.approx(9.93, abs=0.02)
    assert not res.saturated
    assert to_string(res.color).startswith("N ")

def test_neutral_round_trip():
    xyz = to_xyz([-1.0, 7.0, 0.0]).color
    h, v, c = from_xyz(xyz).color
    assert c < MONO_LIMIT_C
    assert v == pytest.approx(7.0, abs=value_tolerance)

def test_vivid_colour_is_saturated():
    assert to_xyz([5.0, 5.0, 60.0]).saturated

def test_out_buffer_is_filled():
    out = np.zeros(3)
    res = from_xyz(to_xyz([5.0, 5.0, 4.0]).color, out=out)
    assert res.color is out
    assert np.allclose(out, [5.0, 5.0, 4.0], atol=hvc_tolerance)

    xyz_out = np.zeros(3)
    assert to_xyz([5.0, 5.0, 4.0], out=xyz_out).color is xyz_out

def test_result_unpacks():
    color, saturated = to_xyz([5.0, 5.0, 4.0])
    assert color.shape == (3,)
    assert saturated is False

def test_shape_errors():
    with pytest.raises(ValueError):
        from_xyz([0.1, 0.2])
    with pytest.raises(ValueError):
        to_xyz(np.zeros((2, 3)))
    with pytest.raises(ValueError):
        from_xyz([0.1, 0.2, 0.3], out=np.zeros(4))

def test_adaptation_override():
    xyz = to_xyz([5.0, 5.0, 4.0]).color
    vk = from_xyz(xyz, adaptation="von_kries").color
    bf = from_xyz(xyz, adaptation="bradford").color
    assert not np.allclose(vk, bf, atol=1e-9)
    assert np.allclose(vk, bf, atol=0.5)

def test_custom_engine_shares_default_table():
    assert MunsellEngine().table is default_table()


# --- Batch API ---

def test_from_xyz_batch_matches_scalar():
    hvcs = np.array([[5.0, 5.0, 4.0], [45.0, 4.0, 6.0], [5.0, 5.0, 60.0], [-1.0, 3.0, 0.0]])
    xyz, saturated = to_xyz_batch(hvcs)
    assert xyz.shape == (4, 3)
    assert saturated.tolist() == [False, False, True, False]
    for row, sat, hvc in zip(xyz, saturated, hvcs):
        single = to_xyz(hvc)
        assert np.allclose(row, single.color)
        assert sat == single.saturated

    # in-gamut chromatic rows only: boundary and neutral hues are ill-conditioned
    hvc_back, sat_back = from_xyz_batch(xyz[:2])
    assert hvc_back.shape == (2, 3)
    for row, sat, x in zip(hvc_back, sat_back, xyz[:2]):
        single = from_xyz(x)
        assert np.allclose(row, single.color)
        assert sat == single.saturated

def test_batch_single_colour():
    hvc, saturated = from_xyz_batch(REF_WHITE_D65)
    assert hvc.shape == (3,)
    assert not saturated

def test_batch_shape_error():
    with pytest.raises(ValueError):
        from_xyz_batch(np.zeros((5, 2)))
