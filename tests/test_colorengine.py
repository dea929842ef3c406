import numpy as np
import pytest

from tincture_colorengine import (
    D65_XY,
    REF_WHITE_C,
    REF_WHITE_D65,
    ChromaticAdaptation,
    ColorSpaceEngine,
    get_adaptation_method,
    set_adaptation_method,
)


xyz_tolerance = 1e-5

def test_xyz_to_xyY_white():
    x, y, Y = ColorSpaceEngine.xyz_to_xyY(REF_WHITE_D65)
    assert abs(x - 0.31273) < 1e-4
    assert abs(y - 0.32902) < 1e-4
    assert Y == 1.0

def test_xyz_to_xyY_black_takes_d65_chromaticity():
    xyY = ColorSpaceEngine.xyz_to_xyY([0.0, 0.0, 0.0])
    assert np.allclose(xyY, [D65_XY[0], D65_XY[1], 0.0])

def test_xyY_round_trip_batch():
    rng = np.random.default_rng(7)
    xyz = rng.uniform(0.01, 1.0, size=(64, 3))
    back = ColorSpaceEngine.xyY_to_xyz(ColorSpaceEngine.xyz_to_xyY(xyz))
    assert back.shape == (64, 3)
    assert np.allclose(xyz, back, atol=1e-12)

def test_xyY_zero_y_is_black():
    assert np.allclose(ColorSpaceEngine.xyY_to_xyz([0.3, 0.0, 0.5]), 0.0)

def test_shape_validation():
    with pytest.raises(ValueError):
        ColorSpaceEngine.xyz_to_xyY([1.0, 2.0])
    with pytest.raises(ValueError):
        ChromaticAdaptation.to_illuminant_c(np.zeros((2, 4)))

def test_d65_white_maps_to_c_white():
    white_c = ChromaticAdaptation.to_illuminant_c(REF_WHITE_D65)
    assert np.allclose(white_c, REF_WHITE_C, atol=1e-4)

@pytest.mark.parametrize("method", ["von_kries", "bradford"])
def test_illuminant_c_round_trip(method):
    xyz = np.array([[0.2, 0.3, 0.4], [0.9, 0.8, 0.1], [0.05, 0.02, 0.6]])
    there = ChromaticAdaptation.to_illuminant_c(xyz, method=method)
    back = ChromaticAdaptation.from_illuminant_c(there, method=method)
    assert np.allclose(back, xyz, atol=xyz_tolerance)

def test_bradford_maps_white_exactly():
    white_c = ChromaticAdaptation.to_illuminant_c(REF_WHITE_D65, method="bradford")
    assert np.allclose(white_c, REF_WHITE_C, atol=1e-9)

def test_adapt_same_white_is_identity():
    xyz = np.array([0.3, 0.4, 0.5])
    assert np.allclose(ChromaticAdaptation.adapt(xyz, REF_WHITE_C, REF_WHITE_C), xyz)

def test_bradford_method_adapts_between_whites():
    xyz = np.array([[0.2, 0.3, 0.4], [0.9, 0.8, 0.1]])
    to_c = ChromaticAdaptation.to_illuminant_c(xyz, method="bradford")
    assert np.allclose(to_c, ChromaticAdaptation.adapt(xyz, REF_WHITE_D65, REF_WHITE_C))
    from_c = ChromaticAdaptation.from_illuminant_c(xyz, method="bradford")
    assert np.allclose(from_c, ChromaticAdaptation.adapt(xyz, REF_WHITE_C, REF_WHITE_D65))

def test_unknown_method_override_is_rejected():
    with pytest.raises(ValueError):
        ChromaticAdaptation.to_illuminant_c(REF_WHITE_D65, method="cat02")

def test_set_adaptation_method(restore_config):
    xyz = np.array([0.4, 0.3, 0.2])
    set_adaptation_method("bradford")
    assert get_adaptation_method() == "bradford"
    assert np.allclose(
        ChromaticAdaptation.to_illuminant_c(xyz),
        ChromaticAdaptation.to_illuminant_c(xyz, method="bradford"),
    )

def test_set_adaptation_method_rejects_unknown(restore_config):
    with pytest.raises(ValueError):
        set_adaptation_method("cat02")
    assert get_adaptation_method() == "von_kries"
