import numpy as np
import pytest

import tincture_munsell as munsell
import tincture_pccs as pccs
from tincture_colorengine import REF_WHITE_D65, ColorSpaceEngine
from tincture_conversions import ColorSpace, conversion_path, convert
from tincture_munsell import ConversionResult


def test_conversion_path():
    assert conversion_path(ColorSpace.XYY, ColorSpace.PCCS) == (
        ColorSpace.XYY, ColorSpace.XYZ, ColorSpace.MUNSELL, ColorSpace.PCCS,
    )
    assert conversion_path(ColorSpace.PCCS, ColorSpace.XYZ) == (
        ColorSpace.PCCS, ColorSpace.MUNSELL, ColorSpace.XYZ,
    )
    assert conversion_path(ColorSpace.XYZ, ColorSpace.XYZ) == (ColorSpace.XYZ,)

def test_identity_conversion_copies():
    color = np.array([0.2, 0.3, 0.4])
    res = convert(color, "xyz", "xyz")
    assert isinstance(res, ConversionResult)
    assert np.array_equal(res.color, color)
    assert res.color is not color
    assert not res.saturated

def test_munsell_to_xyz_matches_engine():
    res = convert([5.0, 5.0, 4.0], ColorSpace.MUNSELL, ColorSpace.XYZ)
    direct = munsell.to_xyz([5.0, 5.0, 4.0])
    assert np.allclose(res.color, direct.color)
    assert not res.saturated

def test_xyy_to_xyz_matches_engine():
    xyy = np.array([0.35, 0.4, 0.3])
    res = convert(xyy, "xyy", "xyz")
    assert np.allclose(res.color, ColorSpaceEngine.xyY_to_xyz(xyy))

def test_pccs_to_munsell_matches_module():
    hls = [8.0, 7.0, 6.0]
    res = convert(hls, "pccs", "munsell")
    assert np.allclose(res.color, pccs.to_munsell(hls))

def test_saturation_propagates():
    res = convert([5.0, 5.0, 60.0], "munsell", "xyy")
    assert res.saturated
    assert res.color.shape == (3,)

def test_white_to_pccs():
    color, saturated = convert(REF_WHITE_D65, ColorSpace.XYZ, ColorSpace.PCCS)
    assert not saturated
    assert pccs.to_tone_string(color) == "W"

def test_invalid_space():
    with pytest.raises(ValueError):
        convert([0.2, 0.3, 0.4], "lab", "xyz")

def test_invalid_shape():
    with pytest.raises(ValueError):
        convert([0.2, 0.3], "xyz", "xyy")
