import numpy as np
import pytest

import tincture_pccs as pccs
from tincture_pccs import ConversionMethod, Tone


hue_tolerance = 1e-9
chroma_tolerance = 1e-3


# --- Achromatic ---

def test_achromatic_passes_through():
    assert pccs.from_munsell([-1.0, 5.0, 0.0]).tolist() == [-1.0, 5.0, 0.0]
    assert pccs.to_munsell([-1.0, 7.0, 0.0]).tolist() == [-1.0, 7.0, 0.0]

def test_low_chroma_has_no_saturation():
    h, l, s = pccs.from_munsell([10.0, 5.0, 0.01])
    assert s == 0.0
    assert l == 5.0
    assert 0.0 <= h < 24.0
    assert pccs.to_munsell([6.0, 5.0, 0.005])[2] == 0.0

def test_zero_value_has_no_saturation():
    assert pccs.from_munsell([10.0, 0.0, 4.0])[2] == 0.0


# --- Accurate method ---

def test_accurate_hue_table():
    assert pccs.from_munsell([4.0, 5.0, 0.0])[0] == pytest.approx(2.0, abs=hue_tolerance)
    assert pccs.to_munsell([2.0, 5.0, 0.0])[0] == pytest.approx(4.0, abs=hue_tolerance)
    assert pccs.from_munsell([25.0, 5.0, 0.0])[0] == pytest.approx(8.0, abs=hue_tolerance)

def test_accurate_hue_wraps():
    assert pccs.from_munsell([98.0, 5.0, 0.0])[0] == pytest.approx(0.5, abs=hue_tolerance)
    assert pccs.to_munsell([0.5, 5.0, 0.0])[0] == pytest.approx(98.0, abs=hue_tolerance)
    assert pccs.to_munsell([24.0, 5.0, 0.0])[0] == pytest.approx(96.0, abs=hue_tolerance)

@pytest.mark.parametrize("hvc", [
    (5.0, 6.0, 8.0),
    (25.0, 8.0, 10.0),
    (45.0, 4.0, 6.0),
    (65.0, 5.0, 8.0),
    (85.0, 3.0, 4.0),
])
def test_accurate_round_trip(hvc):
    hls = pccs.from_munsell(hvc, method=ConversionMethod.ACCURATE)
    assert hls[2] > 0.0
    back = pccs.to_munsell(hls, method=ConversionMethod.ACCURATE)
    assert back[0] == pytest.approx(hvc[0], abs=hue_tolerance)
    assert back[1] == hvc[1]
    assert back[2] == pytest.approx(hvc[2], abs=chroma_tolerance)


# --- Concise method ---

@pytest.mark.parametrize("H", [4.0, 25.0, 50.0, 75.0])
def test_concise_hue_close_to_accurate(H):
    accurate = pccs.from_munsell([H, 5.0, 0.0], method=ConversionMethod.ACCURATE)[0]
    concise = pccs.from_munsell([H, 5.0, 0.0], method=ConversionMethod.CONCISE)[0]
    assert abs(accurate - concise) < 0.5

def test_method_override_matches_setter(restore_config):
    hvc = [25.0, 6.0, 8.0]
    override = pccs.from_munsell(hvc, method=ConversionMethod.CONCISE)
    pccs.set_conversion_method(ConversionMethod.CONCISE)
    assert pccs.get_conversion_method() is ConversionMethod.CONCISE
    assert np.allclose(pccs.from_munsell(hvc), override)
    assert np.allclose(pccs.from_munsell(hvc, method="concise"), override)
    assert not np.allclose(pccs.from_munsell(hvc, method=ConversionMethod.ACCURATE), override)

def test_set_conversion_method_rejects_unknown(restore_config):
    with pytest.raises(ValueError):
        pccs.set_conversion_method("bogus")
    assert pccs.get_conversion_method() is ConversionMethod.ACCURATE

def test_out_buffer():
    out = np.zeros(3)
    res = pccs.from_munsell([25.0, 6.0, 8.0], out=out)
    assert res is out
    assert out[1] == 6.0


# --- Tones ---

@pytest.mark.parametrize("hls, expected", [
    ((8.0, 8.0, 2.0), Tone.ltg),
    ((8.0, 9.0, 2.0), Tone.p),
    ((8.0, 2.0, 2.0), Tone.dkg),
    ((8.0, 5.0, 2.0), Tone.g),
    ((8.0, 9.0, 3.0), Tone.p_p),
    ((8.0, 9.0, 5.0), Tone.lt),
    ((8.0, 9.0, 6.0), Tone.lt_p),
    ((8.0, 7.0, 5.0), Tone.sf),
    ((8.0, 6.0, 5.0), Tone.d),
    ((8.0, 3.0, 5.0), Tone.dk),
    ((8.0, 9.0, 7.5), Tone.b),
    ((8.0, 7.0, 7.5), Tone.s),
    ((8.0, 5.0, 7.5), Tone.dp),
    ((8.0, 5.0, 9.0), Tone.v),
    ((8.0, 5.0, 0.5), Tone.none),
])
def test_tone(hls, expected):
    assert pccs.tone(hls) is expected

def test_tone_labels():
    assert Tone.lt_p.label == "lt+"
    assert Tone.p_p.label == "p+"
    assert Tone.v.label == "v"


# --- Tone coordinates ---

def test_relative_lightness_at_yellow():
    # the hue term vanishes at h = 8
    assert pccs.relative_lightness((8.0, 7.0, 4.0)) == pytest.approx(6.0)

@pytest.mark.parametrize("hls", [(2.0, 4.5, 9.0), (14.0, 6.0, 5.0), (20.0, 3.0, 7.0)])
def test_lightness_inverse(hls):
    L = pccs.relative_lightness(hls)
    assert pccs.absolute_lightness((hls[0], L, hls[2])) == pytest.approx(hls[1])

    t = pccs.to_tone_coordinate(hls)
    assert t[0] == hls[0] and t[2] == hls[2]
    assert t[1] == pytest.approx(L)
    assert np.allclose(pccs.to_normal_coordinate(t), hls)


# --- Notation ---

@pytest.mark.parametrize("hls, text", [
    ((2.0, 4.5, 9.0), "v2.0 2.0:R-4.5-9.0s"),
    ((2.0, 4.5, 0.5), "2.0:R-4.5-0.5s"),
    ((-1.0, 9.6, 0.0), "W N-9.6"),
    ((-1.0, 1.0, 0.0), "Bk N-1.0"),
    ((-1.0, 5.0, 0.0), "Gy-5.0 N-5.0"),
    ((12.0, 5.0, 0.0), "Gy-5.0 N-5.0"),
])
def test_to_string(hls, text):
    assert pccs.to_string(hls) == text

@pytest.mark.parametrize("hls, name", [
    ((24.0, 5.0, 5.0), "RP"),
    ((0.2, 5.0, 5.0), "RP"),
    ((12.0, 5.0, 5.0), "G"),
    ((2.0, 5.0, 5.0), "R"),
    ((2.5, 5.0, 5.0), "yR"),
    ((4.5, 5.0, 5.0), "O"),
    ((23.5, 5.0, 5.0), "RP"),
    ((-1.0, 5.0, 0.0), "N"),
])
def test_to_hue_string(hls, name):
    assert pccs.to_hue_string(hls) == name

def test_to_tone_string():
    assert pccs.to_tone_string((8.0, 5.0, 9.0)) == "v"
    assert pccs.to_tone_string((8.0, 9.0, 3.0)) == "p+"
    assert pccs.to_tone_string((-1.0, 9.8, 0.0)) == "W"
    assert pccs.to_tone_string((-1.0, 4.0, 0.0)) == "Gy"
