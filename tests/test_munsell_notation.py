import pytest

from tincture_munsell import (
    MunsellParseError,
    hue_name_to_hue_value,
    hue_value_to_hue_name,
    parse_munsell,
    to_string,
)


@pytest.mark.parametrize("name, hue", [
    ("5R", 5.0),
    ("10RP", 0.0),
    ("2.5YR", 12.5),
    ("10PB", 80.0),
    ("7.5GY", 37.5),
    (" 5BG ", 55.0),
    ("N", -1.0),
])
def test_hue_name_to_hue_value(name, hue):
    assert hue_name_to_hue_value(name) == pytest.approx(hue)

@pytest.mark.parametrize("name", ["5X", "", "R", "12R", "5 R5"])
def test_hue_name_invalid(name):
    with pytest.raises(MunsellParseError):
        hue_name_to_hue_value(name)

def test_parse_error_is_value_error():
    assert issubclass(MunsellParseError, ValueError)


@pytest.mark.parametrize("hue, chroma, name", [
    (5.0, 4.0, "5R"),
    (0.0, 4.0, "10RP"),
    (100.0, 4.0, "10RP"),
    (12.5, 4.0, "2.5YR"),
    (10.0, 4.0, "10R"),
    (-1.0, 4.0, "N"),
    (5.0, 0.0, "N"),
])
def test_hue_value_to_hue_name(hue, chroma, name):
    assert hue_value_to_hue_name(hue, chroma) == name

def test_hue_name_round_trip():
    for k in range(40):
        hue = 2.5 * k
        name = hue_value_to_hue_name(hue, 4.0)
        assert hue_name_to_hue_value(name) == pytest.approx(hue % 100.0)


def test_to_string():
    assert to_string([5.0, 4.0, 14.0]) == "5R 4.0/14.0"
    assert to_string([-1.0, 5.0, 0.0]) == "N 5.0"
    assert to_string([30.0, 5.0, 0.01]) == "N 5.0"

@pytest.mark.parametrize("text, hvc", [
    ("5R 4/14", (5.0, 4.0, 14.0)),
    ("N 5.0", (-1.0, 5.0, 0.0)),
    ("2.5yr 6/8.5", (12.5, 6.0, 8.5)),
    ("N5/", (-1.0, 5.0, 0.0)),
    ("N 3/0", (-1.0, 3.0, 0.0)),
    ("10RP 2.0 / 6.0", (0.0, 2.0, 6.0)),
])
def test_parse_munsell(text, hvc):
    assert parse_munsell(text) == pytest.approx(hvc)

@pytest.mark.parametrize("text", ["garbage", "5R 4", "5R /4", "5Q 4/2", "N"])
def test_parse_munsell_invalid(text):
    with pytest.raises(MunsellParseError):
        parse_munsell(text)

def test_parse_round_trip():
    for hvc in [(22.5, 6.0, 8.0), (5.0, 4.0, 14.0), (77.5, 3.5, 2.0), (-1.0, 7.0, 0.0)]:
        assert parse_munsell(to_string(hvc)) == pytest.approx(hvc)
