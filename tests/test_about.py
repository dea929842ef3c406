import __about__


def test_metadata_summary():
    meta = __about__.metadata_summary()
    assert meta["version"] == "0.1.0"
    assert meta["title"] == "Tincture"
    assert meta["license"] == "LGPL-3.0-or-later"
