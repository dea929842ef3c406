import pytest

import tincture_colorengine
import tincture_pccs


@pytest.fixture
def restore_config():
    """Restores the module-level conversion switches after a test."""
    adaptation = tincture_colorengine.get_adaptation_method()
    method = tincture_pccs.get_conversion_method()
    yield
    tincture_colorengine.set_adaptation_method(adaptation)
    tincture_pccs.set_conversion_method(method)
