import numpy as np
import pytest

import pyWGS84.settings as settings


@pytest.fixture(autouse=True)
def restore_settings():
    """ Restores process-wide settings after each test """
    state = settings.get_settings()
    yield
    settings._state.bounds_warnings = state['bounds_warnings']
    settings._state.geodetic_method = state['geodetic_method']
    settings._state.max_iterations = state['max_iterations']


@pytest.fixture(scope="session")
def grid():
    """ Returns a longitude/latitude/height grid within +/-80 degrees """
    lon, lat, h = np.meshgrid(
        np.linspace(-179.0, 179.0, 13),
        np.linspace(-80.0, 80.0, 9),
        np.array([-10000.0, 0.0, 10000.0]),
    )
    return lon.ravel(), lat.ravel(), h.ravel()
