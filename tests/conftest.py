import pytest
from hypothesis import HealthCheck, settings

from .helpers import Spy

# Hypothesis builds its unicode charmap cache on first use of st.text, which
# trips the too_slow health check on a fresh checkout.
settings.register_profile("default", suppress_health_check=[HealthCheck.too_slow])
settings.load_profile("default")


@pytest.fixture
def spy():
    return Spy()
