"""Testing support – fakes, fixtures and hypothesis strategies.

Register the fixtures in your ``conftest.py``::

    pytest_plugins = ["aclock.testing.fixtures"]
"""

from aclock.testing.fakes import FakeClock

__all__ = ["FakeClock"]
