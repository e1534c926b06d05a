"""Testing support – fakes and property-based strategies.

The strategies need ``hypothesis``; import them from
:mod:`pagination_options.testing.strategies`.
"""

from pagination_options.testing.fakes import FakeLogger

__all__ = ["FakeLogger"]
