"""Testing fakes – in-memory doubles."""
from pagination_options.testing.fakes.logger import FakeLogger

__all__ = ["FakeLogger"]
