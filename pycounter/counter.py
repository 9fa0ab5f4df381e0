import logging

logger = logging.getLogger('pycounter')


class Counter:
    """Just a simple counter.

    Holds the number of times :meth:`increment` has been called since the
    counter was created. The count starts at 0 and only ever grows by one.
    """

    def __init__(self):
        self._count = 0
        logger.debug("Created counter.")

    @property
    def count(self):
        """The number of increments since creation, read-only."""
        return self._count

    def increment(self):
        """Increments the counter by 1."""
        self._count += 1

    def get_count(self):
        """Returns the number of increments since creation."""
        return self._count

    def __repr__(self):
        return f"Counter(count={self._count})"
