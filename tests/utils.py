class AsyncIterator:
    """Stand-in for the async generator returned by ``GitHubAPI.getiter``."""

    def __init__(self, items, exc: Exception | None = None):
        self._items = list(items)
        self._exc = exc

    def __aiter__(self):
        return self

    async def __anext__(self):
        if self._items:
            return self._items.pop(0)
        if self._exc is not None:
            exc, self._exc = self._exc, None
            raise exc
        raise StopAsyncIteration
