class CaseInsensitiveDict:
    """
    Insertion-ordered mapping whose keys are compared through ``key``
    (``str.casefold`` by default). Iteration yields keys as first inserted.
    """

    def __init__(self, key=str.casefold):
        self._key = key
        self._store = {}

    def __contains__(self, name):
        return self._key(name) in self._store

    def __getitem__(self, name):
        return self._store[self._key(name)][1]

    def __setitem__(self, name, value):
        folded = self._key(name)
        original = self._store[folded][0] if folded in self._store else name
        self._store[folded] = (original, value)

    def __iter__(self):
        return (original for original, _ in self._store.values())

    def __len__(self):
        return len(self._store)

    def get(self, name, default=None):
        entry = self._store.get(self._key(name))
        return default if entry is None else entry[1]

    def pop(self, name, default=None):
        entry = self._store.pop(self._key(name), None)
        return default if entry is None else entry[1]

    def items(self):
        return list(self._store.values())

