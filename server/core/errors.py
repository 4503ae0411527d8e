# server/core/errors.py


class StoreError(Exception):
    """Base class for failures raised by the data access layer."""


class StoreWriteError(StoreError):
    pass


class StoreReadError(StoreError):
    pass
