# Import models so Base metadata is aware of them
from .store import StoredValue  # noqa: F401
