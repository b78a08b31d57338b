# Import key helpers for easier access
from .stub_schema import StubSchema

__all__ = [
    'StubSchema',
]
