from .base import Base
from .session import create_store_engine
from .models import BucketModel, EntryModel

__all__ = [
    "Base",
    "create_store_engine",
    "BucketModel",
    "EntryModel",
]
