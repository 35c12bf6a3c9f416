from .bucket import BucketModel, EntryModel

__all__ = [
    "BucketModel",
    "EntryModel",
]
