"""Fake storage collaborators and clients for testing.

These implement the same interfaces as the real backends but keep everything in memory. No database, no network.
"""

from botocore.exceptions import ClientError

from app.core.errors import StorageFailure
from app.core.models import StoredTransaction, Transaction
from app.stores.base import TransactionStore


class FailingStore(TransactionStore):
    """Reports a storage failure for every transaction."""

    def __init__(self, detail: str = "connection to db-primary:5432 refused") -> None:
        self.detail = detail
        self.attempts: list[Transaction] = []

    def store(self, transaction: Transaction) -> StoredTransaction:
        self.attempts.append(transaction)
        raise StorageFailure(self.detail)


class ExplodingStore(TransactionStore):
    """Raises an unexpected error, as a buggy backend would."""

    def store(self, transaction: Transaction) -> StoredTransaction:
        msg = f"KeyError in shard map while handling {transaction.item}"
        raise RuntimeError(msg)


class FakeS3Client:
    """Minimal stand-in for a boto3 S3 client."""

    def __init__(self, fail_puts: bool = False, bucket_exists: bool = True) -> None:
        self.objects: dict[tuple[str, str], bytes] = {}
        self.buckets: set[str] = set()
        self.fail_puts = fail_puts
        self.bucket_exists = bucket_exists

    def head_bucket(self, Bucket: str) -> dict:  # noqa: N803
        if not self.bucket_exists and Bucket not in self.buckets:
            raise ClientError({"Error": {"Code": "404", "Message": "Not Found"}}, "HeadBucket")
        return {}

    def create_bucket(self, Bucket: str) -> dict:  # noqa: N803
        self.buckets.add(Bucket)
        return {}

    def put_object(self, Bucket: str, Key: str, Body: bytes, ContentType: str) -> dict:  # noqa: N803
        _ = ContentType
        if self.fail_puts:
            raise ClientError({"Error": {"Code": "500", "Message": "InternalError"}}, "PutObject")
        self.objects[(Bucket, Key)] = Body
        return {}

    def get_object(self, Bucket: str, Key: str) -> dict:  # noqa: N803
        if (Bucket, Key) not in self.objects:
            raise ClientError({"Error": {"Code": "NoSuchKey", "Message": "Not Found"}}, "GetObject")
        return {"Body": _Body(self.objects[(Bucket, Key)])}


class _Body:
    def __init__(self, data: bytes) -> None:
        self._data = data

    def read(self) -> bytes:
        return self._data
