"""S3-backed transaction store: one JSON object per stored transaction."""

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from app.core.errors import StorageFailure
from app.core.models import StoredTransaction, Transaction
from app.core.settings import Settings, get_settings
from app.stores.base import TransactionStore


class S3TransactionStore(TransactionStore):
    """Service for storing transactions in an S3-compatible bucket."""

    def __init__(self, settings: Settings | None = None, client: object | None = None) -> None:
        """Initialize the S3 client from settings unless one is given, and ensure the bucket exists."""
        settings = settings or get_settings()
        self.s3 = client or boto3.client(
            "s3",
            endpoint_url=settings.s3_endpoint_url,
            aws_access_key_id=settings.s3_access_key,
            aws_secret_access_key=settings.s3_secret_key,
        )
        self.bucket = settings.s3_bucket
        self.prefix = settings.s3_prefix
        self.ensure_bucket()

    def ensure_bucket(self) -> None:
        """Ensure the S3 bucket exists, create if not present."""
        try:
            self.s3.head_bucket(Bucket=self.bucket)
        except ClientError:
            self.s3.create_bucket(Bucket=self.bucket)

    def key_for(self, record_id: str) -> str:
        """Object key under which a transaction is stored."""
        return f"{self.prefix}{record_id}.json"

    def store(self, transaction: Transaction) -> StoredTransaction:
        """Upload the transaction as a JSON document."""
        record = self.new_record(transaction)
        try:
            self.s3.put_object(
                Bucket=self.bucket,
                Key=self.key_for(record.id),
                Body=record.model_dump_json().encode("utf-8"),
                ContentType="application/json",
            )
        except (BotoCoreError, ClientError) as exc:
            msg = f"S3 error while storing transaction {record.id}: {exc}"
            raise StorageFailure(msg) from exc
        return record

    def get(self, record_id: str) -> StoredTransaction | None:
        """Download a stored transaction by id."""
        try:
            obj = self.s3.get_object(Bucket=self.bucket, Key=self.key_for(record_id))
        except ClientError:
            return None
        return StoredTransaction.model_validate_json(obj["Body"].read())
