"""Amazon DynamoDB settings."""

from typing import Annotated

from ..resolution import EnvVar
from .base import BaseModule


class DynamoConfigs(BaseModule):
    """Endpoint, region, table and item TTL for DynamoDB.

    ``expire`` is the default item time-to-live in seconds (one year).
    """

    endpoint: Annotated[str, EnvVar("DYNAMO_ENDPOINT")] = "localhost"
    region: Annotated[str, EnvVar("DYNAMO_REGION")] = "us-east-1"
    table: Annotated[str, EnvVar("DYNAMO_TABLE")] = ""
    expire: Annotated[int, EnvVar("DYNAMO_EXPIRE")] = 31536000
