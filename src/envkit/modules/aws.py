"""AWS credential settings."""

from typing import Annotated, Final

from ..resolution import EnvVar
from .base import BaseModule

AWS_DEFAULT_REGION: Final = "us-east-1"


class AwsConfigs(BaseModule):
    """Credentials handed to AWS SDK clients (S3, DynamoDB, Secrets Manager...).

    The ``AWS_IAM_*`` keys take precedence over the standard SDK names.
    """

    access_key_id: Annotated[
        str | None, EnvVar("AWS_IAM_ACCESS_KEY_ID", "AWS_ACCESS_KEY_ID")
    ] = "local"
    secret_access_key: Annotated[
        str | None, EnvVar("AWS_IAM_SECRET_ACCESS_KEY", "AWS_SECRET_ACCESS_KEY")
    ] = "local"
    session_token: Annotated[str | None, EnvVar("AWS_SESSION_TOKEN")] = None
    region: Annotated[str, EnvVar("AWS_DEFAULT_REGION")] = AWS_DEFAULT_REGION
