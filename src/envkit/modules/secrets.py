"""Secret management backend selection."""

import enum


class SecretsManagerKind(enum.StrEnum):
    """Which secrets manager the application reads secrets from."""

    NONE = "none"
    AWS_SECRET_MANAGER = "aws_secret_manager"

    @classmethod
    def parse(cls, value: str) -> "SecretsManagerKind":
        """``aws`` (any case) selects AWS Secrets Manager, anything else none."""
        if value.upper() == "AWS":
            return cls.AWS_SECRET_MANAGER
        return cls.NONE

    def is_enabled(self) -> bool:
        return self is not SecretsManagerKind.NONE
