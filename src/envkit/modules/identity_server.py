"""OAuth / OpenID Connect identity provider settings."""

from typing import Annotated

from ..resolution import EnvVar
from .base import BaseModule


class IdentityServerConfigs(BaseModule):
    """Identity provider (Auth0, Keycloak, ...) client settings.

    For Auth0 the realm is the tenant domain.
    """

    url: Annotated[str, EnvVar("IDENTITY_SERVER_URL")] = ""
    realm: Annotated[str, EnvVar("IDENTITY_SERVER_REALM")] = ""
    audience: Annotated[str, EnvVar("IDENTITY_SERVER_AUDIENCE")] = ""
    issuer: Annotated[str, EnvVar("IDENTITY_SERVER_ISSUER")] = ""
    client_id: Annotated[str, EnvVar("IDENTITY_SERVER_CLIENT_ID")] = ""
    client_secret: Annotated[str, EnvVar("IDENTITY_SERVER_CLIENT_SECRET")] = ""
    grant_type: Annotated[str, EnvVar("IDENTITY_SERVER_GRANT_TYPE")] = (
        "client_credentials"
    )
