from typing import Optional
import os
import logging

from pydantic import BaseModel, Field

from .api.errors import ConfigurationError

TOKEN_ENV_VAR = 'API_TOKEN'


class APICredentials(BaseModel):
    """Model for API credentials"""
    api_token: str = Field(..., min_length=1, description="Up personal access token")


class CredentialsManager:
    """
    Resolves the Up API token.

    An explicit token wins over the API_TOKEN environment variable.
    """
    def __init__(self, api_token: Optional[str] = None):
        """
        Initialize credentials manager

        Args:
            api_token (Optional[str]): Up API token

        Raises:
            ConfigurationError: If no token was given and API_TOKEN is not set
        """
        self.logger = logging.getLogger(__name__)

        token = api_token or os.getenv(TOKEN_ENV_VAR)
        if not token:
            raise ConfigurationError(f"environment variable {TOKEN_ENV_VAR} not set")

        self.credentials = APICredentials(api_token=token)
        self.logger.debug("Credentials manager initialized successfully")

    def get_api_token(self) -> str:
        """Get Up API token"""
        return self.credentials.api_token
