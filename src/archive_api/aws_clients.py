"""AWS client management."""
import logging
from typing import Any, Dict

import boto3

from archive_api.config.settings import Settings

logger = logging.getLogger(__name__)

# modes that talk to a moto server instead of AWS
LOCAL_MODES = ("local-dev", "aws-mock")


class AWSClientManager:
    """Builds boto3 clients from one Settings instance, one client per service.

    Each app gets its own manager, so tests can point different apps at
    different regions or endpoints.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self._clients: Dict[str, Any] = {}

        logger.info(
            f"AWS clients: mode={settings.deployment_mode} region={settings.aws_region} "
            f"endpoint={self.endpoint_url}"
        )

    @property
    def endpoint_url(self):
        if self.settings.deployment_mode in LOCAL_MODES:
            return self.settings.aws_endpoint_url
        return None

    def client_kwargs(self) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {"region_name": self.settings.aws_region}
        if self.settings.aws_access_key_id:
            kwargs["aws_access_key_id"] = self.settings.aws_access_key_id
        if self.settings.aws_secret_access_key:
            kwargs["aws_secret_access_key"] = self.settings.aws_secret_access_key
        if self.endpoint_url:
            kwargs["endpoint_url"] = self.endpoint_url
        return kwargs

    def get_client(self, service_name: str) -> Any:
        """Get or create the client for an AWS service."""
        if service_name not in self._clients:
            try:
                self._clients[service_name] = boto3.client(service_name, **self.client_kwargs())
            except Exception as e:
                logger.error(f"Error creating {service_name} client: {str(e)}")
                raise
            logger.debug(f"Created {service_name} client")
        return self._clients[service_name]


def get_s3_client(manager: AWSClientManager):
    """Get the S3 client."""
    return manager.get_client('s3')


def get_cognito_client(manager: AWSClientManager):
    """Get the Cognito identity provider client."""
    return manager.get_client('cognito-idp')
