"""
Support Client - Adapter for the AWS Support API (Trusted Advisor).

Handles:
- Client construction from settings (region, profile, timeouts)
- Catalog and summary requests
- Payload validation
- Mapping SDK failures to TransportError
"""

from typing import Any, List, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError

from advisor_stats.config import settings
from advisor_stats.logger import logger
from advisor_stats.schemas.support_api import CheckDescriptor, CheckSummary
from advisor_stats.services.advisor.errors import TransportError


class SupportClient:
    """Adapter for the Trusted Advisor operations of the Support API."""

    def __init__(self, client: Any = None):
        # Created on first call when not injected
        self._client = client

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = self._create_client()
        return self._client

    def list_checks(self, language: str) -> List[CheckDescriptor]:
        """Fetch the full check catalog.

        Args:
            language: ISO 639-1 language code for check names

        Returns:
            List of CheckDescriptor
        """
        operation = "describe_trusted_advisor_checks"
        response = self._call(operation, language=language)
        checks = self._parse(operation, CheckDescriptor, response.get("checks", []))
        logger.info(f"Fetched {len(checks)} Trusted Advisor checks (language={language})")
        return checks

    def get_check_summaries(self, check_ids: List[str]) -> List[CheckSummary]:
        """Fetch the latest summary of each given check.

        Args:
            check_ids: Ids of the checks to summarize

        Returns:
            List of CheckSummary
        """
        if not check_ids:
            logger.warning("No check ids to summarize, skipping summary request")
            return []

        operation = "describe_trusted_advisor_check_summaries"
        response = self._call(operation, checkIds=list(check_ids))
        summaries = self._parse(operation, CheckSummary, response.get("summaries", []))
        logger.info(f"Fetched {len(summaries)} check summaries for {len(check_ids)} checks")
        return summaries

    def _create_client(self) -> Any:
        """Build the boto3 Support client from settings."""
        config = Config(
            connect_timeout=settings.SUPPORT_CONNECT_TIMEOUT,
            read_timeout=settings.SUPPORT_READ_TIMEOUT,
            retries={"total_max_attempts": settings.SUPPORT_MAX_ATTEMPTS, "mode": "standard"}
        )
        try:
            session = boto3.Session(
                profile_name=settings.AWS_PROFILE or None,
                region_name=settings.AWS_REGION
            )
            return session.client("support", config=config)
        except BotoCoreError as e:
            logger.error(f"Could not create Support client: {e}")
            raise TransportError("create_client", str(e)) from e

    def _call(self, operation: str, **params) -> dict:
        """Invoke a Support API operation."""
        client = self.client
        logger.debug(f"Support API call {operation}")
        try:
            return getattr(client, operation)(**params)
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code", "Unknown")
            logger.error(f"Support API error on {operation} ({code}): {e}")
            raise TransportError(operation, str(e)) from e
        except BotoCoreError as e:
            logger.error(f"Support API transport failure on {operation}: {e}")
            raise TransportError(operation, str(e)) from e

    def _parse(self, operation: str, model: type, items: Optional[list]) -> list:
        """Validate raw response items against a schema."""
        try:
            return [model.model_validate(item) for item in items or []]
        except ValidationError as e:
            logger.error(f"Malformed {operation} response: {e}")
            raise TransportError(operation, f"malformed response: {e}") from e
