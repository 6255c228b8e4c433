"""
OCR client for extracting identity fields from credential images.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Protocol, Union

import mlflow
from mlflow.entities import SpanType
from openai import OpenAI
from pydantic import ValidationError

from .api_utils import build_messages, extract_text_from_choice
from .config import OCRConfig, resolve_config
from .errors import (
    ConfigurationError,
    EmptyChoicesError,
    EmptyContentError,
    MalformedResponseError,
    UpstreamCallError,
)
from .models import EventMessage, NameResult, ProfessionType, RawIdentityInfo
from .prompts import NAME_PROMPT, get_info_prompt
from .publisher import MessagePublisher

logger = logging.getLogger(__name__)


class OCR(Protocol):
    def scan_name(self, image_url: str, *, timeout: Optional[float] = None) -> str:
        ...

    def scan_raw_info(
        self,
        user_id: str,
        image_url: str,
        profession: Union[ProfessionType, str, None],
        *,
        timeout: Optional[float] = None,
    ) -> RawIdentityInfo:
        ...


def _profession_source(profession: Union[ProfessionType, str, None]) -> str:
    if isinstance(profession, ProfessionType):
        return profession.value
    return "" if profession is None else str(profession)


def _set_span_attributes(attributes: Dict[str, Any]) -> None:
    span = mlflow.get_current_active_span()
    if span is not None:
        span.set_attributes(attributes)


class OCRClient:
    """
    Scans credential images with a vision model and publishes the results.

    The client keeps no per-call state; one instance can serve concurrent
    callers.

    Args:
        fm_client: OpenAI-compatible client used for vision completions
        publisher: Message queue used for scan events
        config: Completion and publish settings; defaults when None
    """

    def __init__(
        self,
        fm_client: Optional[OpenAI],
        publisher: Optional[MessagePublisher] = None,
        config: Optional[OCRConfig] = None,
    ):
        self.fm_client = fm_client
        self.publisher = publisher
        self.config = resolve_config(config)

    def _complete(self, prompt: str, image_url: str, timeout: Optional[float]) -> Any:
        if self.fm_client is None:
            raise ConfigurationError("OpenAI client is not initialized")

        request = {
            "model": self.config.model,
            "max_tokens": self.config.max_tokens,
            "messages": build_messages(prompt, image_url),
            "response_format": {"type": "json_object"},
        }
        if timeout is not None:
            request["timeout"] = timeout

        try:
            completion = self.fm_client.chat.completions.create(**request)
        except Exception as e:
            raise UpstreamCallError(f"Vision completion request failed: {e}") from e

        if not completion.choices:
            raise EmptyChoicesError("Empty response choices from OCR")

        return completion.choices[0]

    @mlflow.trace(name="scan_name", span_type=SpanType.LLM)
    def scan_name(self, image_url: str, *, timeout: Optional[float] = None) -> str:
        """
        Read the holder's Chinese name from a credential image.

        Args:
            image_url: Location of the image to scan
            timeout: Request timeout in seconds, forwarded to the backend

        Returns:
            The name, or "" when the model found none
        """
        choice = self._complete(NAME_PROMPT, image_url, timeout)
        raw_text = extract_text_from_choice(choice)
        logger.debug(f"Name scan response: {raw_text[:200]}")

        try:
            result = NameResult.model_validate_json(raw_text)
        except ValidationError as e:
            raise MalformedResponseError(f"Failed to parse name JSON: {e}") from e

        _set_span_attributes({"model": self.config.model})
        return result.name or ""

    @mlflow.trace(name="scan_raw_info", span_type=SpanType.CHAIN)
    def scan_raw_info(
        self,
        user_id: str,
        image_url: str,
        profession: Union[ProfessionType, str, None],
        *,
        timeout: Optional[float] = None,
    ) -> RawIdentityInfo:
        """
        Extract identity fields from a credential image and publish them.

        The prompt follows the profession; unknown professions use the
        physician prompt. The returned record always carries image_url as
        identify_url. A failed publish is logged and does not affect the
        result.

        Args:
            user_id: Caller's user identifier, recorded on the event
            image_url: Location of the image to scan
            profession: Profession type or its string value
            timeout: Timeout in seconds for the completion and publish calls

        Returns:
            Parsed RawIdentityInfo

        Raises:
            ConfigurationError: No completion client configured
            UpstreamCallError: The completion call failed
            EmptyChoicesError: No choices were returned
            EmptyContentError: The first choice had no content
            MalformedResponseError: The content was not the expected JSON
        """
        prompt = get_info_prompt(profession)
        choice = self._complete(prompt, image_url, timeout)

        raw_text = extract_text_from_choice(choice)
        if raw_text == "":
            raise EmptyContentError("Empty response content from OCR")
        logger.debug(f"Raw info scan response: {raw_text[:500]}")

        try:
            info = RawIdentityInfo.model_validate_json(raw_text)
        except ValidationError as e:
            raise MalformedResponseError(f"Failed to parse OCR JSON: {e}") from e

        info.identify_url = image_url

        source = _profession_source(profession)
        published = self._publish(user_id, info, source, timeout)

        _set_span_attributes({
            "model": self.config.model,
            "profession": source,
            "topic": self.config.topic.value,
            "published": published,
        })
        logger.info(f"Scanned identity info for user {user_id} ({source}): {sorted(info.returned_fields())}")
        return info

    def _publish(
        self,
        user_id: str,
        info: RawIdentityInfo,
        source: str,
        timeout: Optional[float],
    ) -> bool:
        if self.publisher is None:
            logger.warning("No publisher configured, OCR result not sent")
            return False

        message = EventMessage(
            user_id=user_id,
            payload=info,
            created_at=datetime.now(timezone.utc),
            type=self.config.message_type,
            source=source,
        )
        kwargs = {"timeout": timeout} if timeout is not None else {}
        try:
            self.publisher.send(self.config.topic.value, message, **kwargs)
        except Exception as e:
            logger.error(f"Failed to send OCR result for user {user_id} to {self.config.topic.value}: {e}")
            return False
        return True


def create_ocr_client(
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
    publisher: Optional[MessagePublisher] = None,
    config: Optional[OCRConfig] = None,
) -> OCRClient:
    """
    Build an OCRClient backed by an OpenAI (or OpenAI-compatible) endpoint.

    Args:
        api_key: API key; OPENAI_API_KEY is used when None
        base_url: Endpoint base URL, e.g. a serving gateway
        publisher: Message queue for scan events
        config: Completion and publish settings
    """
    fm_client = OpenAI(api_key=api_key, base_url=base_url)
    return OCRClient(fm_client, publisher=publisher, config=config)
