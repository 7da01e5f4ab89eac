"""Extraction of meaning fragments from dictionary search responses"""

from pydantic import ValidationError

from ..exceptions import ParseError
from ..logging_config import get_logger
from ..models.dictionary_response import DictionaryResponse

logger = get_logger(__name__)


class ResponseParser:
    """Decodes a search response and pulls out the primary sense.

    Only the first item and its first means-collector are read. Additional
    entries and senses in the response are ignored.
    """

    def parse(self, body: bytes) -> list[str] | None:
        """Return the raw meaning fragments, or None for an unusable response"""
        try:
            response = self.decode(body)
        except ParseError as e:
            logger.error(f"failed to unmarshal: {e.reason}")
            return None

        if not response.items:
            logger.info("empty result")
            return None

        collectors = response.items[0].means_collector
        if not collectors or not collectors[0].means:
            logger.info("empty result: no meanings in first entry")
            return None

        return [mean.value for mean in collectors[0].means]

    @staticmethod
    def decode(body: bytes) -> DictionaryResponse:
        """Validate the payload against the response schema"""
        if not body:
            raise ParseError("dictionary response", "empty body")
        try:
            return DictionaryResponse.model_validate_json(body)
        except ValidationError as e:
            raise ParseError("dictionary response", str(e)) from e
