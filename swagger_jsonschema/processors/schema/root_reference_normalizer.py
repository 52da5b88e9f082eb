from typing import Any, Dict, Mapping, Optional

from ..references import ReferenceScanner, lookup_reference
from ...utils.logger import Logger


class RootReferenceNormalizer:
    """Rewrites a converted schema whose root is a bare reference."""

    def __init__(self, scanner: Optional[ReferenceScanner] = None):
        self.scanner = scanner or ReferenceScanner()
        self.logger = Logger.get_logger(__name__)

    def normalize(self, result: Dict[str, Any], root: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Inlines the referenced definition when it references nothing else.

        Any other root reference is wrapped in a single element ``allOf``. Consumers
        such as fake data generators loop forever on a recursive root reference but
        terminate when the same reference sits inside ``allOf``.
        """
        reference = result.get("$ref")
        if not reference:
            return result

        lookup = lookup_reference(reference, root)
        definitions = result.get("definitions", {})

        if lookup.id in definitions and not self.scanner.check_schema_has_references(definitions[lookup.id]):
            self.logger.debug(f"Inlined root reference {reference}")
            return definitions[lookup.id]

        self.logger.debug(f"Wrapped root reference {reference} in allOf")
        return {
            "allOf": [{"$ref": reference}],
            "definitions": definitions,
        }
