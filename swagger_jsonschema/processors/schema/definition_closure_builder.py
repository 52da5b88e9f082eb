import copy
from typing import Any, Dict, Iterable, Mapping, Optional

from ..references import ReferenceScanner, lookup_reference
from ..references.reference_resolver import DEFINITION_DEPTH
from ...utils.logger import Logger


class DefinitionClosureBuilder:
    """Collects every definition reachable from a set of references."""

    def __init__(self, scanner: Optional[ReferenceScanner] = None):
        self.scanner = scanner or ReferenceScanner()
        self.logger = Logger.get_logger(__name__)

    def build(self, references: Iterable[str], root: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Returns the referenced definitions of ``root`` together with everything they reference.

        Definitions are copied as they appear in ``root``, each id exactly once.
        """
        definitions: Dict[str, Any] = {}
        refs_to_check = list(references)

        while refs_to_check:
            ref = refs_to_check.pop()
            lookup = lookup_reference(ref, root, DEFINITION_DEPTH)

            if lookup.id in definitions:
                continue

            definition = copy.deepcopy(lookup.referenced)
            definitions[lookup.id] = definition
            self.logger.debug(f"Copied definition {lookup.id}")

            nested_refs = self.scanner.find_references(definition)
            refs_to_check.extend(nested_refs)

        return definitions
