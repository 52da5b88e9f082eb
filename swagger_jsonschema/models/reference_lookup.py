from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class ReferenceLookup:
    """Result of resolving a reference against a document root"""

    id: Optional[str]
    referenced: Any

    def to_json(self) -> Dict[str, Any]:
        """Convert the lookup to a JSON-serializable dictionary"""
        return {"id": self.id, "referenced": self.referenced}
