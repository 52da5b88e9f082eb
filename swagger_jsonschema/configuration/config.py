from typing import List, Optional

from pydantic import BaseModel, Field

DEFAULT_DISALLOWED_KEYS = ["discriminator", "readOnly", "xml", "externalDocs", "example"]


class Config(BaseModel):
    """Settings shared by the schema conversion components."""

    debug: bool = Field(default=False, description="Log converter internals at debug level.")
    log_file: Optional[str] = Field(default=None, description="Optional file receiving timestamped log records.")
    copy_definitions: bool = Field(
        default=True,
        description="Copy every referenced definition into the converted schema by default.",
    )
    disallowed_keys: List[str] = Field(
        default_factory=lambda: list(DEFAULT_DISALLOWED_KEYS),
        description="Swagger-only keys stripped from every converted schema node.",
    )
    extension_prefix: str = Field(default="x-", description="Prefix of vendor extension keys to strip.")

    def is_extension(self, key: str) -> bool:
        """Test whether a key is a Swagger vendor extension."""
        return key.startswith(self.extension_prefix)
