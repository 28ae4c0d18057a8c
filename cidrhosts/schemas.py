from pydantic import BaseModel, Field
from typing import List, Optional

class ExtractionResult(BaseModel):
    identifier: str
    hostnames: List[str] = Field(default_factory=list, description="Accepted hostnames in page order")
    cached: bool = Field(default=False, description="Whether the page was served from an existing cache file")
    error: Optional[str] = Field(None, description="Fetch or parse failure that stopped processing")

    @property
    def ok(self) -> bool:
        return self.error is None
