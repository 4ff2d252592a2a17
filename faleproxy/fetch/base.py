from dataclasses import dataclass
from typing import Optional

@dataclass
class FetchResult:
    url: str
    final_url: str
    status_code: int
    html: str
    content_type: Optional[str]
    fetched_at: str  # ISO 8601

class BaseFetcher:
    async def fetch(self, url: str, timeout_sec: Optional[float] = None) -> FetchResult:
        raise NotImplementedError
