######## models.py
########

from dataclasses import dataclass
from typing import Optional

from linkscrub.domain.errors import PipelineError


@dataclass(frozen=True)
class CleanResult:
    status: str                 # "ok" | "failed"
    input_text: str
    candidate_url: str
    resolved_url: str
    clean_url: str
    error: Optional[PipelineError] = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @property
    def message(self) -> str:
        return self.error.user_message if self.error else ""
