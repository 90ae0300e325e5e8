from enum import Enum


class CrawlState(Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    PARSING = "parsing"
    TRAVERSING = "traversing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @property
    def is_done(self) -> bool:
        return self in (CrawlState.SUCCEEDED, CrawlState.FAILED)
