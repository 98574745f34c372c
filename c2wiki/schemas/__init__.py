from c2wiki.schemas.schemas import (
    RemotePage,
    RenderResponse, PageResponse,
    HealthResponse,
)

__all__ = [
    "RemotePage",
    "RenderResponse", "PageResponse",
    "HealthResponse",
]
