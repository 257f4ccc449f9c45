from app.summary.factory import SummaryServiceFactory
from app.summary.models import SummaryResult
from app.summary.service import SummaryService, build_summary_service

__all__ = [
    "SummaryResult",
    "SummaryService",
    "SummaryServiceFactory",
    "build_summary_service",
]
