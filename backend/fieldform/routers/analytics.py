"""Analytics router."""

from fastapi import APIRouter, Depends

from fieldform.database import get_stores
from fieldform.models.user import User
from fieldform.schemas.analytics import AnalyticsSummary
from fieldform.services.analytics import AnalyticsService
from fieldform.services.auth import require_permission
from fieldform.stores import Stores

router = APIRouter()


@router.get("/summary", response_model=AnalyticsSummary)
async def get_summary(
    stores: Stores = Depends(get_stores),
    current_user: User = Depends(require_permission("analytics", "read"))
):
    """Submission totals, per-form and per-day counts, and top submitters."""
    return AnalyticsService.get_summary(stores)
