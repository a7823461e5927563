"""
Dashboard Router - Aggregated statistics for the dashboard landing page.
"""
from fastapi import APIRouter, Depends

from ..core.responses import success_envelope
from ..core.storage import JsonStore
from ..database import get_store
from .service import get_dashboard_stats

router = APIRouter()

@router.get("/stats")
async def dashboard_stats(store: JsonStore = Depends(get_store)):
    """
    Get dashboard statistics

    Counts patients, today's non-cancelled appointments, and available
    doctors. Revenue is a fixed placeholder.
    """
    return success_envelope(await get_dashboard_stats(store))
