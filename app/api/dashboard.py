# app/api/dashboard.py

from fastapi import APIRouter, Depends
from sqlmodel import Session
from typing import Optional
from uuid import UUID

from app.database import get_session
from app.core.security import get_optional_user
from app.schemas.dashboard import DashboardReport, MessageResponse
from app.services.dashboard import get_dashboard_report

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

@router.get(
    "",
    response_model=DashboardReport,
    responses={401: {"model": MessageResponse}, 500: {"model": MessageResponse}},
)
@router.get("/", response_model=DashboardReport, include_in_schema=False)
def get_dashboard_data(
    session: Session = Depends(get_session),
    user_id: Optional[UUID] = Depends(get_optional_user),
):
    # Unauthenticated y ServerError se traducen en app/main.py
    return get_dashboard_report(session, user_id)
