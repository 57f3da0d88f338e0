import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session, select
from typing import List
from uuid import UUID

from app.database import get_session
from app.core.security import get_current_user
from app.models.income import Income
from app.schemas.income import IncomeCreate, IncomeRead, IncomeUpdate
from app.utils.dates import to_utc, utc_now

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/incomes", tags=["incomes"])

def _get_owned_income(session: Session, income_id: int, user_id: UUID) -> Income:
    income = session.exec(
        select(Income).where(Income.id == income_id, Income.user_id == user_id)
    ).first()
    if not income:
        raise HTTPException(status_code=404, detail="Income not found")
    return income

@router.post("", response_model=IncomeRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=IncomeRead, status_code=status.HTTP_201_CREATED, include_in_schema=False)
def create_income(
    income_data: IncomeCreate,
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    data = income_data.model_dump()
    if data.get("date") is None:
        data["date"] = utc_now()
    else:
        data["date"] = to_utc(data["date"])

    income = Income(**data, user_id=user_id)
    session.add(income)
    session.commit()
    session.refresh(income)
    logger.info("Created income %s for user %s", income.id, user_id)
    return income

@router.get("", response_model=List[IncomeRead])
@router.get("/", response_model=List[IncomeRead], include_in_schema=False)
def list_incomes(
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    return session.exec(
        select(Income)
        .where(Income.user_id == user_id)
        .order_by(Income.date.desc(), Income.id.desc())
    ).all()

@router.put("/{income_id}", response_model=IncomeRead)
def update_income(
    income_id: int,
    income_update: IncomeUpdate,
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    updates = income_update.model_dump(exclude_unset=True)
    if updates.get("date") is not None:
        updates["date"] = to_utc(updates["date"])
    if not updates:
        raise HTTPException(status_code=400, detail="No fields to update")

    income = _get_owned_income(session, income_id, user_id)
    for key, value in updates.items():
        setattr(income, key, value)

    session.add(income)
    session.commit()
    session.refresh(income)
    return income

@router.delete("/{income_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_income(
    income_id: int,
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    income = _get_owned_income(session, income_id, user_id)
    session.delete(income)
    session.commit()
    logger.info("Deleted income %s for user %s", income_id, user_id)
    return None
