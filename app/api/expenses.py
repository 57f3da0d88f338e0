import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session, select
from typing import List
from uuid import UUID

from app.database import get_session
from app.core.security import get_current_user
from app.models.expense import Expense
from app.schemas.expense import ExpenseCreate, ExpenseRead, ExpenseUpdate
from app.utils.dates import to_utc, utc_now

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/expenses", tags=["expenses"])

def _get_owned_expense(session: Session, expense_id: int, user_id: UUID) -> Expense:
    expense = session.exec(
        select(Expense).where(Expense.id == expense_id, Expense.user_id == user_id)
    ).first()
    if not expense:
        raise HTTPException(status_code=404, detail="Expense not found")
    return expense

@router.post("", response_model=ExpenseRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=ExpenseRead, status_code=status.HTTP_201_CREATED, include_in_schema=False)
def create_expense(
    expense_data: ExpenseCreate,
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    data = expense_data.model_dump()
    if data.get("date") is None:
        data["date"] = utc_now()
    else:
        data["date"] = to_utc(data["date"])

    expense = Expense(**data, user_id=user_id)
    session.add(expense)
    session.commit()
    session.refresh(expense)
    logger.info("Created expense %s for user %s", expense.id, user_id)
    return expense

@router.get("", response_model=List[ExpenseRead])
@router.get("/", response_model=List[ExpenseRead], include_in_schema=False)
def list_expenses(
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    return session.exec(
        select(Expense)
        .where(Expense.user_id == user_id)
        .order_by(Expense.date.desc(), Expense.id.desc())
    ).all()

@router.put("/{expense_id}", response_model=ExpenseRead)
def update_expense(
    expense_id: int,
    expense_update: ExpenseUpdate,
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    updates = expense_update.model_dump(exclude_unset=True)
    if updates.get("date") is not None:
        updates["date"] = to_utc(updates["date"])
    if not updates:
        raise HTTPException(status_code=400, detail="No fields to update")

    expense = _get_owned_expense(session, expense_id, user_id)
    for key, value in updates.items():
        setattr(expense, key, value)

    session.add(expense)
    session.commit()
    session.refresh(expense)
    return expense

@router.delete("/{expense_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_expense(
    expense_id: int,
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    expense = _get_owned_expense(session, expense_id, user_id)
    session.delete(expense)
    session.commit()
    logger.info("Deleted expense %s for user %s", expense_id, user_id)
    return None
