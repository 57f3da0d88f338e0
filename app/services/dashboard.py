# app/services/dashboard.py

import logging
from datetime import datetime, timedelta
from typing import List, Optional, Sequence, Tuple, Union
from uuid import UUID

from sqlmodel import Session, select, func

from app.core.errors import ServerError, Unauthenticated
from app.models.expense import Expense
from app.models.income import Income
from app.schemas.dashboard import (
    CategoryTotal,
    DashboardReport,
    ExpenseTransaction,
    ExpenseWindow,
    IncomeTransaction,
    IncomeWindow,
    SourceTotal,
)
from app.utils.dates import to_utc, utc_now

logger = logging.getLogger(__name__)

RECENT_LIMIT = 10
EXPENSE_WINDOW_DAYS = 30
INCOME_WINDOW_DAYS = 60


def _to_transaction(record: Union[Expense, Income]) -> Union[ExpenseTransaction, IncomeTransaction]:
    if isinstance(record, Expense):
        return ExpenseTransaction(
            id=record.id,
            amount=record.amount,
            date=record.date,
            icon=record.icon or None,
            category=record.category,
        )
    return IncomeTransaction(
        id=record.id,
        amount=record.amount,
        date=record.date,
        icon=record.icon or None,
        source=record.source,
    )


def _total(session: Session, model, user_id: UUID) -> float:
    return session.exec(
        select(func.coalesce(func.sum(model.amount), 0)).where(model.user_id == user_id)
    ).one()


def _grouped(session: Session, model, key_column, user_id: UUID) -> Sequence[Tuple[str, float, int]]:
    """SUM y COUNT por clave; total descendente y, en empate, clave ascendente."""
    total = func.sum(model.amount)
    return session.exec(
        select(key_column, total, func.count(model.id))
        .where(model.user_id == user_id)
        .group_by(key_column)
        .order_by(total.desc(), key_column.asc())
    ).all()


def _latest(
    session: Session,
    model,
    user_id: UUID,
    limit: Optional[int] = None,
    since: Optional[datetime] = None,
) -> Sequence[Union[Expense, Income]]:
    query = (
        select(model)
        .where(model.user_id == user_id)
        .order_by(model.date.desc(), model.id.desc())
    )
    if since is not None:
        query = query.where(model.date >= since)
    if limit is not None:
        query = query.limit(limit)
    return session.exec(query).all()


def _build_report(session: Session, user_id: UUID, now: datetime) -> DashboardReport:
    total_income = _total(session, Income, user_id)
    total_expense = _total(session, Expense, user_id)
    balance = total_income - total_expense

    expenses_by_category = [
        CategoryTotal(category=category, total=total, count=count)
        for category, total, count in _grouped(session, Expense, Expense.category, user_id)
    ]
    income_by_source = [
        SourceTotal(source=source, total=total, count=count)
        for source, total, count in _grouped(session, Income, Income.source, user_id)
    ]

    # Top 10 por tipo, luego se mezclan y se recorta a 10. No es el top 10
    # global si un tipo aporta más de 10 de los registros más recientes.
    recent_expenses = _latest(session, Expense, user_id, limit=RECENT_LIMIT)
    recent_incomes = _latest(session, Income, user_id, limit=RECENT_LIMIT)
    recent_transactions: List[Union[ExpenseTransaction, IncomeTransaction]] = sorted(
        [_to_transaction(r) for r in recent_expenses] + [_to_transaction(r) for r in recent_incomes],
        key=lambda tx: tx.date,
        reverse=True,
    )[:RECENT_LIMIT]

    last_expenses = _latest(session, Expense, user_id, since=now - timedelta(days=EXPENSE_WINDOW_DAYS))
    last_incomes = _latest(session, Income, user_id, since=now - timedelta(days=INCOME_WINDOW_DAYS))

    return DashboardReport(
        totalIncome=total_income,
        totalExpense=total_expense,
        balance=balance,
        expensesByCategory=expenses_by_category,
        incomeBySource=income_by_source,
        last30DaysExpenses=ExpenseWindow(
            total=sum(r.amount or 0 for r in last_expenses),
            transactions=[_to_transaction(r) for r in last_expenses],
        ),
        last60DaysIncome=IncomeWindow(
            total=sum(r.amount or 0 for r in last_incomes),
            transactions=[_to_transaction(r) for r in last_incomes],
        ),
        recentTransactions=recent_transactions,
    )


def get_dashboard_report(session: Session, user_id: Optional[UUID], now: Optional[datetime] = None) -> DashboardReport:
    """
    Resumen del dashboard para `user_id`: totales, balance, agrupaciones por
    categoría/fuente, últimas transacciones y ventanas de 30 y 60 días.

    Lanza Unauthenticated sin tocar la base si no hay usuario, y ServerError
    ante cualquier fallo posterior; nunca devuelve un reporte parcial.
    """
    if user_id is None:
        raise Unauthenticated()

    now = to_utc(now) if now else utc_now()
    try:
        return _build_report(session, user_id, now)
    except Exception as exc:
        logger.exception("get_dashboard_report error for user %s", user_id)
        raise ServerError(str(exc)) from exc
