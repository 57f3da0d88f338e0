from datetime import datetime, timezone

from app.models.expense import Expense
from app.models.income import Income
from app.models.user import User

NOW = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


def make_user(session, email):
    user = User(email=email, hashed_password="not-a-real-hash")
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def add_expense(session, user, amount, category, date, icon=None):
    expense = Expense(user_id=user.id, amount=amount, category=category, date=date, icon=icon)
    session.add(expense)
    session.commit()
    session.refresh(expense)
    return expense


def add_income(session, user, amount, source, date, icon=None):
    income = Income(user_id=user.id, amount=amount, source=source, date=date, icon=icon)
    session.add(income)
    session.commit()
    session.refresh(income)
    return income
