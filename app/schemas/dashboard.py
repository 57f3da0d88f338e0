# app/schemas/dashboard.py

from pydantic import BaseModel, Field
from typing import Annotated, List, Literal, Optional, Union
from datetime import datetime

class ExpenseTransaction(BaseModel):
    id: int
    type: Literal["expense"] = "expense"
    amount: float
    date: datetime
    icon: Optional[str] = None
    category: str

class IncomeTransaction(BaseModel):
    id: int
    type: Literal["income"] = "income"
    amount: float
    date: datetime
    icon: Optional[str] = None
    source: str

# Variante etiquetada por "type": category solo en gastos, source solo en ingresos
Transaction = Annotated[Union[ExpenseTransaction, IncomeTransaction], Field(discriminator="type")]

class CategoryTotal(BaseModel):
    category: str
    total: float
    count: int

class SourceTotal(BaseModel):
    source: str
    total: float
    count: int

class ExpenseWindow(BaseModel):
    total: float
    transactions: List[ExpenseTransaction]

class IncomeWindow(BaseModel):
    total: float
    transactions: List[IncomeTransaction]

class DashboardReport(BaseModel):
    totalIncome: float
    totalExpense: float
    balance: float
    expensesByCategory: List[CategoryTotal]
    incomeBySource: List[SourceTotal]
    last30DaysExpenses: ExpenseWindow
    last60DaysIncome: IncomeWindow
    recentTransactions: List[Transaction]

class MessageResponse(BaseModel):
    message: str
    error: Optional[str] = None
