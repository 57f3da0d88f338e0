from sqlmodel import SQLModel
from app.database import engine
from app.models.user import User  # noqa: F401
from app.models.income import Income  # noqa: F401
from app.models.expense import Expense  # noqa: F401

SQLModel.metadata.drop_all(engine)

print("✅ Base de datos reseteada correctamente (tablas user, income y expense eliminadas).")
