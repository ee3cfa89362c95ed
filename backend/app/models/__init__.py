from app.models.account import Account
from app.models.worker import Worker
from app.models.staff import Staff

__all__ = ["Account", "Worker", "Staff"]
