from pydantic import BaseModel


class AlertResponse(BaseModel):
    id: int
    title: str
    date: str
    severity: str
    content: str
