from fastapi import APIRouter
from app.schemas.alert import AlertResponse
from app.services.alert_service import list_alerts

router = APIRouter()


@router.get("", response_model=list[AlertResponse])
async def get_alerts():
    return list_alerts()
