from app.schemas.alert import AlertResponse

# Advisory feed shown on the hospital dashboard. Static until a publishing
# workflow for government officials exists.
ALERTS = [
    AlertResponse(
        id=1,
        title="High Fever Cluster",
        date="2025-09-16",
        severity="Urgent",
        content="Screen for high fever...",
    ),
    AlertResponse(
        id=2,
        title="Vaccination Drive",
        date="2025-09-15",
        severity="Informational",
        content="New shipment arrived.",
    ),
]


def list_alerts() -> list[AlertResponse]:
    return list(ALERTS)
