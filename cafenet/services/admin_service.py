# cafenet/services/admin_service.py
from typing import Any, Dict

from cafenet.services.api_client import CafenetClient
from cafenet.utils.formatters import format_money


class AdminService:
    def __init__(self, client: CafenetClient):
        self.client = client

    def overview(self) -> Dict[str, Any]:
        ov = self.client.admin_overview()
        return {
            "stats": {
                "customers": len(ov.customers),
                "staff": len(ov.staff),
                "available_regular": ov.available_rooms.regular,
                "available_premium": ov.available_rooms.premium,
            },
            "customers": [u.model_dump() for u in ov.customers],
            "staff": [u.model_dump() for u in ov.staff],
            "recent": [
                {**t.model_dump(), "total_display": format_money(t.total)}
                for t in ov.recent
            ],
            "rooms": [r.model_dump(mode="json") for r in ov.rooms],
        }
