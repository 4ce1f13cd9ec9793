from typing import Any, Dict, Optional

from pydantic import BaseModel


class DashboardRedirect(BaseModel):
    user_type: str
    # None when the user type has no dashboard of its own
    path: Optional[str] = None


class DashboardStats(BaseModel):
    user_type: str
    stats: Dict[str, Any]
