# eportal/services/hostel_service.py

from typing import Any

from eportal.core.timeutils import utcnow
from eportal.models.hostel import Hostel, HostelAllocation, HostelRoom
from eportal.models.user import User
from eportal.services.crud_service import CRUDService


class HostelRoomService(CRUDService[HostelRoom]):

    async def before_create(self, session, data: dict[str, Any], actor: User) -> None:
        if data.get("occupied_beds", 0) > data["capacity"]:
            raise ValueError("occupied_beds cannot exceed capacity")

    async def before_update(self, session, obj: HostelRoom, changes: dict[str, Any], actor: User) -> None:
        capacity = changes.get("capacity")
        if capacity is None:
            capacity = obj.capacity
        occupied = changes.get("occupied_beds")
        if occupied is None:
            occupied = obj.occupied_beds
        if occupied > capacity:
            raise ValueError("occupied_beds cannot exceed capacity")


class HostelAllocationService(CRUDService[HostelAllocation]):

    async def before_create(self, session, data: dict[str, Any], actor: User) -> None:
        # an officer allocating directly approves in the same step
        if actor.id != data.get("student_id"):
            data.setdefault("approved_by", actor.id)
            data.setdefault("approved_at", utcnow())


hostel_service = CRUDService(Hostel, "hostels", order_by=Hostel.name)
hostel_room_service = HostelRoomService(HostelRoom, "hostel_rooms", order_by=HostelRoom.room_number)
hostel_allocation_service = HostelAllocationService(
    HostelAllocation,
    "hostel_allocations",
    owner_field="student_id",
    order_by=HostelAllocation.created_at.desc(),
)
