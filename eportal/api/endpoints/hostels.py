# eportal/api/endpoints/hostels.py

from fastapi import APIRouter

from eportal.api.crud import add_crud_routes
from eportal.schemas.hostel import (
    HostelAllocationCreate, HostelAllocationRead, HostelAllocationUpdate,
    HostelCreate, HostelRead, HostelUpdate,
    HostelRoomCreate, HostelRoomRead, HostelRoomUpdate,
)
from eportal.services.hostel_service import (
    hostel_allocation_service,
    hostel_room_service,
    hostel_service,
)

hostels_router = APIRouter(prefix="/api/hostels", tags=["Hostels"])
add_crud_routes(hostels_router, hostel_service, HostelCreate, HostelUpdate, HostelRead, "Hostel")

rooms_router = APIRouter(prefix="/api/hostel-rooms", tags=["Hostels"])
add_crud_routes(rooms_router, hostel_room_service, HostelRoomCreate, HostelRoomUpdate, HostelRoomRead, "Hostel room")

allocations_router = APIRouter(prefix="/api/hostel-allocations", tags=["Hostels"])
add_crud_routes(
    allocations_router,
    hostel_allocation_service,
    HostelAllocationCreate,
    HostelAllocationUpdate,
    HostelAllocationRead,
    "Hostel allocation",
)

routers = [hostels_router, rooms_router, allocations_router]
