from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from utils.db import get_db
from utils.dependencies import get_current_user, require_admin
from models.user import UserProfile
from enums.enums import TicketPriorityEnum, TicketStatusEnum, TicketTypeEnum
from schemas.support import TicketCreate, TicketUpdate, TicketAdminUpdate, TicketOut
from services.support_service import (
    create_ticket,
    list_my_tickets,
    update_my_ticket,
    close_my_ticket,
    list_all_tickets,
    admin_update_ticket,
)

router = APIRouter(prefix="/support", tags=["support"])


@router.post("/tickets", response_model=TicketOut, status_code=status.HTTP_201_CREATED)
def post_ticket(
        payload: TicketCreate,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    """Report a problem or make a suggestion (status open, priority normal)"""
    return create_ticket(db, user, payload)


@router.get("/tickets", response_model=list[TicketOut])
def get_my_tickets(
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    """Own tickets, newest first"""
    return list_my_tickets(db, user)


@router.patch("/tickets/{ticket_id}", response_model=TicketOut)
def patch_my_ticket(
        ticket_id: int,
        payload: TicketUpdate,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    """Edit subject / description (409 once resolved or closed)"""
    return update_my_ticket(db, user, ticket_id, payload)


@router.post("/tickets/{ticket_id}/close", response_model=TicketOut)
def post_close_ticket(
        ticket_id: int,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    return close_my_ticket(db, user, ticket_id)


# ============================================================================
# Admin
# ============================================================================

@router.get("/admin/tickets", response_model=list[TicketOut])
def get_all_tickets(
        status_filter: TicketStatusEnum | None = Query(None, alias="status"),
        priority: TicketPriorityEnum | None = Query(None),
        ticket_type: TicketTypeEnum | None = Query(None),
        db: Session = Depends(get_db),
        _: UserProfile = Depends(require_admin),
):
    """
    Every user's tickets.

    Permissions:
    - Admin only
    """
    return list_all_tickets(db, status_filter, priority, ticket_type)


@router.patch("/admin/tickets/{ticket_id}", response_model=TicketOut)
def patch_ticket_as_admin(
        ticket_id: int,
        payload: TicketAdminUpdate,
        db: Session = Depends(get_db),
        admin: UserProfile = Depends(require_admin),
):
    """Update status, priority and admin notes"""
    return admin_update_ticket(db, admin, ticket_id, payload)
