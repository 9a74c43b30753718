# ============================================================================
# SERVICES: services/support_service.py
# ============================================================================
"""
Support tickets.

- Users create tickets, see their own, edit them while not resolved/closed
  and close them.
- Admins see every ticket and handle status, priority and admin notes.
"""
import logging

from fastapi import HTTPException, status
from sqlalchemy.orm import Session, joinedload

from enums.enums import TicketPriorityEnum, TicketStatusEnum
from models.support_ticket import SupportTicket
from models.user import UserProfile
from schemas.support import TicketCreate, TicketUpdate, TicketAdminUpdate
from services.common import persist, apply_changes, without_nulls
from utils.permissions import get_owned_or_404

logger = logging.getLogger(__name__)

LOCKED_STATUSES = (TicketStatusEnum.resolved.value, TicketStatusEnum.closed.value)


def create_ticket(db: Session, user: UserProfile, payload: TicketCreate) -> SupportTicket:
    ticket = SupportTicket(
        user_id=user.user_id,
        ticket_type=payload.ticket_type,
        subject=payload.subject.strip(),
        description=payload.description.strip(),
        status=TicketStatusEnum.open.value,
        priority=TicketPriorityEnum.normal.value,
    )
    ticket = persist(db, ticket)
    logger.info("User %s opened ticket %s (%s)", user.user_id, ticket.ticket_id, ticket.ticket_type)
    return ticket


def list_my_tickets(db: Session, user: UserProfile) -> list[SupportTicket]:
    return (
        db.query(SupportTicket)
        .options(joinedload(SupportTicket.user))
        .filter(SupportTicket.user_id == user.user_id)
        .order_by(SupportTicket.created_at.desc(), SupportTicket.ticket_id.desc())
        .all()
    )


def update_my_ticket(db: Session, user: UserProfile, ticket_id: int, payload: TicketUpdate) -> SupportTicket:
    """
    Raises:
        HTTPException 404: ticket not found or not owned
        HTTPException 409: ticket already resolved or closed
    """
    ticket = get_owned_or_404(db, SupportTicket, ticket_id, user, "Ticket")
    if ticket.status in LOCKED_STATUSES:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Ticket is {ticket.status} and can no longer be edited",
        )
    apply_changes(ticket, without_nulls(payload.model_dump(exclude_unset=True), "subject", "description"))
    return persist(db, ticket)


def close_my_ticket(db: Session, user: UserProfile, ticket_id: int) -> SupportTicket:
    ticket = get_owned_or_404(db, SupportTicket, ticket_id, user, "Ticket")
    ticket.status = TicketStatusEnum.closed.value
    persist(db, ticket)
    logger.info("User %s closed ticket %s", user.user_id, ticket_id)
    return ticket


def list_all_tickets(
    db: Session,
    status_filter: str | None = None,
    priority: str | None = None,
    ticket_type: str | None = None,
) -> list[SupportTicket]:
    q = db.query(SupportTicket).options(joinedload(SupportTicket.user))
    if status_filter:
        q = q.filter(SupportTicket.status == status_filter)
    if priority:
        q = q.filter(SupportTicket.priority == priority)
    if ticket_type:
        q = q.filter(SupportTicket.ticket_type == ticket_type)
    return q.order_by(SupportTicket.created_at.desc(), SupportTicket.ticket_id.desc()).all()


def admin_update_ticket(
    db: Session, admin: UserProfile, ticket_id: int, payload: TicketAdminUpdate
) -> SupportTicket:
    ticket = db.get(SupportTicket, ticket_id)
    if not ticket:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Ticket not found")
    apply_changes(ticket, without_nulls(payload.model_dump(exclude_unset=True), "status", "priority"))
    persist(db, ticket)
    logger.info("Admin %s updated ticket %s (status=%s, priority=%s)", admin.user_id, ticket_id, ticket.status, ticket.priority)
    return ticket
