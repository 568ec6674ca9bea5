import logging
from fastapi import APIRouter, Depends, status
from controller.contact import ContactOp
from schema.auth import CallerContext
from schema.contact import (
    ContactFormIn,
    ContactSubmissionOut,
    StatusCountOut,
    StatusOptionOut,
    StatusUpdateIn,
    SuccessOut,
)
from service.auth import require_admin
from util.enum import SubmissionStatus, status_color, status_label
import error

logger = logging.getLogger(__name__)

router = APIRouter(tags=["contact"])

# Every route on this router is gated on the admin role
admin_router = APIRouter(tags=["contact"], dependencies=[Depends(require_admin)])


@router.post(
    "/contact", response_model=SuccessOut, status_code=status.HTTP_201_CREATED
)
def submit_contact_form(contact_data: ContactFormIn):
    """
    Submit the public contact form
    - Input is validated before anything is stored
    - Store failures are reported with a generic message
    """
    try:
        ContactOp.create(contact_data)
    except error.DatabaseError as e:
        logger.error(f"Error submitting contact form from {contact_data.email}: {e}")
        raise error.SubmissionError()

    return SuccessOut(message="Mensagem enviada com sucesso!")


@router.get("/contact/statuses", response_model=list[StatusOptionOut])
def list_status_options():
    """Display label and badge colour for each submission status"""
    return [
        StatusOptionOut(
            value=option, label=status_label(option), color=status_color(option)
        )
        for option in SubmissionStatus
    ]


@admin_router.get("/contact", response_model=list[ContactSubmissionOut])
def list_submissions():
    """
    Get every contact submission, newest first.

    Admin only.
    """
    return ContactOp.list_all()


@admin_router.get("/contact/stats", response_model=StatusCountOut)
def get_submission_stats():
    """Totals for the dashboard cards. Admin only."""
    return ContactOp.count_by_status()


@admin_router.get("/contact/{submission_id}", response_model=ContactSubmissionOut)
def get_submission(submission_id: int):
    submission = ContactOp.get_by_id(submission_id)
    if submission is None:
        raise error.ResourceNotFoundError("Mensagem não encontrada")
    return submission


@admin_router.patch("/contact/{submission_id}/status", response_model=SuccessOut)
def update_submission_status(
    submission_id: int,
    data: StatusUpdateIn,
    caller: CallerContext = Depends(require_admin),
):
    """
    Set the status of a submission.

    Any status may be set from any other; repeating the current one is a no-op.
    """
    if not ContactOp.update_status(submission_id, data.status):
        raise error.ResourceNotFoundError("Mensagem não encontrada")

    logger.info(
        f"Submission {submission_id} marked {data.status.value} by {caller.user_id}"
    )
    return SuccessOut(message="Status atualizado com sucesso!")
