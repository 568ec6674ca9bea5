import logging
from typing import Dict, List, Optional
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from model.contact import ContactSubmission
from schema.contact import ContactFormIn, ContactSubmissionOut
from core.db import CreateDBSession
from util.enum import SubmissionStatus
import error

logger = logging.getLogger(__name__)


class ContactOp:

    @staticmethod
    def create(contact_data: ContactFormIn) -> ContactSubmissionOut:
        """Persist a new submission with status `new`"""
        try:
            with CreateDBSession() as db:
                submission = ContactSubmission(
                    name=contact_data.name,
                    email=contact_data.email,
                    phone=contact_data.phone,
                    message=contact_data.message,
                    status=SubmissionStatus.new,
                )
                db.add(submission)
                db.commit()
                db.refresh(submission)
                logger.info(
                    f"Contact submission {submission.id} created for {submission.email}"
                )
                return ContactSubmissionOut.model_validate(submission)
        except SQLAlchemyError as e:
            logger.exception(f"Failed to create contact submission: {e}")
            raise error.StoreError()

    @staticmethod
    def list_all() -> List[ContactSubmissionOut]:
        """Get every submission, newest first"""
        try:
            with CreateDBSession() as db:
                submissions = db.query(ContactSubmission).order_by(
                    ContactSubmission.created_at.desc(),
                    ContactSubmission.id.desc(),
                ).all()
                return [ContactSubmissionOut.model_validate(s) for s in submissions]
        except SQLAlchemyError as e:
            logger.exception(f"Failed to list contact submissions: {e}")
            raise error.StoreError()

    @staticmethod
    def get_by_id(submission_id: int) -> Optional[ContactSubmissionOut]:
        try:
            with CreateDBSession() as db:
                submission = db.get(ContactSubmission, submission_id)
                if not submission:
                    return None
                return ContactSubmissionOut.model_validate(submission)
        except SQLAlchemyError as e:
            logger.exception(f"Failed to fetch contact submission {submission_id}: {e}")
            raise error.StoreError()

    @staticmethod
    def update_status(submission_id: int, status: SubmissionStatus) -> bool:
        """Set the status of a submission.

        Returns False when the submission does not exist. Setting the
        status it already has is a no-op.
        """
        status = SubmissionStatus(status)
        try:
            with CreateDBSession() as db:
                submission = db.get(ContactSubmission, submission_id)
                if not submission:
                    return False
                if submission.status != status:
                    submission.status = status
                    db.commit()
                return True
        except SQLAlchemyError as e:
            logger.exception(
                f"Failed to update status of contact submission {submission_id}: {e}"
            )
            raise error.StoreError()

    @staticmethod
    def count_by_status() -> Dict[str, int]:
        """Tally submissions per status, plus the overall total"""
        try:
            with CreateDBSession() as db:
                rows = db.query(
                    ContactSubmission.status, func.count(ContactSubmission.id)
                ).group_by(ContactSubmission.status).all()
        except SQLAlchemyError as e:
            logger.exception(f"Failed to count contact submissions: {e}")
            raise error.StoreError()

        counts = {status.value: 0 for status in SubmissionStatus}
        for status, count in rows:
            counts[SubmissionStatus(status).value] = count
        counts["total"] = sum(counts.values())
        return counts
