from __future__ import annotations

import logging
from dataclasses import dataclass

from src.records.results import NotAuthorized
from src.records.schema import Account, ContactMessage, Scholarship, Session
from src.repository.records import RecordRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AdminConsole:
    """Administrative operations for an admin session.

    Every call checks the stored account behind the session, so a revoked
    flag or a deleted account takes effect immediately. Opening the console
    never changes anyone's admin flag.
    """

    repository: RecordRepository
    session: Session | None

    def _require_admin(self) -> Account:
        account = self.repository.account_for(self.session)
        if account is None or not account.is_admin:
            email = self.session.email if self.session is not None else None
            logger.warning("Rejected admin request for session %s.", email)
            raise NotAuthorized()
        return account

    @property
    def is_authorized(self) -> bool:
        try:
            self._require_admin()
        except NotAuthorized:
            return False
        return True

    def pending_submissions(self) -> list[Scholarship]:
        self._require_admin()
        return self.repository.list_submissions()

    def approve(self, submission_id: str) -> bool:
        self._require_admin()
        return self.repository.promote_submission(submission_id)

    def discard(self, submission_id: str) -> bool:
        self._require_admin()
        return self.repository.remove_submission(submission_id)

    def catalog(self) -> list[Scholarship]:
        self._require_admin()
        return self.repository.merged_scholarships()

    def delete_scholarship(self, scholarship_id: str) -> bool:
        self._require_admin()
        return self.repository.remove_approved_scholarship(scholarship_id)

    def accounts(self) -> list[Account]:
        self._require_admin()
        return self.repository.list_accounts()

    def newsletter(self) -> list[str]:
        self._require_admin()
        return self.repository.list_newsletter()

    def contact_messages(self) -> list[ContactMessage]:
        self._require_admin()
        return self.repository.list_contact_messages()
