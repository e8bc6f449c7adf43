"""
Referral Service - job leads posted by alumni.

Referrals sit outside the drive/application flow; applicationsCount is a
plain counter, not linked to Application records. Only the poster may
delete a referral, which the API layer checks.
"""

import logging
from datetime import datetime
from typing import List

from placementpro.core.exceptions import NotFoundError, ValidationError
from placementpro.db.repository import new_id, referrals_repo
from placementpro.db.store import RecordStore
from placementpro.schemas.schemas import Referral, ReferralCreate

logger = logging.getLogger(__name__)


class ReferralService:

    def __init__(self, store: RecordStore):
        self.referrals = referrals_repo(store)

    def get(self, referral_id: str) -> Referral:
        referral = self.referrals.get(referral_id)
        if referral is None:
            raise NotFoundError("Referral", referral_id)
        return referral

    def list(self) -> List[Referral]:
        return self.referrals.all()

    def list_by_alumni(self, alumni_id: str) -> List[Referral]:
        return self.referrals.find(lambda r: r.alumni_id == alumni_id)

    def create(self, alumni_id: str, data: ReferralCreate) -> Referral:
        required = [data.company_name, data.position, data.package, data.location]
        if not all(value.strip() for value in required):
            raise ValidationError("Please fill all required fields")

        referral = Referral(
            id=new_id("ref"),
            alumni_id=alumni_id,
            company_name=data.company_name.strip(),
            position=data.position.strip(),
            package=data.package.strip(),
            location=data.location.strip(),
            description=data.description,
            requirements=data.requirements,
            posted_at=datetime.utcnow(),
            applications_count=0,
        )
        self.referrals.add(referral)
        logger.info("Referral %s posted by %s", referral.id, alumni_id)
        return referral

    def delete(self, referral_id: str) -> None:
        if not self.referrals.remove(referral_id):
            raise NotFoundError("Referral", referral_id)
