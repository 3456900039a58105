# petstay/api/owners/services.py
from typing import Optional
from firebase_admin import firestore

from petstay.models.owner import OwnerBoardingDetails
from petstay.services.firestore_service import get_document, to_model

class OwnerService:
    """위탁 고객(pet owner) 정보 조회 서비스."""
    def __init__(self, db=None, collection_name: str = 'pet_owners'):
        self.db = db or firestore.client()
        self.owners_ref = self.db.collection(collection_name)

    def get_owner_boarding_details(self, owner_id: str) -> Optional[OwnerBoardingDetails]:
        """고객 ID로 요약 정보를 조회합니다. 없으면 None."""
        return to_model(OwnerBoardingDetails.from_dict, get_document(self.owners_ref, owner_id), 'pet_owners')
