# petstay/api/pets/services.py
import logging
from typing import Optional
from firebase_admin import firestore

from petstay.models.pet import Pet, PetBoardingDetails
from petstay.services.firestore_service import get_document, to_model

class PetService:
    """위탁 고객의 반려동물 정보 조회를 전담하는 서비스."""
    def __init__(self, db=None, collection_name: str = 'pets'):
        self.db = db or firestore.client()
        self.pets_ref = self.db.collection(collection_name)
        logging.info("PetService initialized.")

    def get_pet_by_id(self, pet_id: str) -> Optional[Pet]:
        """반려동물 문서를 Pet 객체로 변환하여 반환합니다. 없으면 None."""
        return to_model(Pet.from_dict, get_document(self.pets_ref, pet_id), 'pets')

    def get_pet_boarding_details(self, pet_id: str) -> Optional[PetBoardingDetails]:
        """활동 로그/위탁 화면용 반려동물 요약 정보를 반환합니다. 없으면 None."""
        pet = self.get_pet_by_id(pet_id)
        if pet is None:
            return None
        return PetBoardingDetails.from_pet(pet)
