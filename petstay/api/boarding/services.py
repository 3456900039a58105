# petstay/api/boarding/services.py
import logging
from typing import Optional
from firebase_admin import firestore

from petstay.core.exceptions import PersistenceError
from petstay.core.responses import DomainResponse, ErrorType
from petstay.models.boarding import Boarding, BoardingPricing
from petstay.services.firestore_service import get_document, find_first, to_model

class BoardingService:
    """위탁(boarding) 조회를 담당하는 서비스. 다른 도메인에는 DomainResponse로 결과를 전달합니다."""
    def __init__(self, db=None, collection_name: str = 'boardings'):
        self.db = db or firestore.client()
        self.boardings_ref = self.db.collection(collection_name)
        logging.info("BoardingService initialized.")

    def find_boarding_by_id(self, boarding_id: str) -> DomainResponse[Boarding]:
        """위탁 ID로 위탁 정보를 조회합니다. 없거나 조회에 실패하면 실패 응답을 반환합니다."""
        if not boarding_id:
            return DomainResponse.error("Boarding ID is required.", ErrorType.BAD_REQUEST)
        try:
            boarding = to_model(Boarding.from_dict, get_document(self.boardings_ref, boarding_id), 'boardings')
        except PersistenceError as e:
            return DomainResponse.error(str(e), ErrorType.SERVER_ERROR)

        if boarding is None:
            return DomainResponse.error(f"Boarding not found with ID: {boarding_id}", ErrorType.NOT_FOUND)
        return DomainResponse.ok(boarding)

class PricingService:
    """위탁 요금 내역 조회 서비스."""
    def __init__(self, db=None, collection_name: str = 'boarding_pricing'):
        self.db = db or firestore.client()
        self.pricing_ref = self.db.collection(collection_name)

    def get_boarding_pricing(self, boarding_id: str) -> Optional[BoardingPricing]:
        """위탁 ID에 해당하는 요금 내역을 반환합니다. 없으면 None."""
        data = find_first(self.pricing_ref, 'boarding_id', boarding_id)
        return to_model(BoardingPricing.from_dict, data, 'boarding_pricing')
