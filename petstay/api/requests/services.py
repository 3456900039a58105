# petstay/api/requests/services.py
from typing import Optional
from firebase_admin import firestore

from petstay.models.request import Request, Extension, Grooming
from petstay.services.firestore_service import get_document, find_first, to_model

class RequestSearchService:
    """
    고객 요청 조회 서비스.
    연장/미용 요청은 요청 문서와 별도 컬렉션에 세부 내역이 저장되며 request_id로 연결됩니다.
    """
    def __init__(self, db=None,
                 request_collection: str = 'requests',
                 extension_collection: str = 'boarding_extension',
                 grooming_collection: str = 'grooming_request'):
        self.db = db or firestore.client()
        self.requests_ref = self.db.collection(request_collection)
        self.extensions_ref = self.db.collection(extension_collection)
        self.groomings_ref = self.db.collection(grooming_collection)

    def search_by_request_id(self, request_id: str) -> Optional[Request]:
        return to_model(Request.from_dict, get_document(self.requests_ref, request_id), 'requests')

    def search_extension_by_request_id(self, request_id: str) -> Optional[Extension]:
        data = find_first(self.extensions_ref, 'request_id', request_id)
        return to_model(Extension.from_dict, data, 'boarding_extension')

    def search_grooming_by_request_id(self, request_id: str) -> Optional[Grooming]:
        data = find_first(self.groomings_ref, 'request_id', request_id)
        return to_model(Grooming.from_dict, data, 'grooming_request')
