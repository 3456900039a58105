# petstay/services/firestore_service.py
"""
Firestore 조회 공통 헬퍼.

각 도메인 서비스는 이 모듈을 통해 문서를 읽고, Firestore 클라이언트 오류와
형식이 잘못된 문서는 모두 PersistenceError로 변환되어 호출자에게 전달됩니다.
"""
import logging
from typing import Any, Callable, Dict, List, Optional, TypeVar

from google.api_core.exceptions import GoogleAPICallError

from petstay.core.exceptions import PersistenceError
from petstay.utils.datetime_utils import DateTimeUtils

T = TypeVar('T')


def get_document(collection_ref, doc_id: str) -> Optional[Dict[str, Any]]:
    """
    문서 ID로 단일 문서를 조회합니다.

    :param collection_ref: 조회할 Firestore 컬렉션 참조
    :param doc_id: 문서 ID
    :return: 문서가 존재하면 딕셔너리(시간 필드는 UTC로 정규화), 없으면 None
    """
    try:
        doc = collection_ref.document(doc_id).get()
    except GoogleAPICallError as e:
        logging.error(f"Firestore 조회 실패 (Collection: {collection_ref.id}, Doc ID: {doc_id}): {e}", exc_info=True)
        raise PersistenceError(f"Failed to read {collection_ref.id}/{doc_id}") from e

    if not doc.exists:
        return None
    return DateTimeUtils.from_firestore(doc.to_dict())


def find_first(collection_ref, field: str, value: Any) -> Optional[Dict[str, Any]]:
    """field == value 조건을 만족하는 첫 번째 문서를 조회합니다."""
    try:
        query = collection_ref.where(field, '==', value).limit(1).stream()
        doc = next(query, None)
    except GoogleAPICallError as e:
        logging.error(f"Firestore 쿼리 실패 (Collection: {collection_ref.id}, {field}={value}): {e}", exc_info=True)
        raise PersistenceError(f"Failed to query {collection_ref.id} by {field}") from e

    if doc is None:
        return None
    return DateTimeUtils.from_firestore(doc.to_dict())


def stream_documents(query) -> List[Dict[str, Any]]:
    """쿼리 결과 전체를 딕셔너리 리스트로 반환합니다."""
    try:
        return [DateTimeUtils.from_firestore(doc.to_dict()) for doc in query.stream()]
    except GoogleAPICallError as e:
        logging.error(f"Firestore 쿼리 실패: {e}", exc_info=True)
        raise PersistenceError("Failed to stream documents") from e


def to_model(factory: Callable[[Dict[str, Any]], T], data: Optional[Dict[str, Any]], source: str) -> Optional[T]:
    """
    문서 딕셔너리를 도메인 모델로 변환합니다. data가 None이면 None을 반환합니다.
    필수 필드 누락이나 잘못된 Enum 값은 PersistenceError로 변환합니다.
    """
    if data is None:
        return None
    try:
        return factory(data)
    except (KeyError, ValueError, TypeError) as e:
        logging.warning(f"Malformed document in {source}: {e!r}")
        raise PersistenceError(f"Malformed document in {source}: {e}") from e


def save_document(collection_ref, doc_id: str, data: Dict[str, Any]) -> str:
    """문서를 지정한 ID로 저장(덮어쓰기)하고 문서 ID를 반환합니다."""
    try:
        collection_ref.document(doc_id).set(DateTimeUtils.for_firestore(data))
    except GoogleAPICallError as e:
        logging.error(f"Firestore 저장 실패 (Collection: {collection_ref.id}): {e}", exc_info=True)
        raise PersistenceError(f"Failed to save {collection_ref.id}/{doc_id}") from e

    logging.info(f"Firestore 저장 성공 (Collection: {collection_ref.id}, Doc ID: {doc_id})")
    return doc_id
