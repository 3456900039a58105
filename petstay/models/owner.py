# petstay/models/owner.py
from dataclasses import dataclass
from typing import Optional, Dict, Any

@dataclass(frozen=True)
class OwnerBoardingDetails:
    """Firestore 'pet_owners' 문서에서 위탁/활동 로그에 필요한 필드만 추린 요약 정보."""
    owner_id: str
    full_name: str
    email: Optional[str] = None
    phone_number: Optional[str] = None
    address: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OwnerBoardingDetails":
        full_name = data.get('full_name')
        if not full_name:
            # 이름이 분리 저장된 계정 문서
            full_name = " ".join(p for p in (data.get('first_name'), data.get('last_name')) if p)
        return cls(
            owner_id=data['owner_id'],
            full_name=full_name,
            email=data.get('email'),
            phone_number=data.get('phone_number'),
            address=data.get('address')
        )
