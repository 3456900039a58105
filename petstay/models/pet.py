# petstay/models/pet.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Dict, Any
import logging

class AnimalType(Enum):
    DOG = "DOG"
    CAT = "CAT"
    OTHER = "OTHER"

@dataclass
class Pet:
    """
    Firestore 'pets' 컬렉션 문서 구조.
    위탁 고객(owner)에게 등록된 반려동물의 정적 정보를 관리합니다.
    """
    pet_id: str
    owner_id: str
    name: str
    animal_type: AnimalType
    breed: Optional[str] = None
    age: Optional[int] = None
    special_description: Optional[str] = None
    profile_picture_url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pet":
        """
        Firestore에서 받은 딕셔너리로부터 Pet 인스턴스를 생성합니다.
        문자열로 저장된 animal_type은 Enum으로 변환하고, 알 수 없는 값은 OTHER로 처리합니다.
        """
        processed_data = data.copy()

        animal_type_str = processed_data.get('animal_type')
        try:
            processed_data['animal_type'] = AnimalType(animal_type_str)
        except ValueError:
            logging.warning(f"Invalid AnimalType value '{animal_type_str}' for pet {processed_data.get('pet_id')}. Defaulting to OTHER.")
            processed_data['animal_type'] = AnimalType.OTHER

        if processed_data.get('age') is not None:
            processed_data['age'] = int(processed_data['age'])

        known_fields = cls.__dataclass_fields__.keys()
        return cls(**{k: v for k, v in processed_data.items() if k in known_fields})

@dataclass(frozen=True)
class PetBoardingDetails:
    """활동 로그와 위탁 화면에서 사용하는 반려동물 요약 정보."""
    pet_id: str
    owner_id: str
    pet_name: str
    animal_type: str
    breed: Optional[str] = None
    age: Optional[int] = None
    special_description: Optional[str] = None
    profile_picture_url: Optional[str] = None

    @classmethod
    def from_pet(cls, pet: Pet) -> "PetBoardingDetails":
        return cls(
            pet_id=pet.pet_id,
            owner_id=pet.owner_id,
            pet_name=pet.name,
            animal_type=pet.animal_type.value,
            breed=pet.breed,
            age=pet.age,
            special_description=pet.special_description,
            profile_picture_url=pet.profile_picture_url
        )
