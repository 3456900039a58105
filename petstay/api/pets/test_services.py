# petstay/api/pets/test_services.py
from unittest.mock import MagicMock

from petstay.api.pets.services import PetService
from petstay.models.pet import AnimalType


def make_doc(data):
    doc = MagicMock()
    doc.exists = data is not None
    doc.to_dict.return_value = data
    return doc


def test_get_pet_by_id():
    db = MagicMock()
    db.collection.return_value.document.return_value.get.return_value = make_doc({
        'pet_id': 'P1', 'owner_id': 'O1', 'name': 'Max', 'animal_type': 'DOG', 'breed': 'Shih Tzu', 'age': '3'
    })

    pet = PetService(db=db).get_pet_by_id('P1')

    assert pet.animal_type is AnimalType.DOG
    assert pet.age == 3

def test_get_pet_boarding_details():
    db = MagicMock()
    db.collection.return_value.document.return_value.get.return_value = make_doc({
        'pet_id': 'P1', 'owner_id': 'O1', 'name': 'Luna', 'animal_type': 'CAT'
    })

    details = PetService(db=db).get_pet_boarding_details('P1')

    assert (details.pet_name, details.animal_type, details.owner_id) == ('Luna', 'CAT', 'O1')

def test_missing_pet_returns_none():
    db = MagicMock()
    db.collection.return_value.document.return_value.get.return_value = make_doc(None)
    service = PetService(db=db)

    assert service.get_pet_by_id('P404') is None
    assert service.get_pet_boarding_details('P404') is None
