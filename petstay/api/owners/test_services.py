# petstay/api/owners/test_services.py
from unittest.mock import MagicMock

import pytest

from petstay.api.owners.services import OwnerService
from petstay.core.exceptions import PersistenceError


def make_doc(data):
    doc = MagicMock()
    doc.exists = data is not None
    doc.to_dict.return_value = data
    return doc


def test_get_owner_boarding_details():
    db = MagicMock()
    owners_ref = db.collection.return_value
    owners_ref.document.return_value.get.return_value = make_doc({
        'owner_id': 'O1', 'full_name': 'Maria Santos', 'email': 'maria@example.com', 'password_hash': 'x'
    })

    owner = OwnerService(db=db, collection_name='clients').get_owner_boarding_details('O1')

    db.collection.assert_called_once_with('clients')
    owners_ref.document.assert_called_once_with('O1')
    assert owner.full_name == 'Maria Santos'

def test_missing_owner_returns_none():
    db = MagicMock()
    db.collection.return_value.document.return_value.get.return_value = make_doc(None)

    assert OwnerService(db=db).get_owner_boarding_details('O404') is None

def test_owner_document_without_id_is_malformed():
    db = MagicMock()
    db.collection.return_value.document.return_value.get.return_value = make_doc({'full_name': 'No Id'})

    with pytest.raises(PersistenceError):
        OwnerService(db=db).get_owner_boarding_details('O1')
