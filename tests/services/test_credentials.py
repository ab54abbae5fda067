# tests\services\test_credentials.py
import json

import pytest

from quote_scribe.core.domain.models import StorageKey
from quote_scribe.services.credentials import CredentialHolder
from tests.conftest import VALID_KEY


class TestCredentialHolder:

    def test_absent_by_default(self, store):
        assert not store.credential.has()
        assert store.credential.get() == ""
        assert store.credential.masked() == ""

    def test_set_get_remove(self, store, medium):
        assert store.credential.set(VALID_KEY)
        assert store.credential.has()
        assert store.credential.get() == VALID_KEY
        # Plaintext, JSON-encoded, under its own key
        assert json.loads(medium.get_item(StorageKey.API_KEY.value)) == VALID_KEY

        assert store.credential.remove()
        assert not store.credential.has()
        assert store.credential.remove()

    def test_masked(self, store):
        store.credential.set(VALID_KEY)
        assert store.credential.masked() == "sk-or-...0123"

    def test_non_string_value_reads_as_absent(self, store, medium):
        medium.set_item(StorageKey.API_KEY.value, "42")
        assert not store.credential.has()

    @pytest.mark.parametrize(
        "value, expected",
        [
            (VALID_KEY, True),
            ("sk-or-" + "x" * 15, True),
            ("sk-or-" + "x" * 14, False),
            ("sk-ant-" + "x" * 30, False),
            ("", False),
            (None, False),
        ],
    )
    def test_format_validation(self, value, expected):
        assert CredentialHolder.is_valid_format(value) is expected
