import pytest
from fakes import FakeAuth, FakeFirestore
from firebase_admin import firestore


@pytest.fixture
def db(monkeypatch):
    fake_db = FakeFirestore()
    monkeypatch.setattr(firestore, "client", lambda: fake_db)
    return fake_db


@pytest.fixture
def fake_auth(monkeypatch):
    import admins.bootstrap_super_admin
    import admins.create_admin
    import admins.delete_admin
    import admins.sync_claims

    fake = FakeAuth()
    for module in (
        admins.create_admin,
        admins.delete_admin,
        admins.bootstrap_super_admin,
        admins.sync_claims,
    ):
        monkeypatch.setattr(module, "auth", fake)
    return fake
