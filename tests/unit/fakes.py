"""
In-memory stand-ins for the Firestore client, the Authentication module and
the Messaging module, covering only the calls the functions make.
"""

import copy
import uuid
from types import SimpleNamespace

from firebase_admin import auth
from google.api_core.exceptions import Conflict, NotFound


class FakeDocumentSnapshot:
    def __init__(self, doc_id, data, reference=None):
        self.id = doc_id
        self._data = copy.deepcopy(data) if data is not None else None
        self.reference = reference

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return copy.deepcopy(self._data) if self._data is not None else None


class FakeDocumentReference:
    def __init__(self, db, path):
        self._db = db
        self.path = path
        self.id = path.rsplit("/", 1)[-1]

    def get(self):
        return FakeDocumentSnapshot(self.id, self._db.docs.get(self.path), self)

    def set(self, data, merge=False):
        self._db.check_failure(self.path)
        if merge and self.path in self._db.docs:
            self._db.docs[self.path].update(copy.deepcopy(data))
        else:
            self._db.docs[self.path] = copy.deepcopy(dict(data))

    def update(self, data):
        self._db.check_failure(self.path)
        if self.path not in self._db.docs:
            raise NotFound(f"No document to update: {self.path}")
        self._db.docs[self.path].update(copy.deepcopy(data))

    def create(self, data):
        self._db.check_failure(self.path)
        if self.path in self._db.docs:
            raise Conflict(f"Document already exists: {self.path}")
        self._db.docs[self.path] = copy.deepcopy(dict(data))

    def delete(self):
        self._db.check_failure(self.path)
        self._db.docs.pop(self.path, None)

    def collection(self, name):
        return FakeCollectionReference(self._db, f"{self.path}/{name}")


class FakeQuery:
    def __init__(self, db, path, filters=()):
        self._db = db
        self._path = path
        self._filters = list(filters)

    def where(self, field, op, value):
        assert op == "==", f"Unsupported operator {op}"
        return FakeQuery(self._db, self._path, self._filters + [(field, value)])

    def stream(self):
        self._db.check_failure(self._path)
        prefix = f"{self._path}/"
        for path, data in list(self._db.docs.items()):
            doc_id = path[len(prefix):]
            if not path.startswith(prefix) or "/" in doc_id:
                continue
            if all(data.get(field) == value for field, value in self._filters):
                yield FakeDocumentSnapshot(
                    doc_id, data, FakeDocumentReference(self._db, path)
                )

    def get(self):
        return list(self.stream())


class FakeCollectionReference(FakeQuery):
    def document(self, doc_id=None):
        return FakeDocumentReference(self._db, f"{self._path}/{doc_id or uuid.uuid4().hex}")


class FakeWriteBatch:
    def __init__(self, db):
        self._db = db
        self._writes = []

    def set(self, ref, data, merge=False):
        self._writes.append((ref, data, merge))

    def commit(self):
        for ref, data, merge in self._writes:
            ref.set(data, merge=merge)
        self._db.commits.append(len(self._writes))
        self._writes = []


class FakeFirestore:
    def __init__(self, docs=None):
        self.docs = {path: dict(data) for path, data in (docs or {}).items()}
        self.commits = []
        self.failing_paths = set()

    def check_failure(self, path):
        for failing in self.failing_paths:
            if path.startswith(failing):
                raise RuntimeError(f"Simulated failure for {path}")

    def collection(self, name):
        return FakeCollectionReference(self, name)

    def batch(self):
        return FakeWriteBatch(self)

    def documents_in(self, path):
        prefix = f"{path}/"
        return {
            p[len(prefix):]: data
            for p, data in self.docs.items()
            if p.startswith(prefix) and "/" not in p[len(prefix):]
        }


class FakeUserRecord(SimpleNamespace):
    pass


class FakeListUsersPage:
    def __init__(self, users):
        self._users = users

    def iterate_all(self):
        return iter(self._users)


class FakeAuth:
    EmailAlreadyExistsError = auth.EmailAlreadyExistsError
    UserNotFoundError = auth.UserNotFoundError

    def __init__(self):
        self.users = {}
        self.claims_updates = []
        self.fail_delete = False

    def add_user(self, uid, email, claims=None):
        self.users[uid] = FakeUserRecord(
            uid=uid, email=email, display_name="", custom_claims=claims
        )
        return self.users[uid]

    def create_user(self, email=None, password=None, display_name=None):
        if any(user.email == email for user in self.users.values()):
            raise auth.EmailAlreadyExistsError("Email already exists", None, None)
        uid = f"uid-{len(self.users) + 1}"
        self.users[uid] = FakeUserRecord(
            uid=uid, email=email, display_name=display_name, custom_claims=None
        )
        return self.users[uid]

    def get_user(self, uid):
        if uid not in self.users:
            raise auth.UserNotFoundError(f"No user record found for {uid}")
        return self.users[uid]

    def delete_user(self, uid):
        if self.fail_delete or uid not in self.users:
            raise auth.UserNotFoundError(f"No user record found for {uid}")
        del self.users[uid]

    def list_users(self, max_results=1000):
        return FakeListUsersPage(list(self.users.values()))

    def set_custom_user_claims(self, uid, claims):
        self.get_user(uid).custom_claims = dict(claims)
        self.claims_updates.append((uid, dict(claims)))


def callable_request(uid=None, claims=None, data=None):
    """Build an object shaped like https_fn.CallableRequest."""
    auth_context = SimpleNamespace(uid=uid, token=claims or {}) if uid else None
    return SimpleNamespace(auth=auth_context, data=data or {})


def change_event(before=None, after=None, params=None):
    """Build a Firestore change event; None means the side doesn't exist."""
    return SimpleNamespace(
        data=SimpleNamespace(
            before=FakeDocumentSnapshot("doc", before) if before is not None else None,
            after=FakeDocumentSnapshot("doc", after) if after is not None else None,
        ),
        params=params or {},
    )


def created_event(data, params=None):
    return SimpleNamespace(data=FakeDocumentSnapshot("doc", data), params=params or {})
