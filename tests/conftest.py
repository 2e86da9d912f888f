import copy
import uuid
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from postgrest.exceptions import APIError

from gemstore.config import settings
from gemstore.core.limiter import limiter
from gemstore.database.supabase_client import get_supabase
from gemstore.main import app
from gemstore.modules.admin_auth.service import AdminAuthService

ADMIN_EMAIL = "owner@example.com"
ADMIN_PASSCODE = "open-sesame"

# Columns that must be unique per table, mirroring the database constraints
UNIQUE_KEYS = {
    "categories": [("name",), ("slug",)],
    "products": [("sku",)],
    "site_content": [("section", "key")],
}


class FakeResult:
    def __init__(self, data, count=None):
        self.data = data
        self.count = count


class FakeQuery:
    """Just enough of the postgrest query builder for the services under test."""

    def __init__(self, db, table):
        self.db = db
        self.table_name = table
        self.action = "select"
        self.payload = None
        self.filters = []
        self.orders = []
        self.limit_n = None
        self.range_bounds = None
        self.count_mode = None

    # actions
    def select(self, columns="*", count=None):
        self.action = "select"
        self.count_mode = count
        return self

    def insert(self, payload):
        self.action = "insert"
        self.payload = payload
        return self

    def update(self, payload):
        self.action = "update"
        self.payload = payload
        return self

    def delete(self):
        self.action = "delete"
        return self

    def upsert(self, payload, on_conflict=None):
        self.action = "upsert"
        self.payload = payload
        self.on_conflict = on_conflict
        return self

    # filters
    def _filter(self, fn):
        self.filters.append(fn)
        return self

    def eq(self, column, value):
        return self._filter(lambda row: row.get(column) == value)

    def neq(self, column, value):
        return self._filter(lambda row: row.get(column) != value)

    def in_(self, column, values):
        values = list(values)
        return self._filter(lambda row: row.get(column) in values)

    def lt(self, column, value):
        return self._filter(lambda row: row.get(column) is not None and row[column] < value)

    def lte(self, column, value):
        return self._filter(lambda row: row.get(column) is not None and row[column] <= value)

    def gt(self, column, value):
        return self._filter(lambda row: row.get(column) is not None and row[column] > value)

    def gte(self, column, value):
        return self._filter(lambda row: row.get(column) is not None and row[column] >= value)

    def order(self, column, desc=False):
        self.orders.append((column, desc))
        return self

    def limit(self, n):
        self.limit_n = n
        return self

    def range(self, start, end):
        self.range_bounds = (start, end)
        return self

    def _matching(self):
        rows = self.db.tables.setdefault(self.table_name, [])
        return [row for row in rows if all(f(row) for f in self.filters)]

    def _check_unique(self, candidate, ignore=None):
        for columns in UNIQUE_KEYS.get(self.table_name, []):
            if any(candidate.get(c) is None for c in columns):
                continue
            for row in self.db.tables.get(self.table_name, []):
                if row is ignore:
                    continue
                if all(row.get(c) == candidate.get(c) for c in columns):
                    raise APIError({"message": "duplicate key value", "code": "23505", "hint": None, "details": None})

    def execute(self):
        if self.db.fail_tables.get(self.table_name):
            raise APIError({"message": "database unavailable", "code": "XX000", "hint": None, "details": None})
        self.db.calls.append((self.table_name, self.action))
        if self.action in ("insert", "update", "upsert"):
            self.db.writes.append((self.table_name, self.action, copy.deepcopy(self.payload)))
        rows = self.db.tables.setdefault(self.table_name, [])

        if self.action == "upsert":
            payload = self.payload if isinstance(self.payload, list) else [self.payload]
            keys = [k.strip() for k in (self.on_conflict or "id").split(",")]
            stored = []
            for item in payload:
                existing = next((r for r in rows if all(r.get(k) == item.get(k) for k in keys)), None)
                if existing is None:
                    existing = {"id": str(uuid.uuid4()), "created_at": self.db.next_timestamp()}
                    rows.append(existing)
                existing.update(copy.deepcopy(item))
                stored.append(copy.deepcopy(existing))
            return FakeResult(stored)

        if self.action == "insert":
            payload = self.payload if isinstance(self.payload, list) else [self.payload]
            created = []
            for item in payload:
                row = {"id": str(uuid.uuid4()), "created_at": self.db.next_timestamp(), **copy.deepcopy(item)}
                self._check_unique(row)
                rows.append(row)
                created.append(copy.deepcopy(row))
            return FakeResult(created)

        matching = self._matching()

        if self.action == "update":
            updated = []
            for row in matching:
                candidate = {**row, **copy.deepcopy(self.payload)}
                self._check_unique(candidate, ignore=row)
                row.update(copy.deepcopy(self.payload))
                updated.append(copy.deepcopy(row))
            return FakeResult(updated)

        if self.action == "delete":
            for row in matching:
                rows.remove(row)
            return FakeResult([copy.deepcopy(r) for r in matching])

        for column, desc in reversed(self.orders):
            matching.sort(key=lambda r: (r.get(column) is None, r.get(column)), reverse=desc)
        count = len(matching) if self.count_mode else None
        if self.range_bounds:
            start, end = self.range_bounds
            matching = matching[start:end + 1]
        if self.limit_n is not None:
            matching = matching[:self.limit_n]
        return FakeResult([copy.deepcopy(r) for r in matching], count=count)


class FakeRpc:
    def __init__(self, db, name, params):
        self.db = db
        self.name = name
        self.params = params

    def execute(self):
        self.db.rpc_calls.append((self.name, self.params))
        if self.name == "decrement_inventory":
            for row in self.db.tables.get("products", []):
                if row["id"] == self.params["p_product_id"]:
                    row["inventory"] = max(0, (row.get("inventory") or 0) - self.params["p_quantity"])
        return FakeResult(None)


class FakeBucket:
    def __init__(self, db, name):
        self.db = db
        self.name = name

    def upload(self, path, content, options=None):
        if self.db.storage_error:
            raise self.db.storage_error
        self.db.uploads.append({"bucket": self.name, "path": path, "size": len(content), "options": options})
        return {"Key": f"{self.name}/{path}"}

    def get_public_url(self, path):
        return f"https://storage.test/{self.name}/{path}"

    def remove(self, paths):
        if self.db.storage_error:
            raise self.db.storage_error
        self.db.removed.extend(f"{self.name}/{p}" for p in paths)
        return [{"name": p} for p in paths]


class FakeStorage:
    def __init__(self, db):
        self.db = db

    def from_(self, bucket):
        return FakeBucket(self.db, bucket)


class FakeSupabase:
    def __init__(self):
        self.tables = {}
        self.calls = []
        self.rpc_calls = []
        self.writes = []
        self.removed = []
        self.uploads = []
        self.storage_error = None
        self.fail_tables = {}
        self.storage = FakeStorage(self)
        self._clock = 0

    def next_timestamp(self):
        # strictly increasing so "newest first" ordering is deterministic
        self._clock += 1
        return datetime(2025, 1, 1, tzinfo=timezone.utc).replace(microsecond=self._clock).isoformat()

    def table(self, name):
        return FakeQuery(self, name)

    def rpc(self, name, params):
        return FakeRpc(self, name, params)

    def seed(self, table, *rows):
        stored = []
        for row in rows:
            row = {"id": str(uuid.uuid4()), "created_at": self.next_timestamp(), **row}
            self.tables.setdefault(table, []).append(row)
            stored.append(row)
        return stored[0] if len(stored) == 1 else stored


@pytest.fixture
def fake_db():
    return FakeSupabase()


@pytest.fixture
def client(fake_db):
    app.dependency_overrides[get_supabase] = lambda: fake_db
    limiter.reset()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def admin_settings(monkeypatch):
    monkeypatch.setattr(settings, "jwt_secret", "test-secret")
    monkeypatch.setattr(settings, "admin_email_1", ADMIN_EMAIL)
    monkeypatch.setattr(settings, "admin_passcode_1", ADMIN_PASSCODE)
    monkeypatch.setattr(settings, "admin_names", f"{ADMIN_EMAIL}=Owner")
    monkeypatch.setattr(settings, "hcaptcha_secret_key", None)
    return settings


@pytest.fixture
def admin_headers(admin_settings):
    token = AdminAuthService().create_token(ADMIN_EMAIL)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def product(fake_db):
    return fake_db.seed("products", {
        "name": "Alberta Peridot",
        "description": "Hand-mined peridot",
        "price": 120.0,
        "inventory": 3,
        "sku": "PROD-1-AAAAAA",
        "is_active": True,
        "featured": False,
        "on_sale": False,
        "images": [],
        "tags": [],
        "metadata": {},
    })
