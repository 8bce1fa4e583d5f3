# dashboard/importer.py
"""
Sync the remote user collection into the customers table.

Each remote user id is mapped to a stable customer id with uuid5, so running
the import again updates the same rows instead of adding new ones.
"""

import logging
import uuid
from typing import Any, Dict, List

import httpx
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.engine import Connection, Engine

from dashboard.db.schema import customers

logger = logging.getLogger(__name__)

# Fixed for good: changing it re-keys every imported customer
NAMESPACE = uuid.NAMESPACE_DNS  # 6ba7b810-9dad-11d1-80b4-00c04fd430c8


# ---- Helpers ----

def customer_id_for(external_id: Any) -> str:
    return str(uuid.uuid5(NAMESPACE, str(external_id)))


def fetch_all_users(client: httpx.Client, url: str, limit: int = 100) -> List[Dict[str, Any]]:
    """
    Page through the collection (page=1, 2, ...) until an empty or short page.
    Any non-2xx response raises httpx.HTTPStatusError.
    """
    out: List[Dict[str, Any]] = []
    page = 1

    while True:
        response = client.get(url, params={"page": page, "limit": limit})
        response.raise_for_status()
        chunk = response.json()

        if not isinstance(chunk, list) or len(chunk) == 0:
            break
        out.extend(chunk)
        logger.info("Fetched page %s (%s users)", page, len(chunk))

        if len(chunk) < limit:
            break
        page += 1

    return out


def _dialect_insert(conn: Connection):
    if conn.dialect.name == "postgresql":
        return pg_insert
    if conn.dialect.name == "sqlite":
        return sqlite_insert
    raise NotImplementedError(f"No upsert support for dialect {conn.dialect.name!r}")


def upsert_customer(conn: Connection, user: Dict[str, Any]) -> None:
    """
    Insert or update a customer by its derived id.

    user: one record of the remote collection, e.g.
      {"id": "1", "name": "...", "email": "...", "avatar": "https://..."}
    """
    insert = _dialect_insert(conn)
    stmt = insert(customers).values(
        id=customer_id_for(user["id"]),
        name=user.get("name"),
        email=user.get("email"),
        image_url=user.get("avatar"),
    )

    # On conflict by id, overwrite everything the remote side owns
    stmt = stmt.on_conflict_do_update(
        index_elements=[customers.c.id],
        set_={
            "name": stmt.excluded.name,
            "email": stmt.excluded.email,
            "image_url": stmt.excluded.image_url,
        },
    )

    conn.execute(stmt)


def import_users(engine: Engine, users: List[Dict[str, Any]]) -> int:
    """
    Upsert every user in one transaction. If any row fails nothing from this
    run is kept and the error propagates.
    """
    with engine.begin() as conn:
        for user in users:
            upsert_customer(conn, user)

    return len(users)
