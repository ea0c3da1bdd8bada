# routers/crud.py
"""Router factory for the flat sqlite-backed resources under /api."""

import logging
from datetime import datetime, timezone
from typing import List

from fastapi import APIRouter, HTTPException

from database import get_db_connection

logger = logging.getLogger(__name__)

ALL_OPERATIONS = ("list", "get", "create", "update", "delete")


def utcnow():
    return datetime.now(timezone.utc).isoformat()


def crud_router(prefix, table, create_model, read_model, label, operations=ALL_OPERATIONS):
    """Build GET/POST ``/api/{prefix}`` and GET/PUT/DELETE ``/api/{prefix}/{id}``.

    Columns are the fields of ``create_model``; ``created_at`` is set on insert.
    Rows are returned through ``read_model``.
    """
    router = APIRouter(prefix=f"/api/{prefix}", tags=[prefix])
    fields = list(create_model.model_fields)

    def row_to_item(row):
        return read_model(**dict(row))

    def fetch_row(cursor, item_id):
        cursor.execute(f"SELECT * FROM {table} WHERE id = ?", (item_id,))
        return cursor.fetchone()

    if "list" in operations:
        @router.get("", response_model=List[read_model])
        def list_items():
            conn = get_db_connection()
            cursor = conn.cursor()
            cursor.execute(f"SELECT * FROM {table} ORDER BY id DESC")
            rows = cursor.fetchall()
            conn.close()
            return [row_to_item(r) for r in rows]

    if "get" in operations:
        @router.get("/{item_id}", response_model=read_model)
        def get_item(item_id: int):
            conn = get_db_connection()
            row = fetch_row(conn.cursor(), item_id)
            conn.close()
            if not row:
                raise HTTPException(status_code=404, detail=f"{label} not found")
            return row_to_item(row)

    if "create" in operations:
        @router.post("", response_model=read_model, status_code=201)
        def create_item(item: create_model):
            data = item.model_dump()
            columns = fields + ["created_at"]
            placeholders = ", ".join("?" for _ in columns)
            conn = get_db_connection()
            cursor = conn.cursor()
            cursor.execute(
                f"INSERT INTO {table} ({', '.join(columns)}) VALUES ({placeholders})",
                [data[f] for f in fields] + [utcnow()],
            )
            conn.commit()
            row = fetch_row(cursor, cursor.lastrowid)
            conn.close()
            logger.info("Created %s %s", table, row["id"])
            return row_to_item(row)

    if "update" in operations:
        @router.put("/{item_id}", response_model=read_model)
        def update_item(item_id: int, item: create_model):
            data = item.model_dump()
            conn = get_db_connection()
            cursor = conn.cursor()
            if not fetch_row(cursor, item_id):
                conn.close()
                raise HTTPException(status_code=404, detail=f"{label} not found")
            assignments = ", ".join(f"{f}=?" for f in fields)
            cursor.execute(
                f"UPDATE {table} SET {assignments} WHERE id=?",
                [data[f] for f in fields] + [item_id],
            )
            conn.commit()
            row = fetch_row(cursor, item_id)
            conn.close()
            logger.info("Updated %s %s", table, item_id)
            return row_to_item(row)

    if "delete" in operations:
        @router.delete("/{item_id}", status_code=204)
        def delete_item(item_id: int):
            conn = get_db_connection()
            cursor = conn.cursor()
            cursor.execute(f"DELETE FROM {table} WHERE id = ?", (item_id,))
            deleted = cursor.rowcount
            conn.commit()
            conn.close()
            if not deleted:
                raise HTTPException(status_code=404, detail=f"{label} not found")
            logger.info("Deleted %s %s", table, item_id)
            return

    return router
