# routers/submissions.py
import sqlite3

from fastapi import APIRouter, HTTPException

from database import get_db_connection
from models.submissions import (
    Application, ApplicationCreate, LeadRequest, LeadRequestCreate, Subscription, SubscriptionCreate,
)
from routers.crud import crud_router, utcnow

requests_router = crud_router("requests", "requests", LeadRequestCreate, LeadRequest, "Request")
applications_router = crud_router("apply", "applications", ApplicationCreate, Application, "Application")

subscribe_router = APIRouter(prefix="/api/subscribe", tags=["subscribe"])


@subscribe_router.post("", response_model=Subscription, status_code=201)
def subscribe(sub: SubscriptionCreate):
    email = sub.email.strip().lower()
    conn = get_db_connection()
    cursor = conn.cursor()
    try:
        cursor.execute(
            "INSERT INTO subscribers (email, created_at) VALUES (?, ?)",
            (email, utcnow()),
        )
    except sqlite3.IntegrityError:
        conn.close()
        raise HTTPException(status_code=409, detail="Email already subscribed")
    conn.commit()
    cursor.execute("SELECT * FROM subscribers WHERE id = ?", (cursor.lastrowid,))
    row = cursor.fetchone()
    conn.close()
    return Subscription(**dict(row))
