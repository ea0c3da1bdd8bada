# database.py
import sqlite3

from config import get_database_file

TABLES = {
    "products": """
        CREATE TABLE IF NOT EXISTS products (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            tagline TEXT,
            description TEXT,
            price REAL,
            category TEXT,
            main_image_url TEXT,
            image_urls TEXT NOT NULL DEFAULT '[]',
            video_url TEXT,
            features_text TEXT,
            tco_savings_text TEXT,
            tco_savings_image_url TEXT,
            specifications TEXT NOT NULL DEFAULT '{}',
            related_products_ids TEXT NOT NULL DEFAULT '[]',
            created_at TEXT
        )
    """,
    "qna": """
        CREATE TABLE IF NOT EXISTS qna (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            question TEXT NOT NULL,
            answer TEXT NOT NULL,
            created_at TEXT
        )
    """,
    "awards": """
        CREATE TABLE IF NOT EXISTS awards (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            image_url TEXT NOT NULL,
            created_at TEXT
        )
    """,
    "media": """
        CREATE TABLE IF NOT EXISTS media (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            url TEXT NOT NULL,
            created_at TEXT
        )
    """,
    "requests": """
        CREATE TABLE IF NOT EXISTS requests (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            request_type TEXT NOT NULL,
            product_name TEXT,
            full_name TEXT NOT NULL,
            email TEXT NOT NULL,
            phone_number TEXT,
            address TEXT,
            country TEXT,
            state TEXT,
            city TEXT,
            pincode TEXT,
            company_name TEXT,
            aadhar_number TEXT,
            pan_number TEXT,
            message TEXT,
            quantity INTEGER,
            status TEXT,
            created_at TEXT
        )
    """,
    "applications": """
        CREATE TABLE IF NOT EXISTS applications (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            email TEXT NOT NULL,
            position TEXT,
            created_at TEXT
        )
    """,
    "blogs": """
        CREATE TABLE IF NOT EXISTS blogs (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            title TEXT NOT NULL,
            slug TEXT,
            description TEXT,
            content TEXT,
            image_url TEXT,
            video_url TEXT,
            publication_date TEXT,
            reading_time TEXT,
            tags TEXT NOT NULL DEFAULT '[]',
            created_at TEXT
        )
    """,
    "subscribers": """
        CREATE TABLE IF NOT EXISTS subscribers (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            email TEXT NOT NULL UNIQUE,
            created_at TEXT
        )
    """,
}


def create_database():
    conn = sqlite3.connect(get_database_file())
    cursor = conn.cursor()
    for ddl in TABLES.values():
        cursor.execute(ddl)
    conn.commit()
    conn.close()


def get_db_connection():
    conn = sqlite3.connect(get_database_file())
    conn.row_factory = sqlite3.Row
    return conn
