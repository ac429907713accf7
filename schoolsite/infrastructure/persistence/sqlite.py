import sqlite3
import threading
import uuid
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ...domain.models import AdmissionApplication, Administrator, ContactMessage, NewsItem
from ...domain.ports.persistence import PersistenceGateway


NEWS_COLUMNS = ("title", "content", "excerpt", "category", "author", "image_url", "published")

ADMISSION_COLUMNS = (
    "first_name",
    "last_name",
    "date_of_birth",
    "gender",
    "nationality",
    "address",
    "grade_level",
    "preferred_start_date",
    "previous_school",
    "previous_school_address",
    "last_grade_completed",
    "father_name",
    "mother_name",
    "father_occupation",
    "mother_occupation",
    "guardian_phone",
    "guardian_email",
    "medical_conditions",
    "special_needs",
    "heard_about_us",
    "status",
)


class SQLitePersistence(PersistenceGateway):
    """SQLite-backed implementation of the persistence gateway."""

    def __init__(self, path: Path) -> None:
        if str(path) != ":memory:":
            path.parent.mkdir(parents=True, exist_ok=True)
        self._conn = sqlite3.connect(path, check_same_thread=False)
        self._conn.row_factory = sqlite3.Row
        self._lock = threading.Lock()
        self._initialize()

    def _initialize(self) -> None:
        with self._conn:
            self._conn.executescript(
                """
                CREATE TABLE IF NOT EXISTS settings (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                );

                CREATE TABLE IF NOT EXISTS admin_users (
                    id TEXT PRIMARY KEY,
                    email TEXT NOT NULL UNIQUE,
                    password_hash TEXT NOT NULL,
                    first_name TEXT NOT NULL DEFAULT '',
                    last_name TEXT NOT NULL DEFAULT '',
                    role TEXT NOT NULL DEFAULT 'admin',
                    is_active INTEGER NOT NULL DEFAULT 1,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                );

                CREATE TABLE IF NOT EXISTS contact_messages (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    first_name TEXT NOT NULL,
                    last_name TEXT NOT NULL,
                    email TEXT NOT NULL,
                    phone TEXT,
                    subject TEXT NOT NULL,
                    message TEXT NOT NULL,
                    status TEXT NOT NULL DEFAULT 'unread',
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                );

                CREATE INDEX IF NOT EXISTS idx_contact_messages_created
                    ON contact_messages(created_at DESC);

                CREATE TABLE IF NOT EXISTS news (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    title TEXT NOT NULL,
                    content TEXT NOT NULL,
                    excerpt TEXT,
                    category TEXT NOT NULL,
                    author TEXT,
                    image_url TEXT,
                    published INTEGER NOT NULL DEFAULT 0,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                );

                CREATE INDEX IF NOT EXISTS idx_news_category
                    ON news(category, published);

                CREATE TABLE IF NOT EXISTS admission_applications (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    first_name TEXT NOT NULL,
                    last_name TEXT NOT NULL,
                    date_of_birth TEXT,
                    gender TEXT,
                    nationality TEXT,
                    address TEXT,
                    grade_level TEXT,
                    preferred_start_date TEXT,
                    previous_school TEXT,
                    previous_school_address TEXT,
                    last_grade_completed TEXT,
                    father_name TEXT,
                    mother_name TEXT,
                    father_occupation TEXT,
                    mother_occupation TEXT,
                    guardian_phone TEXT,
                    guardian_email TEXT,
                    medical_conditions TEXT,
                    special_needs TEXT,
                    heard_about_us TEXT,
                    status TEXT NOT NULL DEFAULT 'pending',
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                );
                """
            )

    def close(self) -> None:
        self._conn.close()

    # SettingsRepository API -------------------------------------------------
    def get_setting(self, key: str) -> Optional[str]:
        with self._lock:
            cur = self._conn.execute("SELECT value FROM settings WHERE key = ?", (key,))
            row = cur.fetchone()
        return row["value"] if row else None

    def set_setting(self, key: str, value: str) -> None:
        with self._lock, self._conn:
            self._conn.execute(
                "INSERT INTO settings (key, value) VALUES (?, ?) "
                "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                (key, value),
            )

    def get_settings(self) -> Dict[str, str]:
        with self._lock:
            cur = self._conn.execute("SELECT key, value FROM settings ORDER BY key")
            rows = cur.fetchall()
        return {row["key"]: row["value"] for row in rows}

    # AdministratorRepository API ---------------------------------------------
    def get_admin_by_email(self, email: str) -> Optional[Administrator]:
        with self._lock:
            cur = self._conn.execute("SELECT * FROM admin_users WHERE email = ?", (email.lower(),))
            row = cur.fetchone()
        return self._row_to_admin(row) if row else None

    def get_admin_by_id(self, admin_id: str) -> Optional[Administrator]:
        with self._lock:
            cur = self._conn.execute("SELECT * FROM admin_users WHERE id = ?", (admin_id,))
            row = cur.fetchone()
        return self._row_to_admin(row) if row else None

    def create_admin(
        self,
        email: str,
        password_hash: str,
        first_name: str = "",
        last_name: str = "",
        role: str = "admin",
        admin_id: Optional[str] = None,
    ) -> Administrator:
        identifier = admin_id or uuid.uuid4().hex
        now = self._now()
        with self._lock, self._conn:
            self._conn.execute(
                """
                INSERT INTO admin_users (
                    id, email, password_hash, first_name, last_name, role,
                    is_active, created_at, updated_at
                )
                VALUES (?, ?, ?, ?, ?, ?, 1, ?, ?)
                """,
                (identifier, email.lower(), password_hash, first_name, last_name, role, now, now),
            )
            cur = self._conn.execute("SELECT * FROM admin_users WHERE id = ?", (identifier,))
            row = cur.fetchone()
        if not row:
            raise RuntimeError("Failed to persist administrator.")
        return self._row_to_admin(row)

    def update_admin_password(self, admin_id: str, password_hash: str) -> Administrator:
        now = self._now()
        with self._lock, self._conn:
            self._conn.execute(
                "UPDATE admin_users SET password_hash = ?, updated_at = ? WHERE id = ?",
                (password_hash, now, admin_id),
            )
            cur = self._conn.execute("SELECT * FROM admin_users WHERE id = ?", (admin_id,))
            row = cur.fetchone()
        if not row:
            raise ValueError(f"Administrator {admin_id} not found.")
        return self._row_to_admin(row)

    def set_admin_active(self, admin_id: str, is_active: bool) -> Administrator:
        now = self._now()
        with self._lock, self._conn:
            self._conn.execute(
                "UPDATE admin_users SET is_active = ?, updated_at = ? WHERE id = ?",
                (1 if is_active else 0, now, admin_id),
            )
            cur = self._conn.execute("SELECT * FROM admin_users WHERE id = ?", (admin_id,))
            row = cur.fetchone()
        if not row:
            raise ValueError(f"Administrator {admin_id} not found.")
        return self._row_to_admin(row)

    # ContactMessageRepository API -------------------------------------------
    def create_contact_message(
        self,
        first_name: str,
        last_name: str,
        email: str,
        phone: Optional[str],
        subject: str,
        message: str,
    ) -> ContactMessage:
        now = self._now()
        with self._lock, self._conn:
            cur = self._conn.execute(
                """
                INSERT INTO contact_messages (
                    first_name, last_name, email, phone, subject, message,
                    status, created_at, updated_at
                )
                VALUES (?, ?, ?, ?, ?, ?, 'unread', ?, ?)
                """,
                (first_name, last_name, email, phone, subject, message, now, now),
            )
            message_id = cur.lastrowid
            cur = self._conn.execute("SELECT * FROM contact_messages WHERE id = ?", (message_id,))
            row = cur.fetchone()
        if not row:
            raise RuntimeError("Failed to persist contact message.")
        return self._row_to_contact_message(row)

    def get_contact_message(self, message_id: int) -> Optional[ContactMessage]:
        with self._lock:
            cur = self._conn.execute("SELECT * FROM contact_messages WHERE id = ?", (message_id,))
            row = cur.fetchone()
        return self._row_to_contact_message(row) if row else None

    def get_contact_messages(self) -> List[ContactMessage]:
        with self._lock:
            cur = self._conn.execute("SELECT * FROM contact_messages ORDER BY created_at DESC, id DESC")
            rows = cur.fetchall()
        return [self._row_to_contact_message(row) for row in rows]

    def update_contact_message_status(self, message_id: int, status: str) -> ContactMessage:
        now = self._now()
        with self._lock, self._conn:
            self._conn.execute(
                "UPDATE contact_messages SET status = ?, updated_at = ? WHERE id = ?",
                (status, now, message_id),
            )
            cur = self._conn.execute("SELECT * FROM contact_messages WHERE id = ?", (message_id,))
            row = cur.fetchone()
        if not row:
            raise ValueError(f"Contact message {message_id} not found.")
        return self._row_to_contact_message(row)

    def delete_contact_message(self, message_id: int) -> None:
        with self._lock, self._conn:
            self._conn.execute("DELETE FROM contact_messages WHERE id = ?", (message_id,))

    # NewsRepository API ------------------------------------------------------
    def create_news(self, fields: Dict[str, Any]) -> NewsItem:
        row = self._insert_row("news", NEWS_COLUMNS, fields)
        return self._row_to_news(row)

    def get_news_item(self, news_id: int) -> Optional[NewsItem]:
        with self._lock:
            cur = self._conn.execute("SELECT * FROM news WHERE id = ?", (news_id,))
            row = cur.fetchone()
        return self._row_to_news(row) if row else None

    def get_news(self, *, published_only: bool = False, category: Optional[str] = None) -> List[NewsItem]:
        clauses = []
        params: List[Any] = []
        if published_only:
            clauses.append("published = 1")
        if category is not None:
            clauses.append("category = ?")
            params.append(category)
        where = f" WHERE {' AND '.join(clauses)}" if clauses else ""
        with self._lock:
            cur = self._conn.execute(f"SELECT * FROM news{where} ORDER BY created_at DESC, id DESC", params)
            rows = cur.fetchall()
        return [self._row_to_news(row) for row in rows]

    def update_news(self, news_id: int, fields: Dict[str, Any]) -> NewsItem:
        row = self._update_row("news", NEWS_COLUMNS, news_id, fields)
        if not row:
            raise ValueError(f"News item {news_id} not found.")
        return self._row_to_news(row)

    def delete_news(self, news_id: int) -> None:
        with self._lock, self._conn:
            self._conn.execute("DELETE FROM news WHERE id = ?", (news_id,))

    # AdmissionRepository API -------------------------------------------------
    def create_admission(self, fields: Dict[str, Any]) -> AdmissionApplication:
        row = self._insert_row("admission_applications", ADMISSION_COLUMNS, fields)
        return self._row_to_admission(row)

    def get_admission(self, application_id: int) -> Optional[AdmissionApplication]:
        with self._lock:
            cur = self._conn.execute(
                "SELECT * FROM admission_applications WHERE id = ?", (application_id,)
            )
            row = cur.fetchone()
        return self._row_to_admission(row) if row else None

    def get_admissions(self, status: Optional[str] = None) -> List[AdmissionApplication]:
        query = "SELECT * FROM admission_applications"
        params: List[Any] = []
        if status is not None:
            query += " WHERE status = ?"
            params.append(status)
        with self._lock:
            cur = self._conn.execute(f"{query} ORDER BY created_at DESC, id DESC", params)
            rows = cur.fetchall()
        return [self._row_to_admission(row) for row in rows]

    def update_admission(self, application_id: int, fields: Dict[str, Any]) -> AdmissionApplication:
        row = self._update_row("admission_applications", ADMISSION_COLUMNS, application_id, fields)
        if not row:
            raise ValueError(f"Admission application {application_id} not found.")
        return self._row_to_admission(row)

    def delete_admission(self, application_id: int) -> None:
        with self._lock, self._conn:
            self._conn.execute("DELETE FROM admission_applications WHERE id = ?", (application_id,))

    # Generic row writes --------------------------------------------------------
    def _insert_row(self, table: str, allowed: Sequence[str], fields: Dict[str, Any]) -> sqlite3.Row:
        columns = [name for name in allowed if name in fields]
        now = self._now()
        values = [self._to_column(fields[name]) for name in columns] + [now, now]
        names = ", ".join([*columns, "created_at", "updated_at"])
        placeholders = ", ".join("?" for _ in values)
        with self._lock, self._conn:
            cur = self._conn.execute(f"INSERT INTO {table} ({names}) VALUES ({placeholders})", values)
            row_id = cur.lastrowid
            cur = self._conn.execute(f"SELECT * FROM {table} WHERE id = ?", (row_id,))
            row = cur.fetchone()
        if not row:
            raise RuntimeError(f"Failed to persist {table} row.")
        return row

    def _update_row(
        self, table: str, allowed: Sequence[str], row_id: int, fields: Dict[str, Any]
    ) -> Optional[sqlite3.Row]:
        updates = []
        params: List[Any] = []
        for name in allowed:
            if name in fields:
                updates.append(f"{name} = ?")
                params.append(self._to_column(fields[name]))
        if updates:
            updates.append("updated_at = ?")
            params.append(self._now())
            params.append(row_id)
            statement = f"UPDATE {table} SET {', '.join(updates)} WHERE id = ?"
            with self._lock, self._conn:
                self._conn.execute(statement, params)
        with self._lock:
            cur = self._conn.execute(f"SELECT * FROM {table} WHERE id = ?", (row_id,))
            return cur.fetchone()

    @staticmethod
    def _to_column(value: Any) -> Any:
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, date):
            return value.isoformat()
        return value

    # Helpers ----------------------------------------------------------------
    @staticmethod
    def _now() -> str:
        return datetime.now(timezone.utc).replace(microsecond=0).isoformat()

    @staticmethod
    def _parse_datetime(value: str) -> datetime:
        result = datetime.fromisoformat(value)
        if result.tzinfo is None:
            return result.replace(tzinfo=timezone.utc)
        return result.astimezone(timezone.utc)

    def _row_to_admin(self, row: sqlite3.Row) -> Administrator:
        return Administrator(
            id=row["id"],
            email=row["email"],
            password_hash=row["password_hash"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            role=row["role"],
            is_active=bool(row["is_active"]),
            created_at=self._parse_datetime(row["created_at"]),
            updated_at=self._parse_datetime(row["updated_at"]),
        )

    def _row_to_contact_message(self, row: sqlite3.Row) -> ContactMessage:
        return ContactMessage(
            id=row["id"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            email=row["email"],
            phone=row["phone"],
            subject=row["subject"],
            message=row["message"],
            status=row["status"],
            created_at=self._parse_datetime(row["created_at"]),
            updated_at=self._parse_datetime(row["updated_at"]),
        )

    def _row_to_news(self, row: sqlite3.Row) -> NewsItem:
        return NewsItem(
            id=row["id"],
            title=row["title"],
            content=row["content"],
            excerpt=row["excerpt"],
            category=row["category"],
            author=row["author"],
            image_url=row["image_url"],
            published=bool(row["published"]),
            created_at=self._parse_datetime(row["created_at"]),
            updated_at=self._parse_datetime(row["updated_at"]),
        )

    def _row_to_admission(self, row: sqlite3.Row) -> AdmissionApplication:
        values = {name: row[name] for name in ADMISSION_COLUMNS}
        for name in ("date_of_birth", "preferred_start_date"):
            if values[name]:
                values[name] = date.fromisoformat(values[name])
        return AdmissionApplication(
            id=row["id"],
            created_at=self._parse_datetime(row["created_at"]),
            updated_at=self._parse_datetime(row["updated_at"]),
            **values,
        )
