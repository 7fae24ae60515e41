import io
import sqlite3

import pytest

from cafe_helpers import app_helpers
from cafe_helpers.app_helpers import DatabaseManager
from cafe_helpers.console import Console

SCHEMA = (
    """
    CREATE TABLE Users (
        login TEXT PRIMARY KEY,
        password TEXT NOT NULL,
        phoneNum TEXT,
        favItems TEXT,
        type TEXT
    )
    """,
    """
    CREATE TABLE Menu (
        itemName TEXT PRIMARY KEY,
        type TEXT NOT NULL,
        price REAL NOT NULL,
        description TEXT
    )
    """,
)

MENU_ITEMS = (
    ("Latte", "Drinks", 3.5, "Espresso with steamed milk"),
    ("Mocha", "Drinks", 4.25, "Chocolate espresso"),
    ("Brownie", "Sweets", 2.75, "Walnut brownie"),
    ("Tomato", "Soup", 5.0, "Roasted tomato soup"),
)

CURRENT_ORDER_ID = 42


class SqliteCursor:
    """DB-API cursor speaking the %s placeholder style the client writes its SQL in."""

    def __init__(self, cursor):
        self._cursor = cursor

    def execute(self, query, params=()):
        return self._cursor.execute(query.replace("%s", "?"), params)

    def __getattr__(self, name):
        return getattr(self._cursor, name)


class SqliteConnection:
    def __init__(self):
        self._connection = sqlite3.connect(":memory:", isolation_level=None)
        self._connection.create_function("currval", 1, lambda sequence: CURRENT_ORDER_ID)
        self.autocommit = False
        self.closed = False
        for statement in SCHEMA:
            self._connection.execute(statement)

    def cursor(self):
        return SqliteCursor(self._connection.cursor())

    def close(self):
        self.closed = True
        self._connection.close()

    def insert_user(self, login, password, user_type="Customer", phone="555-0000"):
        self._connection.execute(
            "INSERT INTO Users (login, password, phoneNum, favItems, type) VALUES (?, ?, ?, '', ?)",
            (login, password, phone, user_type)
        )

    def insert_menu(self, items=MENU_ITEMS):
        self._connection.executemany(
            "INSERT INTO Menu (itemName, type, price, description) VALUES (?, ?, ?, ?)", items
        )

    def users(self):
        return self._connection.execute(
            "SELECT login, password, phoneNum, favItems, type FROM Users ORDER BY login"
        ).fetchall()


@pytest.fixture
def connection():
    return SqliteConnection()


@pytest.fixture
def db(connection):
    return DatabaseManager(connection)


@pytest.fixture
def seeded_db(db, connection):
    connection.insert_menu()
    return db


@pytest.fixture
def scripted_console():
    def _console(*lines):
        return Console(io.StringIO("".join(f"{line}\n" for line in lines)))
    return _console


@pytest.fixture
def postgres_connect(monkeypatch, connection):
    calls = []

    def _connect(**kwargs):
        calls.append(kwargs)
        return connection

    monkeypatch.setattr(app_helpers.psycopg2, "connect", _connect)
    return calls
