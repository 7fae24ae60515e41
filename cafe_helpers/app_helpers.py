import sys
from functools import wraps

import click
import psycopg2
from tabulate import tabulate

from .constants import *
from .logger import logger


class DatabaseManager:
    def __init__(self, connection):
        self.connection = connection

    @classmethod
    def connect(cls, dbname: str, dbport: str, user: str, password: str = DB_PASSWORD, host: str = DB_HOST):
        """
        Opens the one connection the session works with. Failing to connect is fatal.
        """
        click.echo("Connecting to database...", nl=False)
        url = f"postgresql://{host}:{dbport}/{dbname}"
        click.echo(f"Connection URL: {url}\n")
        logger.info(f"Connecting to {url} as {user}")
        try:
            connection = psycopg2.connect(host=host, port=dbport, dbname=dbname, user=user, password=password)
        except psycopg2.Error as e:
            logger.error(f"Connection to {url} failed: {e}")
            click.echo(f"Error - Unable to Connect to Database: {e}", err=True)
            click.echo("Make sure you started postgres on this machine")
            sys.exit(-1)
        connection.autocommit = True
        click.echo("Done")
        return cls(connection)

    def _execute(self, cursor, query: str, params: tuple = None):
        logger.debug(f"SQL: {query} {params or ''}")
        if params:
            cursor.execute(query, params)
        else:
            cursor.execute(query)

    def execute_update(self, query: str, params: tuple = None) -> None:
        """Runs CREATE, INSERT, UPDATE, DELETE or DROP statements."""
        cursor = self.connection.cursor()
        try:
            self._execute(cursor, query, params)
        finally:
            cursor.close()

    def execute_query_and_print(self, query: str, params: tuple = None) -> int:
        """
        Prints the column names once, then every row tab-separated.
        Returns the number of rows printed; an empty result prints nothing.
        """
        cursor = self.connection.cursor()
        try:
            self._execute(cursor, query, params)
            headers = [column[0] for column in cursor.description]
            rows = [[str(value) for value in row] for row in cursor.fetchall()]
        finally:
            cursor.close()
        if rows:
            click.echo(tabulate(rows, headers=headers, tablefmt="tsv", disable_numparse=True, stralign=None, numalign=None))
        return len(rows)

    def execute_query_and_return(self, query: str, params: tuple = None) -> list:
        cursor = self.connection.cursor()
        try:
            self._execute(cursor, query, params)
            return [
                [None if value is None else str(value) for value in row]
                for row in cursor.fetchall()
            ]
        finally:
            cursor.close()

    def execute_query(self, query: str, params: tuple = None) -> int:
        """
        Existence check: 1 when the query yields at least one row, else 0.
        """
        cursor = self.connection.cursor()
        try:
            self._execute(cursor, query, params)
            return 1 if cursor.fetchone() is not None else 0
        finally:
            cursor.close()

    def get_curr_seq_val(self, sequence: str) -> int:
        cursor = self.connection.cursor()
        try:
            self._execute(cursor, "SELECT currval(%s)", (sequence,))
            row = cursor.fetchone()
        finally:
            cursor.close()
        if row is None:
            return -1
        return int(row[0])

    def cleanup(self) -> None:
        if self.connection is None:
            return
        try:
            self.connection.close()
        except Exception as e:
            logger.debug(f"Ignoring error on close: {e}")
        self.connection = None
        logger.info("Connection closed")


def not_implemented(func):
    @wraps(func)
    def wrapper(self, *args, **kwargs):
        logger.debug(f"{func.__name__} is not implemented")
        return None
    return wrapper


class AccountManager:
    def __init__(self, db_manager: DatabaseManager):
        self.db = db_manager

    def create_account(self, login: str, password: str, phone: str) -> None:
        # login uniqueness is left to the USERS primary key
        self.db.execute_update(
            f"INSERT INTO {USER_TABLE} (phoneNum, login, password, favItems, type) VALUES (%s, %s, %s, %s, %s)",
            (phone, login, password, "", DEFAULT_USER_TYPE)
        )

    def login(self, login: str, password: str) -> bool:
        found = self.db.execute_query(
            f"SELECT * FROM {USER_TABLE} WHERE login = %s AND password = %s",
            (login, password)
        )
        return found > 0

    def is_manager(self, login: str) -> bool:
        found = self.db.execute_query(
            f"SELECT * FROM {USER_TABLE} U WHERE U.login = %s AND U.type = %s",
            (login, MANAGER_TYPE)
        )
        return found > 0


class CatalogManager:
    ITEM_COLUMNS = "M.itemName AS Name, M.price AS Price, M.description AS Types"

    def __init__(self, db_manager: DatabaseManager):
        self.db = db_manager

    def _print_items(self, where: str, value: str) -> int:
        return self.db.execute_query_and_print(
            f"SELECT {self.ITEM_COLUMNS} FROM {MENU_TABLE} M WHERE {where} = %s",
            (value,)
        )

    def browse(self) -> dict:
        counts = {}
        for category in MENU_CATEGORIES:
            click.echo(f"\n{category}:\n-------------------------")
            counts[category] = self._print_items("M.type", category)
            click.echo(ITEM_COUNT.format(counts[category]))
        return counts

    def search_by_name(self, item_name: str) -> int:
        return self._print_items("M.itemName", item_name)

    def search_by_type(self, item_type: str) -> int:
        return self._print_items("M.type", item_type)

    @not_implemented
    def update_menu(self, login: str):
        pass


class OrderManager:
    def __init__(self, db_manager: DatabaseManager):
        self.db = db_manager

    @not_implemented
    def update_profile(self, login: str):
        pass

    @not_implemented
    def place_order(self, login: str):
        pass

    @not_implemented
    def update_order(self, login: str):
        pass
