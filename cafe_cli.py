from enum import Enum

import click

from cafe_helpers.app_helpers import AccountManager, CatalogManager, DatabaseManager, OrderManager
from cafe_helpers.console import Console
from cafe_helpers.constants import *
from cafe_helpers.logger import logger


class MenuState(Enum):
    MAIN = "main"
    AUTHENTICATED = "authenticated"
    EXIT = "exit"


def greeting():
    click.echo(
        "\n\n*******************************************************\n"
        "              User Interface      \t               \n"
        "*******************************************************\n"
    )


def _report(handler_name: str, error: Exception):
    logger.warning(f"{handler_name} failed: {error!r}")
    click.echo(str(error), err=True)


def create_user(db: DatabaseManager, console: Console):
    """Creates a new Customer from the login, password and phone typed in."""
    try:
        login = console.prompt("\tEnter user login: ")
        password = console.prompt("\tEnter user password: ")
        phone = console.prompt("\tEnter user phone: ")
        AccountManager(db).create_account(login, password, phone)
        click.echo(USER_CREATED)
    except Exception as e:
        _report("CreateUser", e)


def log_in(db: DatabaseManager, console: Console):
    """Returns the login on matching credentials, None otherwise."""
    try:
        login = console.prompt("\nEnter user login: ")
        password = console.prompt("Enter user password: ")
        if AccountManager(db).login(login, password):
            click.echo(LOGIN_SUCCESS.format(login))
            return login
        click.echo(LOGIN_FAILED)
        return None
    except Exception as e:
        _report("LogIn", e)
        return None


def menu(db: DatabaseManager, console: Console, authorized_user: str):
    try:
        is_manager = AccountManager(db).is_manager(authorized_user)
        catalog = CatalogManager(db)

        click.echo("\nMENU OPTIONS")
        click.echo("---------")
        click.echo(f"{CHOICE_BROWSE_MENU}. Browse Menu")
        click.echo(f"{CHOICE_SEARCH_NAME}. Search By Name")
        click.echo(f"{CHOICE_SEARCH_CATEGORY}. Search By Category")
        if is_manager:
            click.echo(f"{CHOICE_UPDATE_MENU}. Update Menu")
        click.echo(".........................")
        click.echo(f"{CHOICE_BACK}. Return to Main Menu")

        choice = console.read_menu_choice()
        if choice == CHOICE_BROWSE_MENU:
            catalog.browse()
        elif choice == CHOICE_SEARCH_NAME:
            item_name = console.prompt("\nEnter item name: ")
            found = catalog.search_by_name(item_name)
            click.echo(ITEM_COUNT.format(found) if found > 0 else ITEM_NOT_FOUND)
        elif choice == CHOICE_SEARCH_CATEGORY:
            item_type = console.prompt(CATEGORY_PROMPT)
            found = catalog.search_by_type(item_type)
            click.echo(ITEM_COUNT.format(found) if found > 0 else INVALID_CATEGORY)
        elif choice == CHOICE_UPDATE_MENU and is_manager:
            catalog.update_menu(authorized_user)
        elif choice != CHOICE_BACK:
            click.echo(UNRECOGNIZED)
    except Exception as e:
        _report("Menu", e)


def update_profile(db: DatabaseManager, console: Console, authorized_user: str):
    return OrderManager(db).update_profile(authorized_user)


def place_order(db: DatabaseManager, console: Console, authorized_user: str):
    return OrderManager(db).place_order(authorized_user)


def update_order(db: DatabaseManager, console: Console, authorized_user: str):
    return OrderManager(db).update_order(authorized_user)


MAIN_MENU = {
    CHOICE_CREATE_USER: ("Create user", create_user),
    CHOICE_LOG_IN: ("Log in", log_in),
}

USER_MENU = {
    CHOICE_GO_TO_MENU: ("Go to Menu", menu),
    CHOICE_UPDATE_PROFILE: ("Update Profile", update_profile),
    CHOICE_PLACE_ORDER: ("Place an Order", place_order),
    CHOICE_UPDATE_ORDER: ("Update an Order", update_order),
}


def main_menu(db: DatabaseManager, console: Console):
    click.echo("\nMAIN MENU")
    click.echo("---------")
    for choice, (label, _) in MAIN_MENU.items():
        click.echo(f"{choice}. {label}")
    click.echo(f"{CHOICE_BACK}. < EXIT")

    choice = console.read_menu_choice()
    if choice == CHOICE_BACK:
        return MenuState.EXIT, None
    if choice not in MAIN_MENU:
        click.echo(UNRECOGNIZED_MAIN)
        return MenuState.MAIN, None
    _, handler = MAIN_MENU[choice]
    authorized_user = handler(db, console)
    if authorized_user is None:
        return MenuState.MAIN, None
    return MenuState.AUTHENTICATED, authorized_user


def user_menu(db: DatabaseManager, console: Console, authorized_user: str):
    click.echo("\nMAIN MENU")
    click.echo("---------")
    for choice, (label, _) in USER_MENU.items():
        click.echo(f"{choice}. {label}")
    click.echo(".........................")
    click.echo(f"{CHOICE_BACK}. Log Out")

    choice = console.read_menu_choice()
    if choice == CHOICE_BACK:
        click.echo(LOGGED_OUT)
        logger.info(f"{authorized_user} logged out")
        return MenuState.MAIN
    if choice not in USER_MENU:
        click.echo(UNRECOGNIZED)
        return MenuState.AUTHENTICATED
    _, handler = USER_MENU[choice]
    handler(db, console, authorized_user)
    return MenuState.AUTHENTICATED


def run(db: DatabaseManager, console: Console):
    state = MenuState.MAIN
    authorized_user = None
    while state is not MenuState.EXIT:
        if state is MenuState.MAIN:
            state, authorized_user = main_menu(db, console)
        else:
            state = user_menu(db, console, authorized_user)
            if state is MenuState.MAIN:
                authorized_user = None


@click.command()
@click.argument("dbname")
@click.argument("port")
@click.argument("user")
def main(dbname, port, user):
    """Menu-driven console client for the cafe database."""
    greeting()
    db = None
    try:
        db = DatabaseManager.connect(dbname, port, user)
        run(db, Console())
    except Exception as e:
        click.echo(str(e), err=True)
    finally:
        if db is not None:
            click.echo("\nDisconnecting from the database... ", nl=False)
            db.cleanup()
            click.echo("Done!\n\nBye!")


if __name__ == "__main__":
    main()
