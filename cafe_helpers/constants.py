import os

from dotenv import load_dotenv

load_dotenv()


# Database Constants
DB_HOST = os.getenv("CAFE_DB_HOST", "localhost")
DB_PASSWORD = os.getenv("CAFE_DB_PASSWORD", "")
USER_TABLE = "Users"
MENU_TABLE = "Menu"
ORDER_ID_SEQUENCE = "orders_orderid_seq"


# Account Constants
DEFAULT_USER_TYPE = "Customer"
# Never equals a stored user type unless overridden, so the manager options stay hidden.
MANAGER_TYPE = os.getenv("CAFE_MANAGER_TYPE", "Manager,,,")


# Catalog Constants
MENU_CATEGORIES = ("Drinks", "Sweets", "Soup")


# Menu Choices
CHOICE_CREATE_USER = 1
CHOICE_LOG_IN = 2
CHOICE_GO_TO_MENU = 1
CHOICE_UPDATE_PROFILE = 2
CHOICE_PLACE_ORDER = 3
CHOICE_UPDATE_ORDER = 4
CHOICE_BROWSE_MENU = 1
CHOICE_SEARCH_NAME = 2
CHOICE_SEARCH_CATEGORY = 3
CHOICE_UPDATE_MENU = 4
CHOICE_BACK = 9


# Console Messages
CHOICE_PROMPT = "\nPlease make your choice: "
INVALID_INPUT = "Your input is invalid!"
UNRECOGNIZED_MAIN = "Unrecognized choice, try again."
UNRECOGNIZED = "Unrecognized choice!"
USER_CREATED = "User successfully created!"
LOGIN_SUCCESS = "\nLogin successful. Welcome, {}!"
LOGIN_FAILED = "\nLogin not found! Please try again."
LOGGED_OUT = "\nSuccessfully logged out."
ITEM_NOT_FOUND = "Item not found, please try again."
CATEGORY_PROMPT = "\nEnter 'Drinks', 'Sweets', or 'Soup': "
INVALID_CATEGORY ="Invalid input, please try again."
ITEM_COUNT = "({} items)"


# Logging
LOG_LEVEL = os.getenv("CAFE_LOG_LEVEL", "WARNING").upper()
