# api/base/dependencies.py
from flask import current_app

from config.settings import Settings
from services import ListService, TokenService

EXTENSION_KEY = "relay"


def get_settings() -> Settings:
    return current_app.extensions[EXTENSION_KEY]["settings"]


def get_token_service() -> TokenService:
    return current_app.extensions[EXTENSION_KEY]["token_service"]


def get_list_service() -> ListService:
    return current_app.extensions[EXTENSION_KEY]["list_service"]
