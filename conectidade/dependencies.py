from fastapi import Request

from conectidade.config import Settings
from conectidade.storage import Storage


# Dependency to get the storage the app was built with
def get_storage(request: Request) -> Storage:
    return request.app.state.storage


# Dependency to get the settings the app was built with
def get_settings(request: Request) -> Settings:
    return request.app.state.settings
