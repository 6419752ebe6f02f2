from fastapi import Request

from scratchpad_api.config import Settings
from scratchpad_api.session import NotepadSession


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_session(request: Request) -> NotepadSession:
    return request.app.state.session
