"""
FastAPI dependencies exposing the per-process AppState to handlers.
"""

from typing import Annotated

from fastapi import Depends, Request

from config import Config
from core import PluginStore

from .event_bus import BroadcastEventBus
from .state import AppState


def get_app_state(request: Request) -> AppState:
    return request.app.state.plugin_feed


def get_store(state: Annotated[AppState, Depends(get_app_state)]) -> PluginStore:
    return state.store


def get_event_bus(state: Annotated[AppState, Depends(get_app_state)]) -> BroadcastEventBus:
    return state.event_bus


def get_settings(state: Annotated[AppState, Depends(get_app_state)]) -> Config:
    return state.config


State = Annotated[AppState, Depends(get_app_state)]
Store = Annotated[PluginStore, Depends(get_store)]
EventBus = Annotated[BroadcastEventBus, Depends(get_event_bus)]
Settings = Annotated[Config, Depends(get_settings)]
