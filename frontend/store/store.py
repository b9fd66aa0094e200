# store/store.py
from typing import Callable, List, Optional
from store.reducers import root_reducer
from store.state import AppState
from store.types import Action

Listener = Callable[[AppState], None]


class Store:
    """Holds the current AppState; the only way to change it is dispatch()."""

    def __init__(self, reducer=root_reducer, initial: Optional[AppState] = None):
        self._reducer = reducer
        self._state = initial or AppState()
        self._listeners: List[Listener] = []

    def get_state(self) -> AppState:
        return self._state

    def dispatch(self, action: Action) -> Action:
        self._state = self._reducer(self._state, action)
        for listener in list(self._listeners):
            listener(self._state)
        return action

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
