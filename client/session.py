import logging

from client.favorites import FAVORITES_KEY

logger = logging.getLogger(__name__)

TOKEN_KEY = 'token'


class ClientSession:
    """Tracks whether a token is stored locally"""

    def __init__(self, storage):
        self.storage = storage
        self.is_authenticated = bool(storage.get_item(TOKEN_KEY))
        self._listeners = []
        self._unsubscribe = storage.subscribe(self._on_storage_change)

    @property
    def token(self):
        return self.storage.get_item(TOKEN_KEY)

    def on_change(self, listener):
        self._listeners.append(listener)

    def _set_authenticated(self, value):
        if value == self.is_authenticated:
            return
        self.is_authenticated = value
        for listener in list(self._listeners):
            listener(value)

    def _on_storage_change(self, event):
        # Another context logged in or out
        if event.key == TOKEN_KEY:
            logger.info(f"Token changed elsewhere, authenticated={bool(event.new_value)}")
            self._set_authenticated(bool(event.new_value))

    def login(self, token):
        self.storage.set_item(TOKEN_KEY, token)
        self._set_authenticated(True)

    def logout(self):
        self.storage.remove_item(TOKEN_KEY)
        self.storage.remove_item(FAVORITES_KEY)
        self._set_authenticated(False)

    def close(self):
        self._unsubscribe()
