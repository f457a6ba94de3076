import getpass
from typing import Callable, Optional

PROMPT_TEXT = "Enter admin key to save/delete posts: "


class AdminCredentials:
    """Holds the admin key for the lifetime of a client session.

    The key is only kept in memory. It is asked for lazily through ``prompt``
    and forgotten when the server rejects it.
    """

    def __init__(self, prompt: Optional[Callable[[str], str]] = None):
        self.prompt = prompt or getpass.getpass
        self._key: Optional[str] = None

    def get(self) -> Optional[str]:
        return self._key

    def ensure(self) -> Optional[str]:
        if self._key:
            return self._key
        try:
            answer = self.prompt(PROMPT_TEXT)
        except (EOFError, KeyboardInterrupt):
            answer = None
        if answer:
            self._key = answer
        return self._key

    def clear(self) -> None:
        self._key = None
