# cafenet/services/session_store.py
import json
import os
import tempfile

import redis
from pydantic import ValidationError as SchemaError

from cafenet.domain.errors import StorageError
from cafenet.domain.schemas import Session
from cafenet.utils.retry import redis_retry
from cafenet.utils.settings import REDIS_URL, SESSION_BACKEND, SESSION_DIR, SESSION_KEY
from cafenet.utils.logging import get_logger

logger = get_logger(__name__)


class FileStorage:
    """
    Odpowiednik localStorage w przegladarce:
    jeden plik JSON na klucz, zapis atomowy (tmp + replace)
    """

    def __init__(self, directory: str | None = None):
        self.directory = directory or SESSION_DIR

    def _path(self, key: str) -> str:
        return os.path.join(self.directory, f"{key}.json")

    def get_item(self, key: str) -> str | None:
        try:
            with open(self._path(key), "r", encoding="utf-8") as fh:
                return fh.read()
        except FileNotFoundError:
            return None

    def set_item(self, key: str, value: str) -> None:
        os.makedirs(self.directory, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(value)
            os.replace(tmp, self._path(key))
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise

    def remove_item(self, key: str) -> None:
        try:
            os.unlink(self._path(key))
        except FileNotFoundError:
            pass


class RedisStorage:
    def __init__(self, url: str | None = None, client: redis.Redis | None = None):
        self.redis = client or redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )

    @redis_retry()
    def get_item(self, key: str) -> str | None:
        return self.redis.get(key)

    @redis_retry()
    def set_item(self, key: str, value: str) -> None:
        self.redis.set(name=key, value=value)

    @redis_retry()
    def remove_item(self, key: str) -> None:
        # DEL na nieistniejacym kluczu zwraca 0, bez bledu
        self.redis.delete(key)


class SessionStore:
    """
    -save: nadpisuje zapisana sesje (StorageError gdy storage padl)
    -load: sesja albo None (brak, uszkodzony JSON, brak pol, blad storage)
    -clear: idempotentne usuniecie
    """

    def __init__(self, storage, key: str | None = None):
        self.storage = storage
        self.key = key or SESSION_KEY

    def save(self, session: Session) -> None:
        try:
            self.storage.set_item(self.key, session.model_dump_json())
        except (OSError, redis.RedisError) as e:
            raise StorageError(f"Cannot save session: {e}") from e
        logger.info(f"Session saved for user {session.id} ({session.role.value})")

    def load(self) -> Session | None:
        try:
            raw = self.storage.get_item(self.key)
        except (OSError, ValueError, redis.RedisError) as e:
            # ValueError: UnicodeDecodeError z pliku albo z redisa (decode_responses)
            logger.warning(f"Session storage unreadable: {e}")
            return None

        if raw is None:
            return None

        try:
            return Session.model_validate(json.loads(raw))
        except (ValueError, TypeError, RecursionError, SchemaError) as e:
            logger.warning(f"Ignoring malformed session record under {self.key!r}: {e}")
            return None

    def clear(self) -> None:
        try:
            self.storage.remove_item(self.key)
        except (OSError, redis.RedisError) as e:
            raise StorageError(f"Cannot clear session: {e}") from e
        logger.info("Session cleared")


def build_session_store(backend: str | None = None) -> SessionStore:
    backend = (backend or SESSION_BACKEND).lower()
    if backend == "redis":
        return SessionStore(RedisStorage())
    if backend == "file":
        return SessionStore(FileStorage())
    raise ValueError(f"Unknown session backend: {backend}")
