from abc import ABC, abstractmethod
import hashlib
import json
import logging
from pathlib import Path
import time
from typing import Dict, Optional, Tuple

from .model import Response
from .util import clamp, DataclassJSONDecoder, DataclassJSONEncoder


logger = logging.getLogger(__name__)


class CacheGateway(ABC):
    """
    An abstraction of a response cache.

    Keys are resolved request URIs. The cache only remembers responses. Deciding
    what is worth caching is left to the pipeline, which only ever stores
    successful responses.
    """

    @abstractmethod
    def has(self, key: str) -> bool:
        """
        Check whether a response is cached for `key`.
        """

    @abstractmethod
    def get(self, key: str) -> Response:
        """
        Retrieve the response cached for `key`.

        @throws KeyError
          If there is no such response. Check `has()` first.
        """

    @abstractmethod
    def set(self, value: Response, key: str) -> None:
        """
        Cache `value` for `key`, replacing any prior response.
        """

    @abstractmethod
    def delete(self, key: str) -> None:
        """
        Forget the response cached for `key`, if any.
        """

    def close(self):
        """
        Close any resources associated with the cache.
        """


class NoCache(CacheGateway):
    def has(self, key: str) -> bool:
        return False

    def get(self, key: str) -> Response:
        raise KeyError(key)

    def set(self, value: Response, key: str) -> None:
        pass

    def delete(self, key: str) -> None:
        pass


class MemoryCache(CacheGateway):
    def __init__(self, max_age: Optional[float] = None) -> None:
        """
        @param max_age
          Seconds after which an entry is no longer returned. `None` keeps entries forever.
        """
        self.__max_age = max_age
        self.__entries: Dict[str, Tuple[float, Response]] = {}

    def _is_expired(self, stored_at: float) -> bool:
        return self.__max_age is not None and time.monotonic() - stored_at > self.__max_age

    def has(self, key: str) -> bool:
        entry = self.__entries.get(key)
        if entry is None:
            return False
        if self._is_expired(entry[0]):
            logger.info('Cache entry for {} expired'.format(key))
            del self.__entries[key]
            return False
        return True

    def get(self, key: str) -> Response:
        if not self.has(key):
            raise KeyError(key)
        return self.__entries[key][1]

    def set(self, value: Response, key: str) -> None:
        self.__entries[key] = (time.monotonic(), value)

    def delete(self, key: str) -> None:
        self.__entries.pop(key, None)

    def close(self):
        self.__entries.clear()


class CorruptEntry(Exception):
    def __init__(self, entry_path: Path):
        super().__init__()
        self.__entry_path = entry_path

    @property
    def entry_path(self) -> Path:
        return self.__entry_path


class FileCache(CacheGateway):
    """
    Stores each response as a JSON file named after a hash of its key.
    """

    def __init__(self, directory: Path, cache_directory_levels: int) -> None:
        """
        Initialize the file cache.

        @param directory
          The path to the root directory of the cache.
        @param cache_directory_levels
          The number of subdirectory levels to use in the cache directory. This
          will be clamped to be between 0 and 20, respectively.
        """
        self.__entry_directory = Path(directory) / 'entries'
        self.__cache_directory_levels = clamp(cache_directory_levels, 0, 20)

    def _get_path(self, key: str) -> Path:
        hashed = hashlib.sha256(key.encode('utf-8')).hexdigest()
        return self.__entry_directory / self._split_path(hashed)

    def _split_path(self, path: str) -> Path:
        subdirectories = (list(path[:self.__cache_directory_levels])
                          + [path[self.__cache_directory_levels:]])
        return Path(*subdirectories)

    def _load_entry(self, key: str) -> Response:
        """
        Read a cached response from its entry file.

        @throws FileNotFoundError
            If there is no entry file for `key`.
        @throws CorruptEntry
            If the entry file could not be parsed.
        """
        entry_path = self._get_path(key)
        try:
            with open(entry_path, 'r') as f:
                return json.load(f, cls=DataclassJSONDecoder, class_type=Response)
        except (TypeError, json.JSONDecodeError):
            raise CorruptEntry(entry_path)

    def _try_load_entry(self, key: str) -> Optional[Response]:
        try:
            return self._load_entry(key)
        except CorruptEntry as e:
            logger.warning('Found a corrupt cache entry. Deleting {}'.format(e.entry_path))
            e.entry_path.unlink()
            return None
        except FileNotFoundError:
            logger.info('No cache entry found for {}'.format(key))
            return None

    def has(self, key: str) -> bool:
        return self._try_load_entry(key) is not None

    def get(self, key: str) -> Response:
        response = self._try_load_entry(key)
        if response is None:
            raise KeyError(key)
        return response

    def set(self, value: Response, key: str) -> None:
        entry_path = self._get_path(key)
        logger.info('Writing cache entry for {} to {}'.format(key, entry_path))
        entry_path.parent.mkdir(parents=True, exist_ok=True)
        with open(entry_path, 'w') as f:
            json.dump(value, f, cls=DataclassJSONEncoder)

    def delete(self, key: str) -> None:
        entry_path = self._get_path(key)
        try:
            logger.info('Deleting {}'.format(entry_path))
            entry_path.unlink()
        except FileNotFoundError:
            logger.info('No cache entry found for {}. Nothing to delete.'.format(key))
