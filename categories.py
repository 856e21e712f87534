import logging

from storage import PersistedStore, load_json

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = ["Women", "Men", "Unisex"]


class CategoryStore(PersistedStore):
    def __init__(self, labels=None, notifier=None):
        super().__init__(notifier)
        self._labels = list(DEFAULT_CATEGORIES if labels is None else labels)

    @classmethod
    def load(cls, storage, key: str, notifier=None):
        raw = load_json(storage, key, None)
        if isinstance(raw, list) and all(isinstance(c, str) for c in raw):
            return cls(raw, notifier)
        return cls(None, notifier)

    @property
    def labels(self):
        return list(self._labels)

    def snapshot(self):
        return list(self._labels)

    def add(self, label: str) -> bool:
        if label in self._labels:
            return False
        self._labels.append(label)
        self._notify(f'Category "{label}" added', "success")
        self._commit()
        return True

    def delete(self, label: str):
        # Products keep pointing at the removed label; nothing is reassigned
        self._labels = [c for c in self._labels if c != label]
        self._notify(f'Category "{label}" removed', "info")
        self._commit()
