import json
import logging

logger = logging.getLogger(__name__)

PRODUCTS_KEY = "fifi_products"
CATEGORIES_KEY = "fifi_categories_v2"
PAYMENT_KEY = "fifi_payment"


class SessionStorage:
    """Key-value store kept in a plain dict.

    Used when Supabase isn't configured. Pass ``st.session_state`` (or any
    mapping) as ``backing`` to keep values for the browser session.
    """

    def __init__(self, backing=None, namespace: str = "_kv"):
        if backing is None:
            backing = {}
        if namespace not in backing:
            backing[namespace] = {}
        self._data = backing[namespace]

    def get_item(self, key: str):
        return self._data.get(key)

    def set_item(self, key: str, value: str):
        self._data[key] = value


class SupabaseStorage:
    """Key-value store on a Supabase table with ``key`` and ``value`` text columns."""

    def __init__(self, sb, table: str = "storefront_state"):
        self.sb = sb
        self.table = table

    def get_item(self, key: str):
        rows = self.sb.table(self.table).select("value").eq("key", key).limit(1).execute().data
        return rows[0]["value"] if rows else None

    def set_item(self, key: str, value: str):
        self.sb.table(self.table).upsert({"key": key, "value": value}).execute()


def load_json(storage, key: str, default):
    """Reads a JSON snapshot; anything missing or unreadable counts as absent."""
    try:
        raw = storage.get_item(key)
    except Exception as e:
        logger.warning("Could not read %s from storage: %s", key, e)
        return default
    if raw is None:
        return default
    try:
        return json.loads(raw)
    except (TypeError, ValueError):
        logger.warning("Ignoring unparseable snapshot for %s", key)
        return default


def persist_hook(storage, key: str, on_error=None):
    """Returns an on-commit hook that writes the store's snapshot under ``key``."""

    def _write(snapshot):
        try:
            storage.set_item(key, json.dumps(snapshot))
            logger.debug("Saved %s", key)
        except Exception:
            logger.exception("Failed to save %s", key)
            if on_error:
                on_error(key)

    return _write


class PersistedStore:
    """Base for the catalog, category and payment stores.

    Subclasses mutate their state, then call ``_commit()``, which hands the
    JSON-ready ``snapshot()`` to every registered hook.
    """

    def __init__(self, notifier=None):
        self.notifier = notifier
        self._hooks = []

    def on_commit(self, hook):
        self._hooks.append(hook)
        return hook

    def snapshot(self):
        raise NotImplementedError

    def _notify(self, text: str, severity: str = "success"):
        if self.notifier is not None:
            self.notifier.notify(text, severity)

    def _commit(self):
        snap = self.snapshot()
        for hook in self._hooks:
            hook(snap)
