import logging
from datetime import timedelta

import streamlit as st

from models import SEVERITIES, ToastMessage
from utils import get_local_now, new_id

logger = logging.getLogger(__name__)

TOAST_SECONDS = 3
TOAST_ICONS = {"success": "✨", "error": "🥀", "info": "🍂"}


class Notifier:
    """Single-slot toast channel. A new toast replaces the current one."""

    def __init__(self, zone: str = "Europe/London", duration: int = TOAST_SECONDS, clock=None):
        self.zone = zone
        self.duration = timedelta(seconds=duration)
        self._clock = clock or (lambda: get_local_now(self.zone))
        self._toast = None

    def notify(self, text: str, severity: str = "success") -> ToastMessage:
        if severity not in SEVERITIES:
            raise ValueError(f"Unknown severity: {severity}")
        self._toast = ToastMessage(id=new_id(), text=text, severity=severity, created_at=self._clock())
        logger.debug("toast %s: %s", severity, text)
        return self._toast

    def current(self):
        t = self._toast
        if t is None:
            return None
        if self._clock() - t.created_at >= self.duration:
            self._toast = None
            return None
        return t

    def dismiss(self):
        self._toast = None


def render_toast(notifier: Notifier):
    t = notifier.current()
    if t is None:
        return
    # st.toast fades on its own; only fire it once per message across reruns
    if st.session_state.get("_toast_shown") == t.id:
        return
    st.session_state._toast_shown = t.id
    st.toast(t.text, icon=TOAST_ICONS[t.severity])
