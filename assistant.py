import logging
from dataclasses import dataclass

import streamlit as st

from models import ChatMessage
from ui_text import CHAT_GREETING
from utils import image_source, new_id, to_data_url

logger = logging.getLogger(__name__)


@dataclass
class PendingReply:
    text: str
    image: str | None


class AssistantWidget:
    """Chat transcript with at most one request in flight.

    ``chat_service(text, products, image)`` must return a reply string and
    never raise.
    """

    def __init__(self, chat_service, catalog):
        self.chat_service = chat_service
        self.catalog = catalog
        self.messages = [ChatMessage(id=new_id(), role="assistant", text=CHAT_GREETING)]
        self.draft = ""
        self.pending_image = None
        self.in_flight = False
        self.is_open = False
        # bumped whenever the pending image is dropped so the uploader resets
        self.image_round = 0

    def begin_send(self, text: str, image: str | None = None):
        if (not (text or "").strip() and not image) or self.in_flight:
            return None
        self.messages.append(ChatMessage(id=new_id(), role="user", text=text, image=image))
        self.draft = ""
        self.pending_image = None
        self.image_round += 1
        self.in_flight = True
        return PendingReply(text=text, image=image)

    def complete(self, pending: PendingReply, reply: str):
        # applied even if the widget was closed meanwhile
        self.messages.append(ChatMessage(id=new_id(), role="assistant", text=reply))
        self.in_flight = False

    def send(self, text: str, image: str | None = None) -> bool:
        pending = self.begin_send(text, image)
        if pending is None:
            return False
        reply = self.chat_service(pending.text, self.catalog.products, pending.image)
        self.complete(pending, reply)
        return True

    def attach_image(self, data: bytes, mime: str | None = None):
        self.pending_image = to_data_url(data, mime)

    def clear_image(self):
        self.pending_image = None
        self.image_round += 1


def render_assistant(widget: AssistantWidget):
    with st.sidebar:
        widget.is_open = st.toggle("💬 Chat with Fifi", value=widget.is_open)
        if not widget.is_open:
            return

        for m in widget.messages:
            avatar = "👩‍🎨" if m.role == "assistant" else None
            with st.chat_message(m.role, avatar=avatar):
                if m.image:
                    st.image(image_source(m.image), width=160)
                st.write(m.text)

        upload = st.file_uploader("Upload image", type=["png", "jpg", "jpeg", "webp"], key=f"chat_img_{widget.image_round}")
        if upload is not None:
            widget.attach_image(upload.getvalue(), upload.type)
        if widget.pending_image:
            c1, c2 = st.columns([3, 1])
            c1.caption("Image selected")
            if c2.button("✕", key="chat_img_clear"):
                widget.clear_image()
                st.rerun()

        with st.form("chat_form", clear_on_submit=True):
            text = st.text_input("Message", value=widget.draft, placeholder="Ask about a bag...")
            sent = st.form_submit_button("Send", disabled=widget.in_flight)
        if sent:
            with st.spinner("Fifi is typing…"):
                widget.send(text, widget.pending_image)
            st.rerun()
