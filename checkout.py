import logging
from enum import Enum

import streamlit as st

from catalog import display_price, format_money
from models import GiftOptions
from ui_text import GIFT_NOTE_PROMISE, ORDER_PLACED, ORDER_WITH_GIFT_PLACED, TRANSFER_INSTRUCTIONS

logger = logging.getLogger(__name__)


class CheckoutStep(str, Enum):
    CART = "CART"
    GIFT = "GIFT"
    PAYMENT = "PAYMENT"


class CheckoutFlow:
    """Bag -> gift note -> bank transfer details.

    Transitions that aren't allowed return False and leave the state alone.
    Closing keeps the cart; finishing empties it.
    """

    def __init__(self, cart, payment_store, notifier=None):
        self.cart = cart
        self.payment_store = payment_store
        self.notifier = notifier
        self.is_open = False
        self.step = CheckoutStep.CART
        self.gift = GiftOptions()
        # bumped on close so the gift widgets start blank next time
        self.session = 0

    def open(self):
        self.is_open = True
        self.step = CheckoutStep.CART

    @property
    def can_proceed(self) -> bool:
        return self.step == CheckoutStep.CART and not self.cart.is_empty()

    @property
    def can_continue(self) -> bool:
        return self.step == CheckoutStep.GIFT and self.gift.is_complete()

    @property
    def total(self) -> float:
        return self.cart.total()

    @property
    def payment_details(self):
        return self.payment_store.details

    def proceed(self) -> bool:
        if not self.can_proceed:
            return False
        self.step = CheckoutStep.GIFT
        return True

    def back(self) -> bool:
        if self.step == CheckoutStep.GIFT:
            self.step = CheckoutStep.CART
        elif self.step == CheckoutStep.PAYMENT:
            self.step = CheckoutStep.GIFT
        else:
            return False
        return True

    def continue_to_payment(self) -> bool:
        if not self.can_continue:
            return False
        self.step = CheckoutStep.PAYMENT
        return True

    def set_gift(self, is_gift: bool):
        self.gift.is_gift = bool(is_gift)

    def update_gift(self, recipient_name=None, sender_name=None, message=None):
        if recipient_name is not None:
            self.gift.recipient_name = recipient_name
        if sender_name is not None:
            self.gift.sender_name = sender_name
        if message is not None:
            self.gift.message = message

    def finish(self) -> bool:
        if self.step != CheckoutStep.PAYMENT:
            return False
        was_gift = self.gift.is_gift
        logger.info("Checkout finished: %d item(s), total %s, gift=%s", self.cart.count(), self.total, was_gift)
        self.cart.clear()
        if self.notifier is not None:
            self.notifier.notify(ORDER_WITH_GIFT_PLACED if was_gift else ORDER_PLACED, "success")
        self.close()
        return True

    def close(self):
        self.gift = GiftOptions()
        self.step = CheckoutStep.CART
        self.is_open = False
        self.session += 1


def _render_cart_step(flow: CheckoutFlow):
    st.subheader("Your Shopping Bag")
    cart = flow.cart
    if cart.is_empty():
        st.caption("Your bag is empty! 🛍️")
    for line in cart.lines:
        c1, c2 = st.columns([3, 1])
        with c1:
            st.write(f"{line.product.name} — {display_price(line.product)}")
        with c2:
            if st.button("✕", key=f"rm_{line.line_id}"):
                cart.remove(line.line_id)
                st.rerun()
    st.markdown(f"**Total: {format_money(flow.total)}**")
    if st.button("Proceed to Checkout", type="primary", disabled=not flow.can_proceed, use_container_width=True):
        flow.proceed()
        st.rerun()


def _render_gift_step(flow: CheckoutFlow):
    s = flow.session
    st.subheader("Is this a gift? 🎁")
    choice = st.radio(
        "Gift",
        ["No, it's for me", "Yes, add a note!"],
        index=1 if flow.gift.is_gift else 0,
        label_visibility="collapsed",
        key=f"gift_choice_{s}",
    )
    flow.set_gift(choice.startswith("Yes"))

    if flow.gift.is_gift:
        st.caption(GIFT_NOTE_PROMISE)
        sender = st.text_input("From", value=flow.gift.sender_name, placeholder="Your Name", key=f"gift_from_{s}")
        recipient = st.text_input("To", value=flow.gift.recipient_name, placeholder="Recipient", key=f"gift_to_{s}")
        message = st.text_area("Message", value=flow.gift.message, placeholder="Write your heartfelt message here...", height=100, key=f"gift_msg_{s}")
        flow.update_gift(recipient_name=recipient.strip(), sender_name=sender.strip(), message=message.strip())
        if not flow.gift.is_complete():
            st.warning("Add a recipient and a message to continue.")

    c1, c2 = st.columns(2)
    with c1:
        if st.button("Back to Cart", use_container_width=True):
            flow.back()
            st.rerun()
    with c2:
        if st.button("Continue to Payment", type="primary", disabled=not flow.can_continue, use_container_width=True):
            flow.continue_to_payment()
            st.rerun()


def _render_payment_step(flow: CheckoutFlow):
    st.subheader("Payment Details")
    st.info(TRANSFER_INSTRUCTIONS)
    if flow.gift.is_gift:
        st.caption("GIFT NOTE ADDED 🎁")
    pd = flow.payment_details
    st.write(f"Bank: **{pd.bank_name}**")
    st.write(f"Account Name: **{pd.account_name}**")
    st.write(f"Account No: `{pd.account_number}`")
    if pd.instructions:
        st.caption(pd.instructions)
    st.markdown(f"**Total Amount: {format_money(flow.total)}**")

    c1, c2 = st.columns(2)
    with c1:
        if st.button("Back", use_container_width=True):
            flow.back()
            st.rerun()
    with c2:
        if st.button("I Have Paid", type="primary", use_container_width=True):
            flow.finish()
            st.rerun()


def render_checkout(flow: CheckoutFlow):
    with st.sidebar:
        st.markdown("## 👜 Bag")
        if not flow.is_open:
            if st.button(f"Open bag ({flow.cart.count()})", use_container_width=True):
                flow.open()
                st.rerun()
            return

        if flow.step == CheckoutStep.CART:
            _render_cart_step(flow)
        elif flow.step == CheckoutStep.GIFT:
            _render_gift_step(flow)
        else:
            _render_payment_step(flow)

        if st.button("Close", key="checkout_close", use_container_width=True):
            flow.close()
            st.rerun()
