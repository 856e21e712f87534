import logging

import requests

from catalog import format_money
from settings import gemini_api_key, gemini_model
from utils import split_data_url

logger = logging.getLogger(__name__)

API_BASE = "https://generativelanguage.googleapis.com/v1beta"

NAP_REPLY = "Oh no! My creative brain is taking a quick nap. Please try again in a moment! 💤"
EMPTY_REPLY = "I'm so sorry, I got a little tangled in some thread! Could you say that again? 🍂"

SYSTEM_INSTRUCTION = """
You are Fifi, the passionate owner and creator of FIFI-Bags.
Your personality is warm, grounded, and rustic. You absolutely LOVE earth tones, especially rich browns, beiges, and terracottas.
You sell handmade bags.
You are chatting with a customer on your website.

Here is your current product inventory:
{product_list}

Key behaviors:
1. Always be polite and welcoming. Use emojis like 🍂, 👜, 🤎, ✨ occasionally.
2. If a customer asks about a specific bag, give them details. If it is marked [SOLD OUT], apologize and suggest a similar item or a custom order.
3. If they ask for a custom order, tell them you accept custom leather/fabric requests (especially in earth tones!) and the lead time is usually 2 weeks.
4. If the user uploads an image, analyze it for style or color inspiration and suggest one of your bags that matches the vibe.
5. Keep responses concise (under 3 sentences usually) unless explaining a detailed process.
6. Do not make up products that are not in the inventory list provided above.
"""


def product_lines(products) -> str:
    return "\n".join(
        f"- {p.name} ({format_money(p.price)}) [{'SOLD OUT' if p.sold_out else 'In Stock'}]: {p.description}"
        for p in products
    )


class GeminiClient:
    def __init__(self, api_key: str, model: str = "gemini-2.5-flash", temperature: float = 0.7):
        self.api_key = api_key
        self.model = model
        self.temperature = temperature

    def _headers(self):
        return {
            "x-goog-api-key": self.api_key,
            "Content-Type": "application/json",
        }

    def build_payload(self, message: str, products, image: str | None = None):
        parts = []
        if image:
            mime, data = split_data_url(image)
            parts.append({"inline_data": {"mime_type": mime, "data": data}})
        parts.append({"text": message})
        return {
            "systemInstruction": {"parts": [{"text": SYSTEM_INSTRUCTION.format(product_list=product_lines(products))}]},
            "contents": [{"role": "user", "parts": parts}],
            "generationConfig": {"temperature": self.temperature},
        }

    def generate(self, message: str, products, image: str | None = None) -> str:
        r = requests.post(
            f"{API_BASE}/models/{self.model}:generateContent",
            headers=self._headers(),
            json=self.build_payload(message, products, image),
            timeout=30,
        )
        r.raise_for_status()
        data = r.json()
        candidates = data.get("candidates") or []
        if not candidates:
            return ""
        parts = (candidates[0].get("content") or {}).get("parts") or []
        return "".join(p.get("text", "") for p in parts)

    def send_message(self, message: str, products, image: str | None = None) -> str:
        """Never raises: any failure turns into the fixed apology reply."""
        try:
            text = self.generate(message, products, image)
        except Exception:
            logger.exception("Gemini API error")
            return NAP_REPLY
        return text or EMPTY_REPLY


def chat_service(message: str, products, image: str | None = None) -> str:
    """Builds a client from config per call; a missing key counts as a failed call."""
    try:
        client = GeminiClient(gemini_api_key(), gemini_model())
    except RuntimeError:
        logger.exception("Gemini API error")
        return NAP_REPLY
    return client.send_message(message, products, image)
