SHOP_NAME = "FIFI-Bags"

HERO_TITLE = "Handcrafted bags in earthy tones"
HERO_SUB = "Every piece is cut, stitched and finished by hand in Fifi's studio."

ORDER_PLACED = "Order placed successfully! 🤎"
ORDER_WITH_GIFT_PLACED = "Order & Gift Note placed successfully! 🎁"

TRANSFER_INSTRUCTIONS = (
    "To complete your order, please transfer the total amount to the account below. "
    "Your order will be shipped once payment is confirmed."
)

GIFT_NOTE_PROMISE = '"I will personally handwrite this note on a beautiful card for you." - Fifi'

CHAT_GREETING = (
    "Hi there! I'm Fifi's AI assistant. I love chatting about our handmade bags! "
    "Ask me anything or upload a photo for inspiration! 🌸"
)

ABOUT_STORY = """**The Story**

### Meet Fifi

Hi! I'm Fifi. My journey began with a love for the natural world and the rich, comforting textures of the earth.

FIFI-Bags is a celebration of craftsmanship. I wanted to move away from fast fashion and create durable,
beautiful accessories that age gracefully, just like good leather.

Every bag you see here is cut, stitched, and finished by me in my studio. I specialize in earthy
palettes: rich browns, soft beiges, and deep terracottas.

*Warmly, Fifi*
"""

SOCIAL_LINKS = {
    "Instagram": "https://www.instagram.com/_fifibags",
    "TikTok": "https://www.tiktok.com/@fifi_bags",
}

FOOTER_ABOUT = (
    "FIFI-Bags creates handcrafted leather and canvas goods inspired by nature's palette. "
    "Made with love and built to last."
)
