"""UI string tables."""

from rescort.domain.models import Language


STRINGS: dict[Language, dict[str, str]] = {
    Language.en: {
        "title": "Rescort",
        "tagline": "Your AI Culinary Companion",
        "placeholder": "e.g., Spaghetti Carbonara",
        "search": "Search",
        "searching": "Searching...",
        "welcome_title": "Welcome to Rescort!",
        "welcome_body": "Discover delicious recipes from around the world.",
        "welcome_hint": "Enter a dish name above to get started.",
        "ingredients": "Ingredients",
        "recipe": "Recipe",
        "copy": "Copy",
        "copied": "Copied!",
        "error_title": "Something went wrong",
        "images_loading": "Plating up a photo...",
        "no_images": "No images available for this dish.",
        "image_alt": "{name} - Image {n}",
        "footer": "Powered by generative AI. Created for you.",
        "theme_light": "Light mode",
        "theme_dark": "Dark mode",
        "language": "Language",
    },
    Language.hi: {
        "title": "रेस्कॉर्ट",
        "tagline": "आपका एआई पाक साथी",
        "placeholder": "जैसे, पनीर बटर मसाला",
        "search": "खोजें",
        "searching": "खोज रहे हैं...",
        "welcome_title": "रेस्कॉर्ट में आपका स्वागत है!",
        "welcome_body": "दुनिया भर के स्वादिष्ट व्यंजन खोजें।",
        "welcome_hint": "शुरू करने के लिए ऊपर किसी व्यंजन का नाम लिखें।",
        "ingredients": "सामग्री",
        "recipe": "विधि",
        "copy": "कॉपी करें",
        "copied": "कॉपी हो गया!",
        "error_title": "कुछ गलत हो गया",
        "images_loading": "तस्वीर तैयार हो रही है...",
        "no_images": "इस व्यंजन के लिए कोई तस्वीर उपलब्ध नहीं है।",
        "image_alt": "{name} - तस्वीर {n}",
        "footer": "जनरेटिव एआई द्वारा संचालित। आपके लिए बनाया गया।",
        "theme_light": "लाइट मोड",
        "theme_dark": "डार्क मोड",
        "language": "भाषा",
    },
    Language.ur: {
        "title": "ریسکورٹ",
        "tagline": "آپ کا اے آئی کھانا پکانے کا ساتھی",
        "placeholder": "مثلاً، چکن بریانی",
        "search": "تلاش کریں",
        "searching": "تلاش جاری ہے...",
        "welcome_title": "ریسکورٹ میں خوش آمدید!",
        "welcome_body": "دنیا بھر کے مزیدار پکوان دریافت کریں۔",
        "welcome_hint": "شروع کرنے کے لیے اوپر کسی پکوان کا نام لکھیں۔",
        "ingredients": "اجزاء",
        "recipe": "ترکیب",
        "copy": "کاپی کریں",
        "copied": "کاپی ہو گیا!",
        "error_title": "کچھ غلط ہو گیا",
        "images_loading": "تصویر تیار ہو رہی ہے...",
        "no_images": "اس پکوان کے لیے کوئی تصویر دستیاب نہیں۔",
        "image_alt": "{name} - تصویر {n}",
        "footer": "جنریٹو اے آئی کی مدد سے۔ آپ کے لیے بنایا گیا۔",
        "theme_light": "لائٹ موڈ",
        "theme_dark": "ڈارک موڈ",
        "language": "زبان",
    },
}


def t(language: Language, key: str, **kwargs: object) -> str:
    text = STRINGS[language].get(key, STRINGS[Language.en][key])
    return text.format(**kwargs) if kwargs else text
