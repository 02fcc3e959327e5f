"""English to Urdu phrase tables used by the dictionary translator."""

# Phrases produced by the simulated content and summaries
URDU_PHRASES: dict[str, str] = {
    "This is a simulated blog content.": "یہ ایک فرضی بلاگ کا مواد ہے۔",
    "It covers various topics including technology, science, and daily life.": (
        "اس میں ٹیکنالوجی، سائنس، اور روزمرہ کی زندگی سمیت مختلف موضوعات شامل ہیں۔"
    ),
    "This content is designed to be long enough for a summary.": "یہ مواد خلاصہ کے لیے کافی لمبا ہے۔",
    "It might discuss the latest advancements in AI, the impact of climate change, "
    "or perhaps a personal reflection on productivity tips.": (
        "اس میں AI میں تازہ ترین پیشرفت، موسمیاتی تبدیلی کے اثرات، "
        "یا پیداواری تجاویز پر ذاتی عکاسی شامل ہو سکتی ہے۔"
    ),
    "The goal is to provide a comprehensive overview without being too verbose.": (
        "مقصد بہت زیادہ الفاظ استعمال کیے بغیر ایک جامع جائزہ فراہم کرنا ہے۔"
    ),
    "This is a simulated summary of the blog content.": "یہ بلاگ کے مواد کا ایک فرضی خلاصہ ہے۔",
    "It highlights the main points and gives a brief overview.": (
        "یہ اہم نکات کو اجاگر کرتا ہے اور ایک مختصر جائزہ پیش کرتا ہے۔"
    ),
    "This is a simulated AI summary of the provided blog content. It highlights the main "
    "points and gives a brief overview. For a real summary, integrate with a powerful LLM "
    "like Gemini.": (
        "یہ فراہم کردہ بلاگ مواد کا ایک فرضی AI خلاصہ ہے۔ یہ اہم نکات کو اجاگر کرتا ہے "
        "اور ایک مختصر جائزہ پیش کرتا ہے۔ حقیقی خلاصے کے لیے، جیمنی جیسے طاقتور LLM کے "
        "ساتھ مربوط کریں۔"
    ),
    "Thank you for using the Blog Summarizer!": "بلاگ سمرائزر استعمال کرنے کا شکریہ!",
}

# User-facing API messages, used when a client asks for Urdu
URDU_UI_MESSAGES: dict[str, str] = {
    "Please enter a valid URL.": "براہ کرم ایک درست URL درج کریں۔",
    "URL is required": "URL درکار ہے",
    "Text to summarize is required": "خلاصہ کے لیے متن درکار ہے",
    "Text to translate is required": "ترجمہ کے لیے متن درکار ہے",
    "URL and content are required": "URL اور مواد درکار ہیں",
    "URL, summary, and Urdu summary are required": "URL، خلاصہ اور اردو خلاصہ درکار ہیں",
    "Invalid request.": "درخواست درست نہیں ہے۔",
    "Failed to summarize the blog.": "بلاگ کا خلاصہ کرنے میں ناکامی۔",
    "Failed to scrape blog content.": "بلاگ کا مواد سکریپ کرنے میں ناکامی۔",
    "Failed to generate AI summary.": "AI خلاصہ بنانے میں ناکامی۔",
    "Failed to translate text.": "متن کا ترجمہ کرنے میں ناکامی۔",
    "Failed to save full text.": "مکمل متن محفوظ کرنے میں ناکامی۔",
    "Failed to save summary.": "خلاصہ محفوظ کرنے میں ناکامی۔",
    "Request failed.": "درخواست ناکام ہو گئی۔",
}
