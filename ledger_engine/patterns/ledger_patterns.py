"""
Ledger keyword patterns.
Column aliases, category keywords and name-cleaning words for ledger sheets
exported with Arabic or English headers.
"""

# Column aliases, tried in order; the first header containing an alias wins
COLUMN_PATTERNS = {
    "debit": {
        "aliases": ["المدين", "مدين", "debit"],
        "description": "Debit",
    },
    "credit": {
        "aliases": ["الدائن", "دائن", "credit"],
        "description": "Credit",
    },
    "notes": {
        "aliases": ["الملاحظات", "ملاحظات", "notes", "description"],
        "description": "Notes",
    },
}

# Required columns in resolution order
REQUIRED_COLUMNS = ["debit", "credit", "notes"]

# Category keywords (lowercase, matched as substrings of the lowercased notes).
# "advances" has no keywords: it collects every note matching none of the others.
CATEGORY_PATTERNS = {
    "deficit": {
        "keywords": ["عجز", "deficit"],
        "description": "Deficit",
    },
    "service": {
        "keywords": ["خدمة", "خدمات", "service", "services"],
        "description": "Services",
    },
    "advances": {
        "keywords": [],
        "description": "Advances & Purchases",
    },
}

# Words stripped from a note before a name is read out of it.
# Plurals come before their singular so nothing is left dangling.
NAME_REMOVAL_WORDS = [
    # Arabic
    "عجز", "خدمة", "خدمات", "مدين", "دائن", "سلف", "مشتريات",
    # English
    "deficit", "services", "service", "debit", "credit",
    "advances", "advance", "purchases",
]

# Digits and punctuation replaced by a space during name extraction
NAME_NOISE_PATTERN = r"[0-9.,\-/\\:;(){}\[\]]"
