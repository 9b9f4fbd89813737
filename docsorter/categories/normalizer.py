"""Maps free-text folder suggestions onto the canonical folder taxonomy."""

FALLBACK_CATEGORY = "Other Documents"
MAX_CUSTOM_FOLDER_LENGTH = 50

CANONICAL_CATEGORIES: tuple[str, ...] = (
    "Bank Statements",
    "Pay Stubs",
    "Financial Documents",
    "Tax Documents",
    "Medical Bills",
    "Medical Records",
    "Legal Documents",
    "Personal Documents",
    "Resumes",
    "Work Documents",
    "School Work",
    "Academic Certificates",
    "Receipts",
    "Bills",
    FALLBACK_CATEGORY,
)

# Checked top to bottom, first substring hit wins. Keep multi-word keys above
# any shorter key they contain.
FOLDER_KEYWORDS: tuple[tuple[str, str], ...] = (
    # Banking & financial
    ("earnings statement", "Pay Stubs"),
    ("earnings statements", "Pay Stubs"),
    ("salary statement", "Pay Stubs"),
    ("salary statements", "Pay Stubs"),
    ("pay stub", "Pay Stubs"),
    ("pay stubs", "Pay Stubs"),
    ("bank statement", "Bank Statements"),
    ("bank statements", "Bank Statements"),
    ("credit card statement", "Bank Statements"),
    ("credit card statements", "Bank Statements"),
    ("financial statement", "Financial Documents"),
    ("financial statements", "Financial Documents"),
    ("investment statement", "Bank Statements"),
    ("investment statements", "Bank Statements"),
    # Tax
    ("tax document", "Tax Documents"),
    ("tax documents", "Tax Documents"),
    ("tax return", "Tax Documents"),
    ("tax returns", "Tax Documents"),
    # Medical
    ("medical record", "Medical Records"),
    ("medical records", "Medical Records"),
    ("medical bill", "Medical Bills"),
    ("medical bills", "Medical Bills"),
    # Legal
    ("legal document", "Legal Documents"),
    ("legal documents", "Legal Documents"),
    ("contract", "Legal Documents"),
    ("contracts", "Legal Documents"),
    # Personal
    ("personal document", "Personal Documents"),
    ("personal documents", "Personal Documents"),
    # Job & career
    ("resume", "Resumes"),
    ("resumes", "Resumes"),
    ("work document", "Work Documents"),
    ("work documents", "Work Documents"),
    # School & academic
    ("essay", "School Work"),
    ("essays", "School Work"),
    ("assignment", "School Work"),
    ("assignments", "School Work"),
    ("school work", "School Work"),
    ("academic certificate", "Academic Certificates"),
    ("academic", "School Work"),
    ("academic document", "School Work"),
    ("academic documents", "School Work"),
    ("class notes", "School Work"),
    ("research paper", "School Work"),
    ("research papers", "School Work"),
    # Receipts & bills
    ("receipt", "Receipts"),
    ("receipts", "Receipts"),
    ("invoice", "Bills"),
    ("invoices", "Bills"),
    ("bill", "Bills"),
    ("bills", "Bills"),
)


def normalize_folder_name(raw_label: str) -> str:
    """Return the canonical folder name for a suggested label.

    Keyword matching is case-insensitive substring containment. Labels that
    match nothing are kept as-is when they are already canonical (exact,
    case-sensitive) or short enough to serve as an ad-hoc folder, e.g.
    "Fahrenheit 451". Everything else, including empty input, falls back to
    "Other Documents".
    """
    label = raw_label.strip()
    lowered = label.lower()

    for keyword, category in FOLDER_KEYWORDS:
        if keyword in lowered:
            return category

    if label in CANONICAL_CATEGORIES:
        return label

    if 0 < len(label) <= MAX_CUSTOM_FOLDER_LENGTH:
        return label

    return FALLBACK_CATEGORY
