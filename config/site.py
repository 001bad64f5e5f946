"""
config/site.py
──────────────
Fixed facts about the static site: languages, pages, namespaces and the
marker attributes the translation engine reads.

Fallback order (first loaded namespace with a value wins):
  no explicit namespace : current page → PAGE_NAMESPACES → header → footer
  explicit namespace    : namespace → current page
                          → EXPLICIT_FALLBACK_NAMESPACES → header → footer
"""

# ── Languages ─────────────────────────────────────────────────────────────────
PRIMARY_LANG = "zh"
SECONDARY_LANG = "en"
LANGUAGES: tuple[str, str] = (PRIMARY_LANG, SECONDARY_LANG)

# Value written to <html lang="…"> for each language code
HTML_LANG: dict[str, str] = {
    PRIMARY_LANG: "zh-CN",
    SECONDARY_LANG: "en",
}

# Key under which the active language is persisted
LANG_STORAGE_KEY = "lang"

# ── Pages & namespaces ────────────────────────────────────────────────────────
PAGE_SUFFIX = ".html"
DEFAULT_PAGE = "index"
KNOWN_PAGES: frozenset[str] = frozenset(
    {"index", "services", "solutions", "introduction", "contact"}
)

HEADER_NS = "header"
FOOTER_NS = "footer"

PAGE_NAMESPACES: tuple[str, ...] = (
    "services",
    "solutions",
    "index",
    "introduction",
    "contact",
)
EXPLICIT_FALLBACK_NAMESPACES: tuple[str, ...] = (
    "solutions",
    "services",
    "index",
    "introduction",
    "contact",
)

# Reserved top-level payload entry carrying <title> / <meta description>
META_KEY = "meta"

# ── Marker attributes ─────────────────────────────────────────────────────────
TEXT_MARKER = "data-i18n"
HTML_MARKER = "data-i18n-html"
NAMESPACE_MARKER = "data-i18n-ns"
GENERIC_ATTR_MARKER = "data-i18n-attr"

# marker attribute → attribute written on the element
ATTRIBUTE_MARKERS: dict[str, str] = {
    GENERIC_ATTR_MARKER: "attr",
    "data-i18n-placeholder": "placeholder",
    "data-i18n-title": "title",
    "data-i18n-alt": "alt",
}

LANG_SWITCHER_SELECTOR = ".lang-switcher [data-lang]"
ACTIVE_CLASS = "active"

# ── Page regions filled by the fragment includer ──────────────────────────────
HEADER_SELECTOR = "#site-header"
FOOTER_SELECTOR = "#site-footer"
STICKY_HEADER_SELECTOR = ".sticky-header__content"

HEADER_FRAGMENT = "header.html"
FOOTER_FRAGMENT = "footer.html"
