# --- Version ---
# Fallback used whenever the VERSION file cannot be read
VERSION = "1.x-dev"
VERSION_FILENAME = "VERSION"

# --- Environment ---
DEBUG_ENV = "SITESMITH_DEBUG"
LOG_LEVELS_ENV = "SITESMITH_LOG_LEVELS"

# --- Log and Debug ---
# Custom level between INFO and WARNING for progress reporting
NOTICE = 25

# Short aliases for module names to keep CLI/env concise
LOG_ALIAS_MAP = {
    "build": "sitesmith.builder.build",
    "bld": "sitesmith.builder.build",
    "steps": "sitesmith.steps",
    "pages": "sitesmith.steps.pages",
    "gen": "sitesmith.generators",
    "render": "sitesmith.renderer",
    "opt": "sitesmith.steps.optimize",
    "io": "sitesmith.io",
    "fs": "sitesmith.io.fs",
    "conf": "sitesmith.config",
}

# Top-level modules within sitesmith for auto-prefixing
KNOWN_TOP_MODULES = {
    "builder",
    "steps",
    "generators",
    "renderer",
    "collection",
    "datacls",
    "io",
    "utils",
    "config",
    "version",
}

# --- Build options ---
DEFAULT_BUILD_OPTIONS = {
    "drafts": False,   # build drafts or not
    "dry-run": False,  # if dry-run is true, generated files are not saved
    "page": "",        # specific page to build
}

# --- Filenames and Paths ---
CONFIG_FILENAME = "sitesmith.yml"
THEME_CONFIG_FILENAME = "config.yml"
INDEX_BASENAME = "index"

# --- Page types ---
PAGE_TYPE_PAGE = "page"
PAGE_TYPE_HOMEPAGE = "homepage"
PAGE_TYPE_VOCABULARY = "vocabulary"
PAGE_TYPE_TERM = "term"

# Default layout per page type, relative to a layouts directory
DEFAULT_LAYOUTS = {
    PAGE_TYPE_PAGE: "_default/page.html",
    PAGE_TYPE_HOMEPAGE: "_default/list.html",
    PAGE_TYPE_VOCABULARY: "_default/vocabulary.html",
    PAGE_TYPE_TERM: "_default/list.html",
}
REDIRECT_LAYOUT = "_default/redirect.html"
SITEMAP_LAYOUT = "sitemap.xml"

# --- Optimization ---
GZIP_MIN_BYTES = 1024
