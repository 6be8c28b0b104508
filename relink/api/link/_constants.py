"""Constants for link extraction and classification (private)."""

# Link kinds (how the reference is written)
LINK_KIND_INLINE = "inline"
LINK_KIND_REFERENCE = "reference"
LINK_KIND_FILE_URL = "file_url"

# Target kinds (what the reference points at)
TARGET_FILE = "file"
TARGET_EXTERNAL = "external"
TARGET_ANCHOR = "anchor"
TARGET_MALFORMED = "malformed"

# How a file target was expressed; rewrites keep the same form
FORM_RELATIVE = "relative"
FORM_ROOT = "root"
FORM_FILE_URL = "file_url"

# Integrity statuses
STATUS_OK = "ok"
STATUS_BROKEN = "broken"
STATUS_EXTERNAL = "external"
STATUS_MALFORMED = "malformed"

EXTERNAL_SCHEMES = frozenset({"http", "https", "mailto", "tel", "ftp", "ftps", "data", "irc", "ssh", "git"})

# Schemes that must be followed by "//"
HIERARCHICAL_SCHEMES = frozenset({"http", "https", "ftp", "ftps"})
