import os
from pathlib import Path

# Built-in validation messages shipped with the package
PACKAGE_LANG_PATH = str(Path(__file__).parent / "lang")

# Locale used when none is set for the current context
LOCALE_DEFAULT = os.getenv("LOCALE_DEFAULT", "en")

# Locale consulted when a key is missing in the current locale
LOCALE_FALLBACK = os.getenv("LOCALE_FALLBACK", "en")

# Optional application directory with <locale>.json files overriding built-in messages
LOCALE_PATH = os.getenv("LOCALE_PATH", os.path.join(os.getcwd(), "lang"))

# Instantiate every built-in rule at boot instead of on first use
VALIDATION_WARM_UP = os.getenv("VALIDATION_WARM_UP", "false")
