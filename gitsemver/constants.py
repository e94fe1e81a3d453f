APP_NAME = "git-semver"

# Predefined format specs
FULL_FORMAT = "x.y.z-p+m"
NO_META_FORMAT = "x.y.z-p"
NO_PRE_FORMAT = "x.y.z"
NO_PATCH_FORMAT = "x.y"
NO_MINOR_FORMAT = "x"
DEFAULT_FORMAT = FULL_FORMAT

# Prefix recognized (and kept) by the parser when none is given
DEFAULT_PREFIX = "v"

# Bump targets
TARGET_DEV = "dev"
TARGET_PATCH = "patch"
TARGET_MINOR = "minor"
TARGET_MAJOR = "major"
DEFAULT_TARGET = TARGET_DEV

# Abbreviated commit hash length used as synthesized build metadata
HASH_LENGTH = 8

# Configuration files
CONFIG_SECTION = "version"
LOCAL_CONFIG_FILE = f".{APP_NAME}.cfg"
