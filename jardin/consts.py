"""Application-wide constants."""

APP_NAME = "LibreJardin"
SPACE_CASE = 14
SPACE_SNAP = 14
APP_DIR = "libreJardin/"
SHARE_DIR = "/usr/share/" + APP_DIR
FILE_NAME_XML = "jardin.xml"
FILE_NAME_SQL = "jardin.sqli"
DEFAULT_PLAN_IMAGE_FILE = "jardin_type.png"