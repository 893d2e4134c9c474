"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    CONNECTION_ERROR = 2
    UNSUPPORTED = 3
    INVALID_INPUT = 4


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    MAVEN_CENTRAL_URL = "https://repo1.maven.org/maven2"
    POM_XML_FILE = "pom.xml"
    TEMP_DIR_PREFIX = "pom-"
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    # None leaves the HTTP client default in place
    REQUEST_TIMEOUT = None

    ENV_LOG_LEVEL = "PURLBOM_LOG_LEVEL"
    ENV_DEBUG = "PURLBOM_DEBUG"
    ENV_TIMEOUT = "PURLBOM_TIMEOUT"
    ENV_CONFIG = "PURLBOM_CONFIG"
