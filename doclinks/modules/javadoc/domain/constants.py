"""Constants shared across the javadoc domain models."""

import re

JAR_TYPE = "jar"
JAVADOC_CLASSIFIER = "javadoc"

ELEMENT_LIST = "element-list"
PACKAGE_LIST = "package-list"
INDEX_LIST_NAMES = (ELEMENT_LIST, PACKAGE_LIST)
INDEX_ENTRY_PATTERN = re.compile(r"^(package|element)[^-]*-list$")

MODULE_PREFIX = "module:"
MODULE_KEY_SUFFIX = "-module"
ARTIFACT_KEY_SUFFIX = "-artifact"
