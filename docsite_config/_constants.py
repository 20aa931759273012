"""Common literal values used across docsite_config.

These constants keep the well-known configuration location and environment
prefix in one place so the CLI and tests import the same values. Intended for
internal use within the docsite_config package.

Examples
--------
>>> from docsite_config import _constants
>>> _constants.DEFAULT_CONFIG_PATH
'website/siteConfig.yaml'
>>> _constants.ENV_PREFIX + "CONFIG"
'INPUT_CONFIG'
"""

DEFAULT_CONFIG_PATH = "website/siteConfig.yaml"
ENV_PREFIX = "INPUT_"
