"""Sauce Labs REST client.

A Python client for the Sauce Labs REST API. Provides endpoints for platform information, real devices and their
test assets, storage, accounts, and Sauce Connect tunnels.
"""

# Version information
__version__ = "0.1.0"

# Import main classes/functions that users should access
from .client import SauceREST, DATA_CENTERS
from .assets import AssetKind, PollingConfig
from .errors import SauceRESTError, MissingResponseError, LogFormatError
from .real_devices import RealDevicesEndpoint
from .platforms import PlatformEndpoint
from .storage import StorageEndpoint
from .accounts import AccountsEndpoint
from .sauce_connect import SauceConnectEndpoint

# Define what gets imported with "from saucerest import *"
__all__ = [
    "SauceREST",
    "DATA_CENTERS",
    "AssetKind",
    "PollingConfig",
    "SauceRESTError",
    "MissingResponseError",
    "LogFormatError",
    "RealDevicesEndpoint",
    "PlatformEndpoint",
    "StorageEndpoint",
    "AccountsEndpoint",
    "SauceConnectEndpoint",
]

import logging
logging.getLogger(__name__).addHandler(logging.NullHandler())
